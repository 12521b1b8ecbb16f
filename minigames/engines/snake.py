# -*- coding: utf-8 -*-
"""
Snake on a fixed grid.

States: idle -> running -> over, reset() goes back to idle.

Two direction slots:
- `direction` is what the last tick actually moved along (committed)
- `pending_direction` is the latest accepted key press, applied at the start of the next tick
A turn request is checked against the committed direction, so pressing
"up, left" within one tick while moving right cannot fold the head back into the neck.
"""
import logging
import random
from dataclasses import dataclass, replace
from typing import Optional

from minigames.engines.base import Engine
from minigames.engines.board import Direction, Grid, Point
from minigames.settings import SNAKE_GRID, SNAKE_START, SNAKE_TICK_MS

logger = logging.getLogger(__name__)

IDLE, RUNNING, OVER = "idle", "running", "over"


@dataclass(frozen=True)
class SnakeState:
    width: int = SNAKE_GRID[0]
    height: int = SNAKE_GRID[1]
    body: tuple = (Point(*SNAKE_START),)  # head first
    food: Optional[Point] = None
    direction: Optional[Direction] = None
    pending_direction: Optional[Direction] = None
    status: str = IDLE
    score: int = 0

    @property
    def grid(self) -> Grid:
        return Grid(self.width, self.height)

    @property
    def head(self) -> Point:
        return self.body[0]

    @property
    def filled(self) -> bool:
        return len(self.body) == self.width * self.height


@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class Turn:
    direction: Direction


@dataclass(frozen=True)
class KeyDown:
    key: str


def spawn_food(grid: Grid, body, rng=random) -> Optional[Point]:
    """Random free cell, None when the body covers the whole grid."""
    occupied = set(body)
    free = [c for c in grid.cells() if c not in occupied]
    return rng.choice(free) if free else None


def new_snake(width: int, height: int, start, rng=random) -> SnakeState:
    grid = Grid(width, height)
    start = Point(*start)
    if not grid.contains(start):
        raise ValueError(f"start cell {start} is outside {grid}")
    body = (start,)
    return SnakeState(width=width, height=height, body=body, food=spawn_food(grid, body, rng))


def start(state: SnakeState) -> SnakeState:
    if state.status != IDLE:
        return state
    return replace(
        state,
        status=RUNNING,
        direction=Direction.RIGHT,
        pending_direction=Direction.RIGHT,
    )


def turn(state: SnakeState, direction: Direction) -> SnakeState:
    if not isinstance(direction, Direction):
        return state
    if state.status != RUNNING or direction == state.pending_direction:
        return state
    if state.direction is not None and direction == state.direction.opposite:
        return state
    return replace(state, pending_direction=direction)


def step(state: SnakeState, rng=random) -> SnakeState:
    """Advance one tick. Hitting a wall or the body ends the run and freezes the body."""
    if state.status != RUNNING:
        return state
    direction = state.pending_direction or state.direction
    head = state.head + direction.value
    if not state.grid.contains(head) or head in state.body:
        return replace(state, direction=direction, status=OVER)

    body = (head,) + state.body
    if head == state.food:
        food = spawn_food(state.grid, body, rng)
        nxt = replace(state, body=body, food=food, direction=direction, score=state.score + 1)
        if food is None:
            nxt = replace(nxt, status=OVER)
        return nxt
    return replace(state, body=body[:-1], direction=direction)


class SnakeEngine(Engine):
    kind = "snake"
    actions = {Start: "start", Turn: "turn", KeyDown: "on_key"}

    def __init__(self, grid=SNAKE_GRID, start=SNAKE_START, rng=None, key_source=None, **kw):
        self.size = tuple(grid)
        self.start_cell = tuple(start)
        self.rng = rng or random.Random()
        self.key_source = key_source
        self.best = 0
        self._keys_attached = False
        super().__init__(**kw)

    def initial_state(self):
        return new_snake(self.size[0], self.size[1], self.start_cell, self.rng)

    # --- actions
    def start(self):
        nxt = start(self.state)
        if nxt is self.state:
            return
        self._set_state(nxt)
        self._attach_keys()
        self._schedule_tick()
        logger.debug("snake: started")

    def turn(self, direction: Direction):
        nxt = turn(self.state, direction)
        if nxt is self.state:
            logger.debug("snake: rejected turn %s", direction)
            return
        self._set_state(nxt)

    def on_key(self, key: str):
        direction = Direction.from_key(key)
        if direction is not None:
            self.turn(direction)

    def reset(self):
        self._detach_keys()
        super().reset()

    def teardown(self):
        self._detach_keys()
        super().teardown()

    # --- tick loop
    def _schedule_tick(self):
        self._call_later("tick", SNAKE_TICK_MS, self._tick)

    def _tick(self):
        nxt = step(self.state, self.rng)
        self._set_state(nxt)
        if nxt.status == RUNNING:
            self._schedule_tick()
        else:
            self._game_over(nxt)

    def _game_over(self, state: SnakeState):
        self._cancel("tick")
        self._detach_keys()
        self.best = max(self.best, state.score)
        logger.info("snake: over with score %d (best %d)", state.score, self.best)
        if state.filled:
            self.notifier.success(self.t("snake.full", score=state.score))
        else:
            self.notifier.error(self.t("snake.over", score=state.score))

    # --- keyboard
    def _attach_keys(self):
        if self.key_source is not None and not self._keys_attached:
            self.key_source.attach(self.on_key)
            self._keys_attached = True

    def _detach_keys(self):
        if self.key_source is not None and self._keys_attached:
            self.key_source.detach(self.on_key)
            self._keys_attached = False
