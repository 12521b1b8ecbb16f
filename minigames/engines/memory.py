# -*- coding: utf-8 -*-
"""
Memory Match: 2N face-down cards, each symbol twice.

At most two cards are staged face-up; once the second one is staged the pair
is resolved after MEMORY_RESOLVE_DELAY_MS. While a pair is staged no other card
can be flipped.
"""
import logging
import random
from dataclasses import dataclass, replace

from minigames.engines.base import Engine
from minigames.settings import MEMORY_CLOCK_MS, MEMORY_RESOLVE_DELAY_MS, MEMORY_SYMBOLS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Card:
    id: int
    symbol: str
    is_flipped: bool = False
    is_matched: bool = False


@dataclass(frozen=True)
class MemoryState:
    cards: tuple = ()
    staged: tuple = ()
    move_count: int = 0
    is_won: bool = False
    elapsed: int = 0  # seconds

    @property
    def pairs_total(self) -> int:
        return len(self.cards) // 2

    @property
    def pairs_matched(self) -> int:
        return sum(1 for c in self.cards if c.is_matched) // 2

    def card(self, card_id: int):
        for c in self.cards:
            if c.id == card_id:
                return c
        return None


@dataclass(frozen=True)
class Flip:
    card_id: int


@dataclass(frozen=True)
class NewGame:
    pass


def deal(symbols, rng=random) -> MemoryState:
    symbols = list(symbols)
    if not symbols:
        raise ValueError("memory game needs at least one symbol")
    if len(set(symbols)) != len(symbols):
        raise ValueError("memory symbols must be distinct")
    cards = []
    for i, s in enumerate(symbols):
        cards.append(Card(i * 2, s))
        cards.append(Card(i * 2 + 1, s))
    rng.shuffle(cards)
    return MemoryState(cards=tuple(cards))


def _update_cards(cards, ids, **changes):
    return tuple(replace(c, **changes) if c.id in ids else c for c in cards)


def flip(state: MemoryState, card_id: int) -> MemoryState:
    if state.is_won or len(state.staged) >= 2:
        return state
    card = state.card(card_id)
    if card is None or card.is_flipped or card.is_matched:
        return state
    return replace(
        state,
        cards=_update_cards(state.cards, {card_id}, is_flipped=True),
        staged=state.staged + (card_id,),
    )


def resolve(state: MemoryState) -> MemoryState:
    """Settle a staged pair: matched cards stay revealed, a miss turns both face down."""
    if len(state.staged) != 2:
        return state
    a, b = (state.card(i) for i in state.staged)
    ids = set(state.staged)
    if a.symbol == b.symbol:
        cards = _update_cards(state.cards, ids, is_matched=True)
    else:
        cards = _update_cards(state.cards, ids, is_flipped=False)
    return replace(
        state,
        cards=cards,
        staged=(),
        move_count=state.move_count + 1,
        is_won=all(c.is_matched for c in cards),
    )


def format_time(seconds: int) -> str:
    return f"{seconds // 60}:{seconds % 60:02d}"


class MemoryEngine(Engine):
    kind = "memory"
    actions = {Flip: "flip", NewGame: "reset"}

    def __init__(self, symbols=None, rng=None, **kw):
        self.symbols = list(MEMORY_SYMBOLS if symbols is None else symbols)
        self.rng = rng or random.Random()
        super().__init__(**kw)
        self._start_clock()

    def initial_state(self):
        return deal(self.symbols, self.rng)

    def initialize(self, symbols):
        """Switch to a new symbol set. A rejected set leaves the current game untouched."""
        symbols = list(symbols)
        state = deal(symbols, self.rng)
        self.symbols = symbols
        self.cancel_timers()
        self._set_state(state)
        self._start_clock()

    def reset(self):
        super().reset()
        self._start_clock()

    def flip(self, card_id: int):
        prev = self.state
        nxt = flip(prev, card_id)
        if nxt is prev:
            logger.debug("memory: ignored flip of card %s", card_id)
            return
        self._set_state(nxt)
        if len(nxt.staged) == 2:
            self._call_later("resolve", MEMORY_RESOLVE_DELAY_MS, self._resolve)

    def _resolve(self):
        nxt = resolve(self.state)
        self._set_state(nxt)
        if nxt.is_won:
            self._cancel("clock")
            logger.info("memory: won in %d moves", nxt.move_count)
            self.notifier.success(
                self.t("memory.won", moves=nxt.move_count, time=format_time(nxt.elapsed))
            )

    def _start_clock(self):
        self._call_later("clock", MEMORY_CLOCK_MS, self._clock_tick)

    def _clock_tick(self):
        if self.state.is_won:
            return
        self._set_state(replace(self.state, elapsed=self.state.elapsed + 1))
        self._start_clock()
