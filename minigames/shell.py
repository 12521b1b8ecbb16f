# -*- coding: utf-8 -*-
"""
Game shell: which game is mounted, nothing more.

GAME_REGISTRY is the closed set of game kinds (a tagged union keyed by `kind`).
GameShell keeps exactly one engine alive; selecting another kind tears the
current one down first so none of its timers or key listeners outlive it.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from minigames.engines import (
    Engine,
    HangmanEngine,
    MemoryEngine,
    RpsEngine,
    SnakeEngine,
    TicTacToeEngine,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameEntry:
    kind: str
    title_key: str
    factory: Callable[..., Engine]


GAME_REGISTRY = {
    "tictactoe": GameEntry("tictactoe", "tab.tictactoe", TicTacToeEngine),
    "rps": GameEntry("rps", "tab.rps", RpsEngine),
    "hangman": GameEntry("hangman", "tab.hangman", HangmanEngine),
    "memory": GameEntry("memory", "tab.memory", MemoryEngine),
    "snake": GameEntry("snake", "tab.snake", SnakeEngine),
}


@dataclass(frozen=True)
class ActiveGame:
    kind: str
    engine: Engine

    @property
    def state(self):
        return self.engine.state

    def dispatch(self, action):
        self.engine.dispatch(action)

    def reset(self):
        self.engine.reset()


class GameShell:
    def __init__(self, scheduler=None, notifier=None, t=None, key_source=None):
        self.scheduler = scheduler
        self.notifier = notifier
        self.t = t
        self.key_source = key_source
        self.active: Optional[ActiveGame] = None

    def engine_kwargs(self, kind: str) -> dict:
        kw = {"scheduler": self.scheduler, "notifier": self.notifier, "t": self.t}
        if kind == "snake":
            kw["key_source"] = self.key_source
        return kw

    def select(self, kind: str) -> ActiveGame:
        entry = GAME_REGISTRY.get(kind)
        if entry is None:
            raise KeyError(f"unknown game: {kind}")
        if self.active is not None and self.active.kind == kind:
            return self.active
        self.unmount()
        self.active = ActiveGame(kind, entry.factory(**self.engine_kwargs(kind)))
        logger.info("shell: mounted %s", kind)
        return self.active

    def unmount(self):
        if self.active is None:
            return
        self.active.engine.teardown()
        logger.info("shell: unmounted %s", self.active.kind)
        self.active = None

    def dispatch(self, action):
        if self.active is not None:
            self.active.dispatch(action)
