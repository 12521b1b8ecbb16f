# -*- coding: utf-8 -*-
"""Rock-Paper-Scissors against a uniformly random computer, scores kept until reset."""
import logging
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from minigames.engines.base import Engine

logger = logging.getLogger(__name__)


class Move(str, Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"

    @property
    def emoji(self) -> str:
        return EMOJI[self]


EMOJI = {Move.ROCK: "✊", Move.PAPER: "✋", Move.SCISSORS: "✌️"}

# key beats value
BEATS = {
    Move.ROCK: Move.SCISSORS,
    Move.SCISSORS: Move.PAPER,
    Move.PAPER: Move.ROCK,
}

WIN, LOSE, TIE = "win", "lose", "tie"


@dataclass(frozen=True)
class RpsState:
    player_choice: Optional[Move] = None
    computer_choice: Optional[Move] = None
    player_score: int = 0
    computer_score: int = 0
    last_result: Optional[str] = None


@dataclass(frozen=True)
class Choose:
    move: Move


def judge(player: Move, computer: Move) -> str:
    if player == computer:
        return TIE
    return WIN if BEATS[player] == computer else LOSE


def play_round(state: RpsState, player: Move, computer: Move) -> RpsState:
    result = judge(player, computer)
    return replace(
        state,
        player_choice=player,
        computer_choice=computer,
        player_score=state.player_score + (result == WIN),
        computer_score=state.computer_score + (result == LOSE),
        last_result=result,
    )


class RpsEngine(Engine):
    kind = "rps"
    actions = {Choose: "choose"}

    def __init__(self, rng=None, **kw):
        self.rng = rng or random.Random()
        super().__init__(**kw)

    def initial_state(self):
        return RpsState()

    def choose(self, move):
        try:
            move = Move(move)
        except ValueError:
            logger.debug("rps: unknown move %r", move)
            return
        computer = self.rng.choice(list(Move))
        nxt = play_round(self.state, move, computer)
        self._set_state(nxt)
        logger.debug("rps: %s vs %s -> %s", move.value, computer.value, nxt.last_result)
        if nxt.last_result == WIN:
            self.notifier.success(self.t("rps.win"))
        elif nxt.last_result == LOSE:
            self.notifier.error(self.t("rps.lose"))
        else:
            self.notifier.info(self.t("rps.tie"))
