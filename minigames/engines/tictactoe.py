# -*- coding: utf-8 -*-
"""
TicTacToe rules and engine.

Board: tuple of 9 cells, row-major, each None | Mark.X | Mark.O.
X (markA) always opens. In "computer" mode O is played by a minimax player
after a short delay.
"""
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from minigames.engines.base import Engine
from minigames.engines.board import Grid
from minigames.settings import TICTACTOE_COMPUTER_DELAY_MS

logger = logging.getLogger(__name__)

BOARD = Grid(3, 3)
WINNING_LINES = [tuple(BOARD.index_of(p) for p in line) for line in BOARD.lines()]


class Mark(str, Enum):
    X = "X"
    O = "O"

    @property
    def other(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X


DRAW = "draw"


@dataclass(frozen=True)
class TicTacToeState:
    cells: tuple = (None,) * 9
    turn: Mark = Mark.X
    outcome: Optional[str] = None  # None | "X" | "O" | "draw"

    @property
    def winner(self) -> Optional[Mark]:
        if self.outcome in (Mark.X, Mark.O):
            return Mark(self.outcome)
        return None

    @property
    def is_over(self) -> bool:
        return self.outcome is not None


@dataclass(frozen=True)
class PlayAt:
    index: int


def find_winner(cells) -> Optional[Mark]:
    for a, b, c in WINNING_LINES:
        if cells[a] is not None and cells[a] == cells[b] == cells[c]:
            return cells[a]
    return None


def empty_cells(cells) -> list[int]:
    return [i for i, v in enumerate(cells) if v is None]


def play_at(state: TicTacToeState, index: int) -> TicTacToeState:
    """Pure transition; returns `state` itself when the move is illegal."""
    if state.is_over or not 0 <= index < 9 or state.cells[index] is not None:
        return state
    cells = list(state.cells)
    cells[index] = state.turn
    cells = tuple(cells)
    if find_winner(cells) == state.turn:
        return replace(state, cells=cells, outcome=state.turn.value)
    if not empty_cells(cells):
        return replace(state, cells=cells, outcome=DRAW)
    return replace(state, cells=cells, turn=state.turn.other)


# ---- computer player
def minimax(cells: list, depth: int, maximizing: bool, me: Mark) -> int:
    winner = find_winner(cells)
    if winner == me:
        return 10 - depth
    if winner == me.other:
        return depth - 10
    free = empty_cells(cells)
    if not free:
        return 0
    mark = me if maximizing else me.other
    scores = []
    for i in free:
        cells[i] = mark
        scores.append(minimax(cells, depth + 1, not maximizing, me))
        cells[i] = None
    return max(scores) if maximizing else min(scores)


def best_move(cells, me: Mark = Mark.O) -> int:
    """Index of the strongest move for `me`; first index wins ties, -1 if the board is full."""
    board = list(cells)
    best_score, move = None, -1
    for i in empty_cells(board):
        board[i] = me
        score = minimax(board, 0, False, me)
        board[i] = None
        if best_score is None or score > best_score:
            best_score, move = score, i
    return move


class TicTacToeEngine(Engine):
    kind = "tictactoe"
    actions = {PlayAt: "play_at"}

    def __init__(self, mode: str = "player", **kw):
        self.mode = mode  # player | computer
        super().__init__(**kw)

    def initial_state(self):
        return TicTacToeState()

    def set_mode(self, mode: str):
        self.mode = mode
        self.reset()

    def play_at(self, index: int):
        if self.mode == "computer" and self.state.turn is Mark.O:
            # computer's reply is pending
            return
        self._apply(index)
        if self.mode == "computer" and not self.state.is_over and self.state.turn is Mark.O:
            self._call_later("computer", TICTACTOE_COMPUTER_DELAY_MS, self._computer_move)

    def _computer_move(self):
        move = best_move(self.state.cells, Mark.O)
        if move >= 0:
            self._apply(move)

    def _apply(self, index: int):
        prev = self.state
        nxt = play_at(prev, index)
        if nxt is prev:
            logger.debug("tictactoe: rejected move at %s", index)
            return
        self._set_state(nxt)
        if nxt.winner is not None:
            logger.info("tictactoe: %s wins", nxt.winner.value)
            self.notifier.success(self.t("ttt.won", mark=nxt.winner.value))
        elif nxt.outcome == DRAW:
            logger.info("tictactoe: draw")
            self.notifier.info(self.t("ttt.draw"))
