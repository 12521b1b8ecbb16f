# -*- coding: utf-8 -*-
"""Qt-free game engines: pure transition functions plus a stateful Engine per game."""
from minigames.engines.base import Engine, Reset
from minigames.engines.hangman import HangmanEngine
from minigames.engines.memory import MemoryEngine
from minigames.engines.rps import RpsEngine
from minigames.engines.snake import SnakeEngine
from minigames.engines.tictactoe import TicTacToeEngine

__all__ = [
    "Engine",
    "Reset",
    "TicTacToeEngine",
    "MemoryEngine",
    "RpsEngine",
    "SnakeEngine",
    "HangmanEngine",
]
