# -*- coding: utf-8 -*-
"""Hangman: guess the word letter by letter with a fixed budget of wrong guesses."""
import logging
import random
from dataclasses import dataclass, replace

from minigames.engines.base import Engine
from minigames.settings import HANGMAN_MAX_WRONG, HANGMAN_WORDS

logger = logging.getLogger(__name__)

PLAYING, WON, LOST = "playing", "won", "lost"
PLACEHOLDER = "_"


@dataclass(frozen=True)
class HangmanState:
    word: str = ""
    hint: str = ""
    guessed: frozenset = frozenset()
    wrong_count: int = 0
    status: str = PLAYING
    max_guesses: int = HANGMAN_MAX_WRONG


@dataclass(frozen=True)
class Guess:
    letter: str


@dataclass(frozen=True)
class NewWord:
    pass


def new_game(word: str, hint: str = "", max_guesses: int = HANGMAN_MAX_WRONG) -> HangmanState:
    return HangmanState(word=word.lower(), hint=hint, max_guesses=max_guesses)


def guess(state: HangmanState, letter: str) -> HangmanState:
    if not isinstance(letter, str):
        return state
    letter = letter.lower()
    if len(letter) != 1 or not letter.isalpha():
        return state
    if state.status != PLAYING or letter in state.guessed:
        return state
    guessed = state.guessed | {letter}
    wrong = state.wrong_count + (letter not in state.word)
    # won is checked first: the last correct letter wins even on the final attempt
    if set(state.word) <= guessed:
        status = WON
    elif wrong >= state.max_guesses:
        status = LOST
    else:
        status = PLAYING
    return replace(state, guessed=guessed, wrong_count=wrong, status=status)


def masked_word(state: HangmanState, placeholder: str = PLACEHOLDER) -> str:
    return " ".join(ch if ch in state.guessed else placeholder for ch in state.word)


class HangmanEngine(Engine):
    kind = "hangman"
    actions = {Guess: "guess", NewWord: "new_game"}

    def __init__(self, words=None, rng=None, **kw):
        self.words = list(HANGMAN_WORDS if words is None else words)
        if not self.words:
            raise ValueError("hangman needs a non-empty word list")
        self.rng = rng or random.Random()
        super().__init__(**kw)

    def initial_state(self):
        entry = self.rng.choice(self.words)
        word, hint = (entry, "") if isinstance(entry, str) else entry
        return new_game(word, hint)

    def new_game(self):
        self.reset()

    def guess(self, letter: str):
        prev = self.state
        nxt = guess(prev, letter)
        if nxt is prev:
            logger.debug("hangman: ignored guess %r", letter)
            return
        self._set_state(nxt)
        if nxt.status == WON:
            logger.info("hangman: won with %d wrong guesses", nxt.wrong_count)
            self.notifier.success(self.t("hangman.won"))
        elif nxt.status == LOST:
            logger.info("hangman: lost, word was %s", nxt.word)
            self.notifier.error(self.t("hangman.lost", word=nxt.word.upper()))
