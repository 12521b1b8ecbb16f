# -*- coding: utf-8 -*-
# مترجم سبک: کلیدها => ترجمه‌ی fa/en
from dataclasses import dataclass


@dataclass(frozen=True)
class Lang:
    code: str  # 'fa' یا 'en'
    rtl: bool


FA = Lang("fa", True)
EN = Lang("en", False)

STRINGS = {
    # عمومی
    "app.title": {"fa": "بازی‌ها", "en": "Mini Games"},
    "tagline": {"fa": "بازی کن، یاد بگیر، تکرار کن.", "en": "Play, learn, repeat."},
    "reset": {"fa": "شروع دوباره", "en": "Reset"},
    "start": {"fa": "شروع", "en": "Start"},
    "lang.switch": {"fa": "English", "en": "فارسی"},
    # تب‌ها
    "tab.tictactoe": {"fa": "دوز", "en": "Tic Tac Toe"},
    "tab.rps": {"fa": "سنگ کاغذ قیچی", "en": "Rock Paper Scissors"},
    "tab.hangman": {"fa": "جلاد", "en": "Hangman"},
    "tab.memory": {"fa": "کارت حافظه", "en": "Memory Cards"},
    "tab.snake": {"fa": "مار", "en": "Snake"},
    # دوز
    "ttt.turn": {"fa": "نوبت: {mark}", "en": "Turn: {mark}"},
    "ttt.won": {"fa": "{mark} برنده شد!", "en": "{mark} won!"},
    "ttt.draw": {"fa": "مساوی شد!", "en": "It's a draw!"},
    "ttt.mode.player": {"fa": "دو نفره", "en": "Two players"},
    "ttt.mode.computer": {"fa": "در برابر رایانه", "en": "Vs computer"},
    # سنگ کاغذ قیچی
    "rps.rock": {"fa": "سنگ", "en": "Rock"},
    "rps.paper": {"fa": "کاغذ", "en": "Paper"},
    "rps.scissors": {"fa": "قیچی", "en": "Scissors"},
    "rps.win": {"fa": "این دور را بردی!", "en": "You won this round!"},
    "rps.lose": {"fa": "رایانه این دور را برد!", "en": "Computer won this round!"},
    "rps.tie": {"fa": "مساوی!", "en": "It's a tie!"},
    "rps.score": {"fa": "شما {player} - {computer} رایانه", "en": "You {player} - {computer} Computer"},
    # جلاد
    "hangman.won": {"fa": "آفرین! برنده شدی!", "en": "Congratulations! You won!"},
    "hangman.lost": {"fa": "باختی! کلمه «{word}» بود", "en": 'Game Over! The word was "{word}"'},
    "hangman.wrong": {"fa": "اشتباه: {count}/{limit}", "en": "Wrong: {count}/{limit}"},
    "hangman.hint": {"fa": "راهنما: {hint}", "en": "Hint: {hint}"},
    "hangman.new": {"fa": "کلمه‌ی جدید", "en": "New word"},
    # کارت حافظه
    "memory.won": {
        "fa": "آفرین! با {moves} حرکت در {time} بردی",
        "en": "Congratulations! You won in {moves} moves and {time}",
    },
    "memory.moves": {"fa": "حرکت‌ها: {moves}", "en": "Moves: {moves}"},
    "memory.pairs": {"fa": "جفت‌ها: {done}/{total}", "en": "Pairs: {done}/{total}"},
    "memory.time": {"fa": "زمان: {time}", "en": "Time: {time}"},
    "memory.new": {"fa": "بازی جدید", "en": "New Game"},
    # مار
    "snake.over": {"fa": "باختی! امتیاز: {score}", "en": "Game Over! Final score: {score}"},
    "snake.full": {"fa": "صفحه پر شد! امتیاز: {score}", "en": "Board filled! Final score: {score}"},
    "snake.score": {"fa": "امتیاز: {score}", "en": "Score: {score}"},
    "snake.best": {"fa": "بهترین: {best}", "en": "Best: {best}"},
    "snake.hint": {"fa": "با کلیدهای جهت مار را حرکت بده", "en": "Use arrow keys to control the snake"},
}


def tr(key: str, lang: str = "fa", **fmt) -> str:
    v = STRINGS.get(key, {})
    s = v.get(lang, v.get("en", key))
    try:
        return s.format(**fmt) if fmt else s
    except (KeyError, IndexError):
        return s


def translator(lang: str):
    """Bind `tr` to one language: the `t(key)` callable handed to engines."""
    return lambda key, **fmt: tr(key, lang, **fmt)
