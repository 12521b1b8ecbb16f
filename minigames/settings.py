import os
import json
from pathlib import Path

BRAND_NAME = "Mini Games"
TAGLINE = "Play, learn, repeat."

LANG_DEFAULT = "fa"  # 'fa' یا 'en'

# زمان‌بندی‌ها (میلی‌ثانیه)
TICTACTOE_COMPUTER_DELAY_MS = 500
MEMORY_RESOLVE_DELAY_MS = 1000
MEMORY_CLOCK_MS = 1000
SNAKE_TICK_MS = 150

SNAKE_GRID = (20, 20)
SNAKE_START = (5, 5)

HANGMAN_MAX_WRONG = 6
HANGMAN_WORDS = [
    ("rainbow", "Colorful light display in sky during rain."),
    ("butterfly", "Beautiful insect with colorful wings."),
    ("elephant", "Large animal with a trunk."),
    ("chocolate", "Sweet treat loved by many."),
    ("airplane", "Flying vehicle in the sky."),
    ("computer", "Electronic device for work and play."),
    ("birthday", "Special day that comes once a year."),
    ("mountain", "Very tall natural formation."),
]

MEMORY_SYMBOLS = [
    "diamond",
    "heart",
    "star",
    "circle",
    "square",
    "triangle",
    "hexagon",
    "crown",
]

GAME_ORDER = ["tictactoe", "rps", "hangman", "memory", "snake"]  # ترتیب تب‌ها


def user_data_path():
    base = os.environ.get("LOCALAPPDATA") or os.path.expanduser("~")
    return Path(base) / "MiniGames"


SETTINGS_PATH = str(user_data_path() / "settings.json")

DEFAULT_USER_SETTINGS = {"lang": LANG_DEFAULT, "tab": GAME_ORDER[0]}


def load_user_settings(path: str = SETTINGS_PATH) -> dict:
    data = dict(DEFAULT_USER_SETTINGS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data.update(json.load(f))
    except (OSError, ValueError):
        pass
    return data


def save_user_settings(data: dict, path: str = SETTINGS_PATH):
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
