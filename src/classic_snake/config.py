"""Centralized configuration and palette definitions for Classic Snake."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pygame


def _default_data_dir() -> Path:
    """Return a platform-appropriate user data directory for saves."""

    if sys.platform.startswith("win"):
        base = Path(os.getenv("LOCALAPPDATA") or Path.home() / "AppData" / "Local")
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.getenv("XDG_DATA_HOME") or Path.home() / ".local" / "share")
    return base / "classic-snake"


DATA_DIR = Path(os.getenv("CLASSIC_SNAKE_DATA_DIR") or _default_data_dir())
HIGHSCORE_FILE = Path(
    os.getenv("CLASSIC_SNAKE_HIGHSCORE_FILE") or DATA_DIR / "highscore.txt"
)
# "0", "false" or "no" keeps the high score in memory for the session only.
_persist = os.getenv("CLASSIC_SNAKE_PERSIST", "1").lower()
PERSIST_HIGH_SCORE: bool = _persist not in ("0", "false", "no")
LOG_LEVEL: str = os.getenv("CLASSIC_SNAKE_LOG_LEVEL", "WARNING").upper()

BOARD_PIXELS: int = 420  # 420 / 20 => 21 cells
CELL: int = 20
GRID_COLS: int = BOARD_PIXELS // CELL
GRID_ROWS: int = BOARD_PIXELS // CELL

HUD_HEIGHT: int = 36
PANEL_HEIGHT: int = 160
WINDOW_WIDTH: int = BOARD_PIXELS
WINDOW_HEIGHT: int = HUD_HEIGHT + BOARD_PIXELS + PANEL_HEIGHT

FONT_NAME: str = "consolas"
FONT_SIZE: int = 22
SMALL_FONT_SIZE: int = 16

FPS: int = 60
SWIPE_THRESHOLD: int = 20

# Ordered slowest to fastest; values are tick periods in milliseconds.
SPEED_PRESETS: dict[str, int] = {
    "Slow": 200,
    "Normal": 130,
    "Fast": 90,
    "Insane": 60,
}
DEFAULT_SPEED: str = os.getenv("CLASSIC_SNAKE_SPEED", "Normal")
if DEFAULT_SPEED not in SPEED_PRESETS:
    DEFAULT_SPEED = "Normal"
DEFAULT_TICK_MS: int = SPEED_PRESETS[DEFAULT_SPEED]

DIRECTIONS: dict[str, tuple[int, int]] = {
    "UP": (0, -1),
    "DOWN": (0, 1),
    "LEFT": (-1, 0),
    "RIGHT": (1, 0),
}
KEY_TO_DIRECTION = {
    pygame.K_UP: "UP",
    pygame.K_w: "UP",
    pygame.K_DOWN: "DOWN",
    pygame.K_s: "DOWN",
    pygame.K_LEFT: "LEFT",
    pygame.K_a: "LEFT",
    pygame.K_RIGHT: "RIGHT",
    pygame.K_d: "RIGHT",
}
KEY_TO_SPEED = {
    pygame.K_1: "Slow",
    pygame.K_2: "Normal",
    pygame.K_3: "Fast",
    pygame.K_4: "Insane",
}

PALETTE = {
    "bg": pygame.Color(17, 19, 22),
    "grid": pygame.Color(26, 29, 34),
    "snake_head": pygame.Color(64, 196, 99),
    "snake_body": pygame.Color(42, 168, 74),
    "food": pygame.Color(255, 77, 79),
    "text": pygame.Color(230, 237, 243),
    "muted": pygame.Color(139, 148, 158),
    "overlay": pygame.Color(0, 0, 0, 90),
    "panel": pygame.Color(22, 27, 34),
    "button": pygame.Color(33, 38, 45),
    "button_hover": pygame.Color(48, 54, 61),
    "button_border": pygame.Color(68, 76, 86),
}
