"""Keyboard, swipe and on-screen button adapters.

Each adapter only translates raw input into a direction or a named action;
:class:`~classic_snake.game.SnakeApp` forwards those to the loop.
"""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from .config import (
    BOARD_PIXELS,
    DIRECTIONS,
    HUD_HEIGHT,
    KEY_TO_DIRECTION,
    SWIPE_THRESHOLD,
    WINDOW_WIDTH,
)
from .state import Direction

ACTION_START = "start"
ACTION_TOGGLE = "toggle"
ACTION_RESET = "reset"
ACTION_SPEED = "speed"

def direction_for_key(key: int) -> Direction | None:
    """Map arrow keys and WASD to a unit direction."""
    name = KEY_TO_DIRECTION.get(key)
    return DIRECTIONS[name] if name else None


def direction_for_action(action: str) -> Direction | None:
    return DIRECTIONS.get(action)


class SwipeDecoder:
    """Turn a touch-down/touch-up pair into at most one direction."""

    def __init__(self, threshold: float = SWIPE_THRESHOLD) -> None:
        self.threshold = threshold
        self._origin: tuple[float, float] | None = None

    @property
    def tracking(self) -> bool:
        return self._origin is not None

    def begin(self, x: float, y: float) -> None:
        self._origin = (x, y)

    def end(self, x: float, y: float) -> Direction | None:
        if self._origin is None:
            return None
        dx = x - self._origin[0]
        dy = y - self._origin[1]
        self._origin = None

        ax, ay = abs(dx), abs(dy)
        if ax < self.threshold and ay < self.threshold:
            return None
        if ax > ay:
            return (1, 0) if dx > 0 else (-1, 0)
        return (0, 1) if dy > 0 else (0, -1)


@dataclass(slots=True)
class Button:
    action: str
    label: str
    rect: pygame.Rect


class ButtonPanel:
    """Start/Pause/Reset/Speed row plus a d-pad below the board."""

    def __init__(self, top: int = HUD_HEIGHT + BOARD_PIXELS) -> None:
        self.top = top
        self.buttons: list[Button] = []
        self._layout()

    def _layout(self) -> None:
        margin = 10
        row_height = 34
        labels = (
            (ACTION_START, "Start"),
            (ACTION_TOGGLE, "Pause"),
            (ACTION_RESET, "Reset"),
            (ACTION_SPEED, "Speed"),
        )
        width = (WINDOW_WIDTH - margin * (len(labels) + 1)) // len(labels)
        y = self.top + margin
        for idx, (action, label) in enumerate(labels):
            x = margin + idx * (width + margin)
            rect = pygame.Rect(x, y, width, row_height)
            self.buttons.append(Button(action, label, rect))

        pad = 30
        gap = 4
        cx = WINDOW_WIDTH // 2
        pad_top = y + row_height + margin
        middle = pad_top + pad + gap
        left = cx - pad // 2
        self.buttons.extend(
            [
                Button("UP", "^", pygame.Rect(left, pad_top, pad, pad)),
                Button("LEFT", "<", pygame.Rect(left - pad - gap, middle, pad, pad)),
                Button("RIGHT", ">", pygame.Rect(left + pad + gap, middle, pad, pad)),
                Button("DOWN", "v", pygame.Rect(left, middle + pad + gap, pad, pad)),
            ]
        )

    def hit(self, pos: tuple[int, int]) -> str | None:
        for button in self.buttons:
            if button.rect.collidepoint(pos):
                return button.action
        return None
