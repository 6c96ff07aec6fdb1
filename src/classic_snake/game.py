"""Pygame window, event pump and frame clock around the game loop."""

from __future__ import annotations

import logging

import pygame

from .config import (
    FPS,
    GRID_COLS,
    GRID_ROWS,
    HIGHSCORE_FILE,
    KEY_TO_SPEED,
    LOG_LEVEL,
    PERSIST_HIGH_SCORE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .controls import (
    ACTION_RESET,
    ACTION_SPEED,
    ACTION_START,
    ACTION_TOGGLE,
    ButtonPanel,
    SwipeDecoder,
    direction_for_action,
    direction_for_key,
)
from .loop import GameLoop, ScoreStore
from .render import Renderer
from .state import GameState
from .storage import HighScoreStore, MemoryStore

logger = logging.getLogger(__name__)


class SnakeApp:
    """Owns the window and translates pygame events into loop commands."""

    def __init__(self, store: ScoreStore | None = None) -> None:
        pygame.init()
        self._base_window_flags = pygame.DOUBLEBUF | pygame.SCALED
        self.fullscreen = False
        self.window = pygame.display.set_mode(
            (WINDOW_WIDTH, WINDOW_HEIGHT), self._base_window_flags
        )
        pygame.display.set_caption("Snake")

        self.panel = ButtonPanel()
        self.renderer = Renderer(self.panel)
        self.swipe = SwipeDecoder()
        self.hover: tuple[int, int] | None = None
        self._dirty = True

        if store is None and PERSIST_HIGH_SCORE:
            store = HighScoreStore(HIGHSCORE_FILE)
        elif store is None:
            store = MemoryStore()
        self.state = GameState(GRID_COLS, GRID_ROWS)
        self.loop = GameLoop(
            self.state,
            store,
            on_render=self._mark_dirty,
        )

    def _mark_dirty(self, _state: GameState) -> None:
        self._dirty = True

    def _apply_display_mode(self) -> None:
        """Recreate the main window honoring the fullscreen toggle."""
        flags = self._base_window_flags
        if self.fullscreen:
            flags |= pygame.FULLSCREEN
        self.window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), flags)
        self._dirty = True

    # --- Input -----------------------------------------------------------

    def dispatch_action(self, action: str) -> None:
        """Run a named on-screen button action."""
        if action == ACTION_START:
            self.loop.start()
        elif action == ACTION_TOGGLE:
            self.loop.toggle()
        elif action == ACTION_RESET:
            self.loop.reset()
        elif action == ACTION_SPEED:
            self.loop.cycle_speed()
        else:
            direction = direction_for_action(action)
            if direction:
                self.loop.request_direction(direction)

    def handle_key(self, key: int) -> bool:
        """Apply one key press; returns ``False`` when the player quits."""
        if key in (pygame.K_ESCAPE, pygame.K_q):
            return False
        if key == pygame.K_SPACE:
            self.loop.toggle()
        elif key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.loop.start()
        elif key == pygame.K_r:
            self.loop.reset()
        elif key in (pygame.K_f, pygame.K_F11):
            self.fullscreen = not self.fullscreen
            self._apply_display_mode()
        elif key in KEY_TO_SPEED:
            self.loop.set_speed_preset(KEY_TO_SPEED[key])
        else:
            direction = direction_for_key(key)
            if direction:
                self.loop.request_direction(direction)
        return True

    def handle_events(self) -> bool:
        """Handle window/keyboard/touch events and translate them into intents."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if not self.handle_key(event.key):
                    return False
            elif event.type == pygame.FINGERDOWN:
                self.swipe.begin(event.x * WINDOW_WIDTH, event.y * WINDOW_HEIGHT)
            elif event.type == pygame.FINGERUP:
                direction = self.swipe.end(
                    event.x * WINDOW_WIDTH, event.y * WINDOW_HEIGHT
                )
                if direction:
                    self.loop.request_direction(direction)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                action = self.panel.hit(event.pos)
                if action:
                    self.dispatch_action(action)
            elif event.type == pygame.MOUSEMOTION:
                previous = self.panel.hit(self.hover) if self.hover else None
                if self.panel.hit(event.pos) != previous:
                    self._dirty = True
                self.hover = event.pos
        return True

    # --- Main loop -------------------------------------------------------

    def draw(self) -> None:
        self.renderer.draw(
            self.window, self.state, speed_name=self.loop.speed_name, hover=self.hover
        )

    def run(self) -> None:
        """Pump events, feed frame time to the tick scheduler, redraw on change."""
        clock = pygame.time.Clock()
        running = True
        logger.info("high score file: %s", HIGHSCORE_FILE)

        while running:
            elapsed_ms = clock.tick(FPS)
            running = self.handle_events()
            self.loop.update(elapsed_ms)

            if self._dirty:
                self.draw()
                pygame.display.flip()
                self._dirty = False

        pygame.quit()


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    SnakeApp().run()


if __name__ == "__main__":
    main()
