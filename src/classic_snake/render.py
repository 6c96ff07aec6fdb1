"""Pygame drawing for the board, HUD, control panel and overlays."""

from __future__ import annotations

import pygame

from .config import (
    BOARD_PIXELS,
    CELL,
    FONT_NAME,
    FONT_SIZE,
    HUD_HEIGHT,
    PALETTE,
    SMALL_FONT_SIZE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .controls import ACTION_TOGGLE, ButtonPanel
from .state import Cell, GameState, RunState


class Renderer:
    """Paint a :class:`GameState` snapshot; holds fonts and the static grid."""

    def __init__(self, panel: ButtonPanel) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.panel = panel
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE, bold=True)
        self.small_font = pygame.font.SysFont(FONT_NAME, SMALL_FONT_SIZE)
        self.board_rect = pygame.Rect(0, HUD_HEIGHT, BOARD_PIXELS, BOARD_PIXELS)
        self.background = self._build_background()

    def _build_background(self) -> pygame.Surface:
        """Draw the grid once so each frame is a single blit."""
        surface = pygame.Surface((BOARD_PIXELS, BOARD_PIXELS))
        surface.fill(PALETTE["bg"])
        for i in range(CELL, BOARD_PIXELS, CELL):
            pygame.draw.line(surface, PALETTE["grid"], (i, 0), (i, BOARD_PIXELS), 1)
            pygame.draw.line(surface, PALETTE["grid"], (0, i), (BOARD_PIXELS, i), 1)
        return surface

    def cell_rect(self, cell: Cell) -> pygame.Rect:
        x, y = cell
        return pygame.Rect(
            self.board_rect.left + x * CELL + 1,
            self.board_rect.top + y * CELL + 1,
            CELL - 2,
            CELL - 2,
        )

    # --- Pieces --------------------------------------------------------

    def _draw_snake(self, surface: pygame.Surface, state: GameState) -> None:
        for idx, cell in enumerate(state.snake):
            color = PALETTE["snake_head"] if idx == 0 else PALETTE["snake_body"]
            pygame.draw.rect(surface, color, self.cell_rect(cell), border_radius=3)

    def _draw_food(self, surface: pygame.Surface, state: GameState) -> None:
        if state.food is None:
            return
        pygame.draw.rect(surface, PALETTE["food"], self.cell_rect(state.food))

    def _draw_hud(
        self, surface: pygame.Surface, state: GameState, speed_name: str | None
    ) -> None:
        hud_rect = pygame.Rect(0, 0, WINDOW_WIDTH, HUD_HEIGHT)
        surface.fill(PALETTE["panel"], hud_rect)
        text = f"SCORE {state.score:03}   BEST {state.high_score:03}"
        score = self.small_font.render(text, True, PALETTE["text"])
        surface.blit(score, score.get_rect(midleft=(10, HUD_HEIGHT // 2)))
        if speed_name:
            speed = self.small_font.render(speed_name.upper(), True, PALETTE["muted"])
            surface.blit(
                speed, speed.get_rect(midright=(WINDOW_WIDTH - 10, HUD_HEIGHT // 2))
            )

    def _draw_panel(
        self,
        surface: pygame.Surface,
        state: GameState,
        hover: tuple[int, int] | None,
    ) -> None:
        top = self.board_rect.bottom
        panel_rect = pygame.Rect(0, top, WINDOW_WIDTH, WINDOW_HEIGHT - top)
        surface.fill(PALETTE["panel"], panel_rect)
        for button in self.panel.buttons:
            hovered = hover is not None and button.rect.collidepoint(hover)
            fill = PALETTE["button_hover"] if hovered else PALETTE["button"]
            pygame.draw.rect(surface, fill, button.rect, border_radius=6)
            pygame.draw.rect(
                surface, PALETTE["button_border"], button.rect, width=1, border_radius=6
            )
            label = button.label
            if button.action == ACTION_TOGGLE and state.run_state is RunState.PAUSED:
                label = "Resume"
            text = self.small_font.render(label, True, PALETTE["text"])
            surface.blit(text, text.get_rect(center=button.rect.center))

    def _draw_overlay(self, surface: pygame.Surface, lines: list[str]) -> None:
        overlay = pygame.Surface(self.board_rect.size, pygame.SRCALPHA)
        overlay.fill(PALETTE["overlay"])
        line_height = FONT_SIZE + 6
        top = BOARD_PIXELS // 2 - (len(lines) - 1) * line_height // 2
        for idx, text in enumerate(lines):
            font = self.font if idx == 0 else self.small_font
            surf = font.render(text, True, PALETTE["text"])
            overlay.blit(
                surf, surf.get_rect(center=(BOARD_PIXELS // 2, top + idx * line_height))
            )
        surface.blit(overlay, self.board_rect.topleft)

    def overlay_lines(self, state: GameState) -> list[str]:
        if state.run_state is RunState.IDLE:
            return ["Snake", "Press SPACE or Start to play"]
        if state.run_state is RunState.PAUSED:
            return ["Paused", "Press SPACE to resume"]
        if state.run_state is RunState.GAME_OVER:
            title = "Board cleared!" if state.board_full else "Game Over"
            return [
                title,
                f"Score: {state.score}  -  High: {state.high_score}",
                "Press Reset or Start to play again",
            ]
        return []

    # --- Frame ---------------------------------------------------------

    def draw(
        self,
        surface: pygame.Surface,
        state: GameState,
        *,
        speed_name: str | None = None,
        hover: tuple[int, int] | None = None,
    ) -> None:
        """Render the whole window: HUD, board, overlay and control panel."""
        self._draw_hud(surface, state, speed_name)
        surface.blit(self.background, self.board_rect.topleft)
        self._draw_snake(surface, state)
        self._draw_food(surface, state)
        lines = self.overlay_lines(state)
        if lines:
            self._draw_overlay(surface, lines)
        self._draw_panel(surface, state, hover)
