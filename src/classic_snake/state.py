"""Grid snake simulation: movement, collisions, growth and food placement.

Nothing in here knows about pygame, timers or input devices.  The loop
drives :meth:`GameState.advance` once per tick and input adapters only ever
reach :meth:`GameState.set_direction`.
"""

from __future__ import annotations

import enum
import logging
import random

logger = logging.getLogger(__name__)

Cell = tuple[int, int]
Direction = tuple[int, int]

RIGHT: Direction = (1, 0)
LEFT: Direction = (-1, 0)
DOWN: Direction = (0, 1)
UP: Direction = (0, -1)
UNIT_DIRECTIONS: frozenset[Direction] = frozenset((RIGHT, LEFT, DOWN, UP))

START_LENGTH: int = 3


class RunState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class TickOutcome(enum.Enum):
    """What a single :meth:`GameState.advance` call did."""

    MOVED = "moved"
    ATE = "ate"
    COLLIDED = "collided"
    BOARD_FULL = "board_full"


class GameState:
    """Board, snake, food and score for one game plus the running high score."""

    def __init__(
        self,
        cols: int = 21,
        rows: int = 21,
        *,
        high_score: int = 0,
        rng: random.Random | None = None,
    ) -> None:
        # The starting snake extends left from the center column.
        if cols // 2 < START_LENGTH - 1 or rows < 1:
            raise ValueError(f"board {cols}x{rows} cannot hold a starting snake")
        self.cols = cols
        self.rows = rows
        self.high_score: int = max(0, high_score)
        self.rng = rng or random.Random()

        self.snake: list[Cell] = []
        self.direction: Direction = RIGHT
        self.queued_direction: Direction = RIGHT
        self.food: Cell | None = None
        self.score: int = 0
        self.board_full: bool = False
        self.run_state = RunState.IDLE

        self.reset()

    # --- Queries -------------------------------------------------------

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def capacity(self) -> int:
        return self.cols * self.rows

    @property
    def game_over(self) -> bool:
        return self.run_state is RunState.GAME_OVER

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.cols and 0 <= y < self.rows

    def occupies(self, cell: Cell) -> bool:
        return cell in self.snake

    def free_cells(self) -> list[Cell]:
        """Enumerate every board cell the snake is not sitting on."""
        taken = set(self.snake)
        return [
            (x, y)
            for y in range(self.rows)
            for x in range(self.cols)
            if (x, y) not in taken
        ]

    # --- Lifecycle -----------------------------------------------------

    def reset(self) -> None:
        """Start a fresh game; the high score survives."""
        cx = self.cols // 2
        cy = self.rows // 2
        self.snake = [(cx - i, cy) for i in range(START_LENGTH)]
        self.direction = RIGHT
        self.queued_direction = RIGHT
        self.score = 0
        self.board_full = False
        self.food = None
        self.run_state = RunState.IDLE
        self.place_food()

    def set_direction(self, dx: int, dy: int) -> bool:
        """Queue a turn for the next tick.

        Requests that are not one of the four unit steps, or that would
        reverse the committed direction, are dropped.  Several accepted
        requests within one tick overwrite each other; the last one wins.
        """
        requested = (dx, dy)
        if requested not in UNIT_DIRECTIONS:
            return False
        if requested == (-self.direction[0], -self.direction[1]):
            return False
        if requested != self.queued_direction:
            logger.debug("queued direction %s", requested)
        self.queued_direction = requested
        return True

    def place_food(self) -> bool:
        """Drop food on a uniformly random free cell.

        Returns ``False`` and ends the game when the snake already covers
        the whole board.
        """
        if len(self.snake) >= self.capacity:
            self.food = None
            self.board_full = True
            self.run_state = RunState.GAME_OVER
            return False
        self.food = self.rng.choice(self.free_cells())
        return True

    def advance(self) -> TickOutcome | None:
        """Run one tick. Returns ``None`` if the game is already over."""
        if self.game_over:
            return None

        self.direction = self.queued_direction
        hx, hy = self.head
        new_head = (hx + self.direction[0], hy + self.direction[1])

        # The tail has not moved yet, so running into it is fatal too.
        if not self.in_bounds(new_head) or self.occupies(new_head):
            self.run_state = RunState.GAME_OVER
            self._raise_high_score()
            return TickOutcome.COLLIDED

        self.snake.insert(0, new_head)

        if new_head == self.food:
            self.score += 1
            self._raise_high_score()
            if not self.place_food():
                return TickOutcome.BOARD_FULL
            return TickOutcome.ATE

        self.snake.pop()
        return TickOutcome.MOVED

    def _raise_high_score(self) -> None:
        if self.score > self.high_score:
            self.high_score = self.score
