"""Run/pause/restart state machine wrapped around a :class:`GameState`."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from .config import DEFAULT_TICK_MS, SPEED_PRESETS
from .scheduler import TickScheduler
from .state import Direction, GameState, RunState, TickOutcome

logger = logging.getLogger(__name__)

RenderHook = Callable[[GameState], None]


class ScoreStore(Protocol):
    def load(self) -> int: ...

    def save(self, value: int) -> None: ...


class UnknownSpeedError(KeyError):
    """Raised for a speed preset name that is not configured."""


class GameLoop:
    """Drive ticks, serialize input into turns, and persist the high score."""

    def __init__(
        self,
        state: GameState,
        store: ScoreStore,
        *,
        interval_ms: int = DEFAULT_TICK_MS,
        on_render: RenderHook | None = None,
    ) -> None:
        self.state = state
        self.store = store
        self.interval_ms = interval_ms
        self.on_render = on_render
        self.scheduler = TickScheduler(self.tick)

        stored = store.load()
        self.state.high_score = max(self.state.high_score, stored)
        self._persisted_high_score = stored
        self._render()

    # --- Queries -------------------------------------------------------

    @property
    def run_state(self) -> RunState:
        return self.state.run_state

    @property
    def running(self) -> bool:
        return self.state.run_state is RunState.RUNNING

    @property
    def speed_name(self) -> str | None:
        for name, interval in SPEED_PRESETS.items():
            if interval == self.interval_ms:
                return name
        return None

    # --- Commands ------------------------------------------------------

    def start(self) -> None:
        """Begin ticking; restarts a finished game, ignores a running one."""
        run_state = self.state.run_state
        if run_state is RunState.RUNNING:
            return
        if run_state is RunState.GAME_OVER:
            self.state.reset()
        self.state.run_state = RunState.RUNNING
        self.scheduler.start(self.interval_ms)
        logger.info("started at %d ms per tick", self.interval_ms)
        self._render()

    def pause(self) -> None:
        if self.state.run_state is not RunState.RUNNING:
            return
        self.scheduler.stop()
        self.state.run_state = RunState.PAUSED
        logger.info("paused")
        self._render()

    def resume(self) -> None:
        if self.state.run_state is not RunState.PAUSED:
            return
        self.state.run_state = RunState.RUNNING
        self.scheduler.start(self.interval_ms)
        logger.info("resumed")
        self._render()

    def toggle(self) -> None:
        """Space bar / Pause button.

        On a finished game this restarts rather than resumes; there is no
        mid-game snapshot to go back to.
        """
        run_state = self.state.run_state
        if run_state is RunState.RUNNING:
            self.pause()
        elif run_state is RunState.PAUSED:
            self.resume()
        else:
            self.start()

    def reset(self) -> None:
        self.scheduler.stop()
        self.state.reset()
        logger.info("reset")
        self._render()

    def set_speed(self, interval_ms: int) -> None:
        if interval_ms <= 0:
            raise ValueError(f"tick interval must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        if self.scheduler.active:
            self.scheduler.reschedule(interval_ms)
        logger.info("speed set to %d ms per tick", interval_ms)
        self._render()

    def set_speed_preset(self, name: str) -> None:
        try:
            interval = SPEED_PRESETS[name]
        except KeyError:
            raise UnknownSpeedError(name) from None
        self.set_speed(interval)

    def cycle_speed(self) -> str:
        """Step to the next preset, wrapping from fastest back to slowest."""
        names = list(SPEED_PRESETS)
        current = self.speed_name
        index = names.index(current) + 1 if current in names else 0
        name = names[index % len(names)]
        self.set_speed_preset(name)
        return name

    def request_direction(self, direction: Direction) -> bool:
        """Single entry point for every input adapter."""
        return self.state.set_direction(*direction)

    # --- Ticking -------------------------------------------------------

    def update(self, elapsed_ms: float) -> int:
        return self.scheduler.update(elapsed_ms)

    def tick(self) -> TickOutcome | None:
        outcome = self.state.advance()
        if outcome in (TickOutcome.COLLIDED, TickOutcome.BOARD_FULL):
            self.scheduler.stop()
            logger.info(
                "game over (%s) with score %d, best %d",
                outcome.value,
                self.state.score,
                self.state.high_score,
            )
        elif outcome is not None:
            logger.debug("tick %s, head at %s", outcome.value, self.state.head)
        self._persist_high_score()
        self._render()
        return outcome

    def _persist_high_score(self) -> None:
        best = self.state.high_score
        if best > self._persisted_high_score:
            self.store.save(best)
            self._persisted_high_score = best

    def _render(self) -> None:
        if self.on_render is not None:
            self.on_render(self.state)
