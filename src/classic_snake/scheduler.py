"""Fixed-step tick scheduler fed by the frame clock."""

from __future__ import annotations

from typing import Callable

# A stalled frame (window drag, debugger) must not replay dozens of moves.
MAX_CATCH_UP_TICKS: int = 5


class TickScheduler:
    """Invoke ``callback`` once per ``interval_ms`` of accumulated frame time.

    There is only ever one armed timer: ``start`` on an active scheduler is a
    no-op and ``reschedule`` always stops before starting again.
    """

    def __init__(self, callback: Callable[[], object]) -> None:
        self._callback = callback
        self._interval_ms: int = 0
        self._accumulator: float = 0.0
        self._active: bool = False

    @property
    def active(self) -> bool:
        return self._active

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def start(self, interval_ms: int) -> None:
        if self._active:
            return
        if interval_ms <= 0:
            raise ValueError(f"tick interval must be positive, got {interval_ms}")
        self._interval_ms = interval_ms
        self._accumulator = 0.0
        self._active = True

    def stop(self) -> None:
        self._active = False
        self._accumulator = 0.0

    def reschedule(self, interval_ms: int) -> None:
        self.stop()
        self.start(interval_ms)

    def update(self, elapsed_ms: float) -> int:
        """Feed frame time and return how many ticks fired."""
        if not self._active or elapsed_ms <= 0:
            return 0
        self._accumulator += elapsed_ms
        fired = 0
        while self._active and self._accumulator >= self._interval_ms:
            self._accumulator -= self._interval_ms
            self._callback()
            fired += 1
            if fired >= MAX_CATCH_UP_TICKS:
                self._accumulator = 0.0
                break
        return fired
