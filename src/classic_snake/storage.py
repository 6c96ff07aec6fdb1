"""High score persistence."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import HIGHSCORE_FILE

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Keep the best score in a one-line text file.

    Any filesystem trouble degrades to "no high score" on load and to an
    in-memory-only best on save; nothing here raises.
    """

    def __init__(self, path: Path = HIGHSCORE_FILE) -> None:
        self.path = Path(path)

    def load(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
            value = int(text.strip() or "0")
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as exc:
            logger.warning("could not read high score from %s: %s", self.path, exc)
            return 0
        return max(0, value)

    def save(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(int(value)), encoding="utf-8")
        except OSError as exc:
            logger.warning("could not save high score to %s: %s", self.path, exc)


class MemoryStore:
    """Same interface as :class:`HighScoreStore`, kept in memory."""

    def __init__(self, value: int = 0) -> None:
        self.value = value
        self.saves: list[int] = []

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = value
        self.saves.append(value)
