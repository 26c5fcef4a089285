"""High-score persistence backends."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_KEY = "snakeHighScore"


class HighScoreStore(Protocol):
    """Key-value style persistence for the best score."""

    def get_high_score(self) -> int: ...

    def set_high_score(self, score: int) -> None: ...


class MemoryHighScoreStore:
    """Process-local store; forgets everything on exit."""

    def __init__(self, initial: int = 0) -> None:
        self._value = initial

    def get_high_score(self) -> int:
        return self._value

    def set_high_score(self, score: int) -> None:
        self._value = score


class JsonHighScoreStore:
    """Stores the high score under *key* in a small JSON document.

    Other keys already present in the file are preserved.
    """

    def __init__(self, path: str | Path, key: str = DEFAULT_KEY) -> None:
        self.path = Path(path)
        self.key = key

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text())
        except (OSError, json.JSONDecodeError):
            logger.warning("Unreadable high-score file %s; starting at 0.", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def get_high_score(self) -> int:
        """Return the stored score, or 0 when unset."""
        value = self._read().get(self.key, 0)
        try:
            return max(int(value), 0)
        except (TypeError, ValueError):
            logger.warning("Ignoring malformed high score %r in %s.", value, self.path)
            return 0

    def set_high_score(self, score: int) -> None:
        data = self._read()
        data[self.key] = int(score)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2))
        logger.debug("High score %d written to %s", score, self.path)
