"""Game configuration for a single-player snake session."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

logger = logging.getLogger(__name__)

_DIRECTION_NAMES = ("up", "down", "left", "right")

INITIAL_BODY: tuple[tuple[int, int], ...] = ((5, 10), (4, 10), (3, 10))


@dataclass(frozen=True)
class GameConfig:
    """Fixed settings for one game session.

    Supports JSON serialization so a board can be reproduced exactly.
    """

    # Board
    pixel_width: int = 400
    pixel_height: int = 400
    cell_size: int = 20

    # Pacing
    tick_interval_ms: int = 200

    # Scoring
    food_reward: int = 10

    # Starting position, head first
    initial_body: tuple[tuple[int, int], ...] = INITIAL_BODY
    initial_direction: str = "right"

    # Reproducibility
    seed: int | None = None

    # Persistence
    high_score_path: str | None = None

    def __post_init__(self) -> None:
        if self.cell_size < 1:
            raise ValueError("cell_size must be at least 1.")
        if self.pixel_width < 1 or self.pixel_height < 1:
            raise ValueError("Pixel dimensions must be positive.")
        if self.tick_interval_ms < 1:
            raise ValueError("tick_interval_ms must be at least 1.")
        if self.food_reward < 1:
            raise ValueError("food_reward must be at least 1.")
        if not self.initial_body:
            raise ValueError("initial_body must contain at least one cell.")
        if self.initial_direction not in _DIRECTION_NAMES:
            raise ValueError(
                f"initial_direction must be one of {_DIRECTION_NAMES}.",
            )

    @property
    def tick_interval(self) -> float:
        """Tick period in seconds."""
        return self.tick_interval_ms / 1000.0

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file.

        Raises ``ValueError`` for keys that are not config fields.
        """
        raw = json.loads(Path(path).read_text())
        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must hold a JSON object.")
        unknown = sorted(set(raw) - {f.name for f in fields(cls)})
        if unknown:
            raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")
        if "initial_body" in raw:
            raw["initial_body"] = tuple(
                (int(x), int(y)) for x, y in raw["initial_body"]
            )
        return cls(**raw)
