"""Read-only view of a session handed to rendering collaborators."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

from grid_snake.direction import Direction

if TYPE_CHECKING:
    from grid_snake.grid import Cell
    from grid_snake.snake import AdvanceResult

# Eye geometry in pixels, relative to the head cell's top-left corner.
_EYE_SIZE = 4
_EYE_MARGIN = 4
_EYE_INSET = 8


class SessionState(str, enum.Enum):
    """Lifecycle states for a game session."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


@dataclass(frozen=True)
class Snapshot:
    """Everything a renderer needs to draw one frame."""

    body: tuple[Cell, ...]
    food: Cell | None
    facing: Direction
    score: int
    high_score: int
    state: SessionState
    tick: int
    grid_width: int
    grid_height: int
    last_result: AdvanceResult | None = None

    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def status_text(self) -> str:
        """Human-readable status line."""
        if self.state == SessionState.RUNNING:
            return "Game Running"
        if self.state == SessionState.PAUSED:
            return "Game Paused"
        if self.state == SessionState.OVER:
            return f"Game Over! Final Score: {self.score}"
        return "Press SPACE to start"

    def eyes(self, cell_size: int) -> tuple[tuple[int, int, int, int], ...]:
        """Return the two head-eye rectangles as ``(x, y, w, h)`` pixels.

        Placement depends only on ``facing`` and the head cell.
        """
        hx, hy = self.head
        left = hx * cell_size + _EYE_MARGIN
        top = hy * cell_size + _EYE_MARGIN
        right = hx * cell_size + cell_size - _EYE_INSET
        bottom = hy * cell_size + cell_size - _EYE_INSET

        corners = {
            Direction.UP: ((left, top), (right, top)),
            Direction.DOWN: ((left, bottom), (right, bottom)),
            Direction.LEFT: ((left, top), (left, bottom)),
            Direction.RIGHT: ((right, top), (right, bottom)),
        }[self.facing]
        return tuple((x, y, _EYE_SIZE, _EYE_SIZE) for x, y in corners)

    def to_dict(self) -> dict:
        """Return the snapshot as a JSON-serializable dict."""
        return {
            "tick": self.tick,
            "state": self.state.value,
            "status": self.status_text,
            "score": self.score,
            "high_score": self.high_score,
            "facing": self.facing.label,
            "body": [list(seg) for seg in self.body],
            "food": list(self.food) if self.food is not None else None,
            "last_result": (
                self.last_result.value if self.last_result is not None else None
            ),
            "grid": {"width": self.grid_width, "height": self.grid_height},
        }
