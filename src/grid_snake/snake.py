"""Snake body and movement logic."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable
from typing import TYPE_CHECKING

from grid_snake.config import INITIAL_BODY
from grid_snake.direction import Direction

if TYPE_CHECKING:
    from grid_snake.grid import Cell, Grid


class AdvanceResult(enum.Enum):
    """Outcome of one movement attempt."""

    MOVED = "moved"
    ATE_FOOD = "ate_food"
    COLLIDED = "collided"


class SnakeEngine:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. ``facing`` mirrors
    the last direction the snake actually moved in.
    """

    def __init__(
        self,
        body: Iterable[Cell] = INITIAL_BODY,
        facing: Direction = Direction.RIGHT,
    ) -> None:
        self.body: deque[Cell] = deque((int(x), int(y)) for x, y in body)
        if not self.body:
            raise ValueError("Snake length must be at least 1.")
        if len(set(self.body)) != len(self.body):
            raise ValueError("Snake body must not overlap itself.")
        self.facing = facing

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Cell:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def occupies(self, cell: Cell) -> bool:
        """Check whether the snake occupies a given cell."""
        return cell in self.body

    def next_head(self, direction: Direction) -> Cell:
        """Compute the next head position without moving."""
        dx, dy = direction.value
        x, y = self.head
        return x + dx, y + dy

    def advance(
        self, direction: Direction, food: Cell | None, grid: Grid,
    ) -> AdvanceResult:
        """Move the snake one step in *direction*.

        The body is left untouched on collision. The self-collision check
        runs against the body before the tail is dropped, so the cell the
        tail is about to vacate still counts as occupied.
        """
        new_head = self.next_head(direction)

        if not grid.in_bounds(new_head):
            return AdvanceResult.COLLIDED
        if new_head in self.body:
            return AdvanceResult.COLLIDED

        self.body.appendleft(new_head)
        self.facing = direction

        if new_head == food:
            return AdvanceResult.ATE_FOOD
        self.body.pop()
        return AdvanceResult.MOVED

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "facing": self.facing.label,
        }
