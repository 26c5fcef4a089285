"""Movement directions and buffered direction changes."""

from __future__ import annotations

import enum


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    ``y`` grows downwards, so ``UP`` decrements it.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def label(self) -> str:
        """Lower-case name used on the wire."""
        return self.name.lower()

    @classmethod
    def parse(cls, name: str) -> Direction:
        """Resolve ``"up"``, ``"UP"`` or ``"ArrowUp"`` to a direction.

        Raises ``ValueError`` for anything else.
        """
        key = name.strip().lower()
        if key.startswith("arrow"):
            key = key[len("arrow"):]
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}") from None


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class DirectionController:
    """Two-slot direction buffer.

    ``pending`` collects requests between ticks; ``commit`` latches it into
    ``committed`` once per tick. Requests are validated only against
    ``committed``, so the last accepted request before a tick wins.
    """

    def __init__(self, initial: Direction = Direction.RIGHT) -> None:
        self.initial = initial
        self.committed = initial
        self.pending = initial

    def request_change(self, direction: Direction) -> bool:
        """Buffer *direction* unless it reverses the committed one.

        Returns True when the request was accepted.
        """
        if direction is self.committed.opposite:
            return False
        self.pending = direction
        return True

    def commit(self) -> Direction:
        """Latch the pending direction and return it."""
        self.committed = self.pending
        return self.committed

    def reset(self) -> None:
        """Return both slots to the starting direction."""
        self.committed = self.initial
        self.pending = self.initial
