"""Grid dimensions and coordinate validity for the snake game."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

Cell = tuple[int, int]

# The starting snake occupies three cells of a row; anything smaller is unplayable.
_MIN_CELLS = 4


class Grid:
    """Fixed-size board measured in cells.

    Coordinates are ``(x, y)`` pairs, 0-indexed from the top-left corner.
    The grid holds no game state; it only answers questions about its
    dimensions.
    """

    def __init__(
        self,
        pixel_width: int = 400,
        pixel_height: int = 400,
        cell_size: int = 20,
    ) -> None:
        if cell_size < 1:
            raise ValueError("Cell size must be at least 1.")
        width = pixel_width // cell_size
        height = pixel_height // cell_size
        if width < _MIN_CELLS or height < _MIN_CELLS:
            raise ValueError("Grid dimensions must be at least 4×4 cells.")
        self.cell_size = cell_size
        self.width = width
        self.height = height

    @classmethod
    def from_cells(cls, width: int, height: int) -> Grid:
        """Build a grid measured directly in cells."""
        return cls(pixel_width=width, pixel_height=height, cell_size=1)

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a cell lies within the grid."""
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def occupancy(self, cells: Iterable[Cell]) -> np.ndarray:
        """Return an ``int8`` matrix indexed ``[y, x]`` marking *cells*.

        Cells outside the grid are ignored.
        """
        mask = np.zeros((self.height, self.width), dtype=np.int8)
        for x, y in cells:
            if 0 <= x < self.width and 0 <= y < self.height:
                mask[y, x] = 1
        return mask

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "cell_size": self.cell_size,
        }

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"
