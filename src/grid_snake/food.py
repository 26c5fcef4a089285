"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from grid_snake.grid import Cell, Grid

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places food on a free cell by rejection sampling.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn(self, occupied: Collection[Cell], grid: Grid) -> Cell | None:
        """Pick a uniformly random cell of *grid* not in *occupied*.

        Returns ``None`` when no free cell exists.
        """
        taken = set(occupied)
        free = grid.cell_count - int(grid.occupancy(taken).sum())
        if free <= 0:
            logger.warning("No free cells available for food spawning.")
            return None

        while True:
            x = int(self.rng.integers(0, grid.width))
            y = int(self.rng.integers(0, grid.height))
            if (x, y) not in taken:
                return x, y
