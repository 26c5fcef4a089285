"""Tests for the Grid module."""

import numpy as np
import pytest

from grid_snake.grid import Grid


class TestGridInit:
    def test_default_dimensions(self):
        grid = Grid()
        assert grid.width == 20
        assert grid.height == 20
        assert grid.cell_size == 20

    def test_dimensions_floor_pixel_size(self):
        grid = Grid(pixel_width=410, pixel_height=239, cell_size=20)
        assert grid.width == 20
        assert grid.height == 11

    def test_from_cells(self):
        grid = Grid.from_cells(8, 6)
        assert (grid.width, grid.height) == (8, 6)
        assert grid.cell_count == 48

    def test_invalid_cell_size(self):
        with pytest.raises(ValueError, match="at least 1"):
            Grid(cell_size=0)
        with pytest.raises(ValueError, match="at least 1"):
            Grid(cell_size=-5)

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 4"):
            Grid(pixel_width=60, pixel_height=400, cell_size=20)
        with pytest.raises(ValueError, match="at least 4"):
            Grid.from_cells(4, 0)


class TestGridBounds:
    def test_in_bounds(self):
        grid = Grid.from_cells(5, 5)
        assert grid.in_bounds((0, 0))
        assert grid.in_bounds((4, 4))
        assert not grid.in_bounds((-1, 0))
        assert not grid.in_bounds((0, -1))
        assert not grid.in_bounds((5, 0))
        assert not grid.in_bounds((0, 5))


class TestGridOccupancy:
    def test_marks_cells_row_major(self):
        grid = Grid.from_cells(5, 4)
        mask = grid.occupancy([(1, 2), (4, 0)])
        assert mask.shape == (4, 5)
        assert mask[2, 1] == 1
        assert mask[0, 4] == 1
        assert mask.sum() == 2

    def test_ignores_out_of_bounds(self):
        grid = Grid.from_cells(4, 4)
        mask = grid.occupancy([(-1, 0), (4, 4)])
        assert np.all(mask == 0)

    def test_to_dict(self):
        assert Grid().to_dict() == {"width": 20, "height": 20, "cell_size": 20}
