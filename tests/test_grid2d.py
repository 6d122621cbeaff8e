import pytest

from mobagen.grid2d import Grid2D
from mobagen.point2d import Point2D


def test_new_grid_is_filled():
    grid = Grid2D(3, 2, fill=0)
    assert len(grid) == 6
    assert list(grid) == [0] * 6
    assert grid.width == 3
    assert grid.height == 2


def test_set_and_get_by_tuple_and_point():
    grid = Grid2D(4, 4, fill=False)
    grid[1, 2] = True
    assert grid[1, 2] is True
    assert grid[Point2D(1, 2)] is True
    grid[Point2D(3, 0)] = True
    assert grid[3, 0] is True


def test_storage_is_row_major():
    grid = Grid2D(3, 2, fill=0)
    grid[1, 1] = 9
    assert list(grid).index(9) == 1 + 1 * 3


def test_out_of_range_raises():
    grid = Grid2D(2, 2)
    with pytest.raises(IndexError):
        grid[2, 0]
    with pytest.raises(IndexError):
        grid[0, -1]
    with pytest.raises(IndexError):
        grid[Point2D(-1, 0)] = 1


def test_resize_keeps_storage_prefix_and_pads():
    grid = Grid2D(2, 2, fill=0)
    for i, key in enumerate([(0, 0), (1, 0), (0, 1), (1, 1)]):
        grid[key] = i + 1
    grid.resize(3, 2)
    assert grid.width == 3 and grid.height == 2
    assert list(grid) == [1, 2, 3, 4, 0, 0]
    grid.resize(1, 2)
    assert list(grid) == [1, 2]


def test_default_grid_is_empty():
    grid = Grid2D()
    assert len(grid) == 0
    with pytest.raises(IndexError):
        grid[0, 0]


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Grid2D(-1, 2)
    with pytest.raises(ValueError):
        Grid2D(1, 1).resize(2, -3)