"""Shared geometries for the relate tests"""
import pytest

from georelate.components.geometry import MultiLineString, Polygon


def square(x0, y0, x1, y1):
    """Counter-clockwise axis-aligned square polygon"""
    return Polygon.from_vertices([(x0, y0), (x1, y0), (x1, y1), (x0, y1)])


@pytest.fixture
def unit_square():
    return square(0, 0, 1, 1)


@pytest.fixture
def centered_square():
    return square(-1, -1, 1, 1)


@pytest.fixture
def donut():
    return Polygon.from_vertices(
        [(0, 0), (10, 0), (10, 10), (0, 10)],
        holes=[[(2, 2), (4, 2), (4, 4), (2, 4)]],
    )


@pytest.fixture
def split_line():
    """Two line strings meeting end to end at (1, 0)"""
    return MultiLineString([[(0, 0), (1, 0)], [(1, 0), (2, 0)]])
