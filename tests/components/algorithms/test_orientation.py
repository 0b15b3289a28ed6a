"""Tests for the orientation predicate and ring winding order"""
import pytest

from georelate.core import Orientation
from georelate.components.geometry import Coordinate
from georelate.components.algorithms import orientation_index, winding_order


def _ring(*pairs):
    return [Coordinate(float(x), float(y)) for x, y in pairs]


class TestOrientationIndex:
    """Test orientation_index"""

    @pytest.mark.parametrize("q,expected", [
        ((0.0, 1.0), Orientation.COUNTER_CLOCKWISE),
        ((0.0, -1.0), Orientation.CLOCKWISE),
        ((2.0, 0.0), Orientation.COLLINEAR),
        ((-5.0, 0.0), Orientation.COLLINEAR),
    ])
    def test_basic_cases(self, q, expected):
        assert orientation_index(Coordinate(0.0, 0.0), Coordinate(1.0, 0.0), Coordinate(*q)) == expected

    def test_point_on_diagonal_is_collinear(self):
        assert orientation_index(Coordinate(0.0, 0.0), Coordinate(1.0, 1.0), Coordinate(0.5, 0.5)) == Orientation.COLLINEAR

    def test_large_coordinates(self):
        """Collinear points far from the origin stay collinear"""
        base = 1e15
        p1 = Coordinate(base, base)
        p2 = Coordinate(base + 4.0, base + 4.0)
        assert orientation_index(p1, p2, Coordinate(base + 2.0, base + 2.0)) == Orientation.COLLINEAR
        assert orientation_index(p1, p2, Coordinate(base + 2.0, base + 4.0)) == Orientation.COUNTER_CLOCKWISE

    def test_antisymmetry(self):
        p1, p2, q = Coordinate(0.1, 0.2), Coordinate(7.3, 1.9), Coordinate(3.3, 4.4)
        assert orientation_index(p1, p2, q) == -orientation_index(p2, p1, q)


class TestWindingOrder:
    """Test winding_order"""

    def test_counter_clockwise_square(self):
        assert winding_order(_ring((0, 0), (1, 0), (1, 1), (0, 1), (0, 0))) == Orientation.COUNTER_CLOCKWISE

    def test_clockwise_square(self):
        assert winding_order(_ring((0, 0), (0, 1), (1, 1), (1, 0), (0, 0))) == Orientation.CLOCKWISE

    def test_flat_ring(self):
        assert winding_order(_ring((0, 0), (1, 0), (2, 0), (0, 0))) is None

    def test_too_few_points(self):
        assert winding_order(_ring((0, 0), (1, 1), (0, 0))) is None
