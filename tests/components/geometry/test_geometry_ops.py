"""Tests for GeometryOps"""
import numpy as np
import pytest

from georelate.components.geometry import (
    Coordinate,
    GeometryOps,
    LineString,
    MultiPoint,
    Point,
    Polygon,
    Rect,
)


def _coords(*pairs):
    return [Coordinate(float(x), float(y)) for x, y in pairs]


class TestGeometryOps:
    """Test the closed-form helpers"""

    def test_to_array_shape(self):
        arr = GeometryOps.to_array(_coords((0, 0), (1, 2)))
        assert arr.shape == (2, 2)
        assert GeometryOps.to_array([]).shape == (0, 2)

    def test_bounding_rect(self):
        polygon = Polygon.from_vertices([(1, 2), (4, 0), (3, 5)])
        assert GeometryOps.bounding_rect(polygon) == Rect((1, 0), (4, 5))

    def test_bounding_rect_of_empty_geometry(self):
        assert GeometryOps.bounding_rect(MultiPoint([])) is None

    def test_envelopes_intersect(self):
        a = GeometryOps.bounding_rect(Point(0, 0))
        b = GeometryOps.bounding_rect(LineString([(0, 0), (1, 1)]))
        assert GeometryOps.envelopes_intersect(a, b)
        assert not GeometryOps.envelopes_intersect(a, None)

    def test_signed_area_orientation(self):
        ccw = _coords((0, 0), (1, 0), (1, 1), (0, 1), (0, 0))
        assert GeometryOps.signed_area(ccw) == pytest.approx(1.0)
        assert GeometryOps.signed_area(list(reversed(ccw))) == pytest.approx(-1.0)

    def test_signed_area_of_degenerate_ring(self):
        assert GeometryOps.signed_area(_coords((0, 0), (1, 1))) == 0.0

    def test_length(self):
        assert GeometryOps.length(_coords((0, 0), (3, 4), (3, 0))) == pytest.approx(9.0)
        assert GeometryOps.length(_coords((1, 1))) == 0.0

    def test_remove_repeated_points(self):
        coords = _coords((0, 0), (0, 0), (1, 1), (1, 1), (0, 0))
        assert GeometryOps.remove_repeated_points(coords) == _coords((0, 0), (1, 1), (0, 0))

    def test_is_finite(self):
        assert GeometryOps.is_finite(Coordinate(1.0, 2.0))
        assert not GeometryOps.is_finite(Coordinate(np.nan, 2.0))
        assert not GeometryOps.is_finite(Coordinate(1.0, np.inf))
