"""Tests for the geometry value types"""
import pytest

from georelate.core import Dimension, GeometryType
from georelate.components.geometry import (
    Coordinate,
    GeometryCollection,
    Line,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)


class TestCoordinate:
    """Test Coordinate"""

    def test_equality_and_hash(self):
        assert Coordinate(1.0, 2.0) == Coordinate(1.0, 2.0)
        assert len({Coordinate(1.0, 2.0), Coordinate(1.0, 2.0)}) == 1

    def test_ordering_is_x_then_y(self):
        coords = [Coordinate(1, 0), Coordinate(0, 5), Coordinate(0, 1)]
        assert sorted(coords) == [Coordinate(0, 1), Coordinate(0, 5), Coordinate(1, 0)]

    def test_from_value(self):
        assert Coordinate.from_value((3, 4)) == Coordinate(3.0, 4.0)
        c = Coordinate(1.0, 1.0)
        assert Coordinate.from_value(c) is c

    def test_from_value_too_short(self):
        with pytest.raises(ValueError):
            Coordinate.from_value([1.0])

    def test_unpacking(self):
        x, y = Coordinate(5.0, 6.0)
        assert (x, y) == (5.0, 6.0)


class TestPoint:
    """Test Point"""

    def test_dimensions(self):
        p = Point(1.0, 2.0)
        assert p.geom_type == GeometryType.POINT
        assert p.dimension == Dimension.POINT
        assert not p.is_empty
        assert list(p.coords()) == [Coordinate(1.0, 2.0)]


class TestLineString:
    """Test LineString and Line"""

    def test_open_line(self):
        line = LineString([(0, 0), (1, 0), (1, 1)])
        assert line.dimension == Dimension.LINE
        assert not line.is_closed
        assert len(line) == 3

    def test_closed_line(self):
        ring = LineString([(0, 0), (1, 0), (1, 1), (0, 0)])
        assert ring.is_closed
        assert ring.dimension == Dimension.LINE

    def test_empty_line(self):
        line = LineString()
        assert line.is_empty
        assert line.dimension == Dimension.EMPTY
        assert not line.is_closed

    def test_segments(self):
        segments = list(LineString([(0, 0), (1, 0), (1, 1)]).segments())
        assert segments == [Line((0, 0), (1, 0)), Line((1, 0), (1, 1))]

    def test_line_deltas(self):
        line = Line((1, 1), (4, 5))
        assert (line.dx, line.dy) == (3.0, 4.0)
        assert line.to_line_string() == LineString([(1, 1), (4, 5)])


class TestPolygon:
    """Test Polygon"""

    def test_from_vertices_closes_rings(self):
        polygon = Polygon.from_vertices([(0, 0), (4, 0), (4, 4), (0, 4)], holes=[[(1, 1), (2, 1), (2, 2)]])
        assert polygon.exterior.is_closed
        assert len(polygon.exterior) == 5
        assert polygon.interiors[0].is_closed
        assert len(list(polygon.rings())) == 2

    def test_close_ring_keeps_closed_input(self):
        ring = [(0, 0), (1, 0), (1, 1), (0, 0)]
        assert len(Polygon.close_ring(ring)) == 4

    def test_dimensions(self):
        polygon = Polygon.from_vertices([(0, 0), (1, 0), (1, 1)])
        assert polygon.geom_type == GeometryType.POLYGON
        assert polygon.dimension == Dimension.AREA

    def test_empty_polygon(self):
        assert Polygon().is_empty
        assert Polygon().dimension == Dimension.EMPTY


class TestCollections:
    """Test the multi geometries"""

    def test_multi_point_from_tuples(self):
        mp = MultiPoint([(0, 0), (1, 1)])
        assert mp.geom_type == GeometryType.MULTI_POINT
        assert mp.geoms == [Point(0.0, 0.0), Point(1.0, 1.0)]
        assert mp.dimension == Dimension.POINT

    def test_multi_line_string_closed(self):
        closed = MultiLineString([[(0, 0), (1, 0), (0, 1), (0, 0)]])
        assert closed.is_closed
        assert not MultiLineString([[(0, 0), (1, 0)]]).is_closed

    def test_collection_dimension_is_max(self):
        gc = GeometryCollection([
            Point(0, 0),
            LineString([(0, 0), (1, 1)]),
            Polygon.from_vertices([(0, 0), (1, 0), (1, 1)]),
        ])
        assert gc.dimension == Dimension.AREA
        assert len(gc) == 3

    def test_empty_collection(self):
        assert GeometryCollection().is_empty
        assert GeometryCollection().dimension == Dimension.EMPTY
        assert MultiPolygon().dimension == Dimension.EMPTY
