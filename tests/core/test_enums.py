"""Tests for core enums"""
import pytest

from georelate.core import (
    BoundaryNodeRule,
    Dimension,
    GeometryType,
    Location,
    Position,
    Quadrant,
)


class TestLocation:
    """Test Location values and symbols"""

    def test_matrix_indexes(self):
        """INTERIOR, BOUNDARY, EXTERIOR double as matrix row/column indexes"""
        assert [int(Location.INTERIOR), int(Location.BOUNDARY), int(Location.EXTERIOR)] == [0, 1, 2]
        assert Location.NONE == -1

    def test_symbols(self):
        assert Location.INTERIOR.symbol == "i"
        assert Location.BOUNDARY.symbol == "b"
        assert Location.EXTERIOR.symbol == "e"
        assert Location.NONE.symbol == "-"


class TestPosition:
    """Test Position.opposite"""

    def test_opposite(self):
        assert Position.LEFT.opposite() == Position.RIGHT
        assert Position.RIGHT.opposite() == Position.LEFT
        assert Position.ON.opposite() == Position.ON


class TestDimension:
    """Test Dimension symbols"""

    def test_symbols(self):
        assert [d.symbol for d in Dimension] == ["F", "0", "1", "2"]


class TestQuadrant:
    """Test Quadrant.of"""

    @pytest.mark.parametrize("dx,dy,expected", [
        (1.0, 0.0, Quadrant.NE),
        (0.0, 1.0, Quadrant.NE),
        (-1.0, 0.0, Quadrant.NW),
        (-1.0, -1.0, Quadrant.SW),
        (0.0, -1.0, Quadrant.SE),
        (2.0, -3.0, Quadrant.SE),
    ])
    def test_quadrants(self, dx, dy, expected):
        assert Quadrant.of(dx, dy) == expected

    def test_zero_vector_rejected(self):
        with pytest.raises(ValueError):
            Quadrant.of(0.0, 0.0)


class TestBoundaryNodeRule:
    """Test the boundary node rules"""

    @pytest.mark.parametrize("count,expected", [(1, True), (2, False), (3, True), (4, False)])
    def test_mod2(self, count, expected):
        assert BoundaryNodeRule.MOD2.is_in_boundary(count) is expected

    def test_endpoint(self):
        assert BoundaryNodeRule.ENDPOINT.is_in_boundary(1)
        assert BoundaryNodeRule.ENDPOINT.is_in_boundary(2)

    def test_multivalent_endpoint(self):
        assert not BoundaryNodeRule.MULTIVALENT_ENDPOINT.is_in_boundary(1)
        assert BoundaryNodeRule.MULTIVALENT_ENDPOINT.is_in_boundary(2)

    def test_monovalent_endpoint(self):
        assert BoundaryNodeRule.MONOVALENT_ENDPOINT.is_in_boundary(1)
        assert not BoundaryNodeRule.MONOVALENT_ENDPOINT.is_in_boundary(2)

    def test_determine_boundary(self):
        assert BoundaryNodeRule.MOD2.determine_boundary(1) == Location.BOUNDARY
        assert BoundaryNodeRule.MOD2.determine_boundary(2) == Location.INTERIOR


class TestGeometryType:
    """Geometry type values follow shapely's geom_type names"""

    def test_values(self):
        assert GeometryType.POLYGON.value == "Polygon"
        assert GeometryType.MULTI_LINE_STRING.value == "MultiLineString"
        assert GeometryType.GEOMETRY_COLLECTION.value == "GeometryCollection"
