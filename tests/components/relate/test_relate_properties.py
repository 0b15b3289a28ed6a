"""
Property tests for relate: agreement with shapely (GEOS), symmetry,
reflexivity and thread safety.
"""
from concurrent.futures import ThreadPoolExecutor

import pytest
from shapely import wkt

from georelate.components.geometry import GeometryAdapter
from georelate.components.relate import relate

CASES = [
    ("POLYGON ((0 0, 1 0, 1 1, 0 1, 0 0))", "POLYGON ((2 0, 3 0, 3 1, 2 1, 2 0))"),
    ("POLYGON ((0 0, 1 0, 1 1, 0 1, 0 0))", "POLYGON ((1 0, 2 0, 2 1, 1 1, 1 0))"),
    ("POLYGON ((0 0, 1 0, 1 1, 0 1, 0 0))", "POLYGON ((1 1, 2 1, 2 2, 1 2, 1 1))"),
    ("POLYGON ((0 0, 2 0, 2 2, 0 2, 0 0))", "POLYGON ((1 1, 3 1, 3 3, 1 3, 1 1))"),
    ("POLYGON ((0 0, 4 0, 4 4, 0 4, 0 0))", "POLYGON ((1 1, 2 1, 2 2, 1 2, 1 1))"),
    ("POLYGON ((0 0, 1 0, 1 1, 0 1, 0 0))", "POLYGON ((1 1, 0 1, 0 0, 1 0, 1 1))"),
    ("POLYGON ((0 0, 10 0, 10 10, 0 10, 0 0), (2 2, 4 2, 4 4, 2 4, 2 2))", "POINT (3 3)"),
    ("POLYGON ((0 0, 10 0, 10 10, 0 10, 0 0), (2 2, 4 2, 4 4, 2 4, 2 2))", "POINT (2 3)"),
    ("POLYGON ((0 0, 10 0, 10 10, 0 10, 0 0), (2 2, 4 2, 4 4, 2 4, 2 2))",
     "POLYGON ((1 1, 5 1, 5 5, 1 5, 1 1))"),
    ("LINESTRING (-1 0.5, 2 0.5)", "POLYGON ((0 0, 1 0, 1 1, 0 1, 0 0))"),
    ("LINESTRING (0 -1, 0 1)", "POLYGON ((-1 -1, 1 -1, 1 1, -1 1, -1 -1))"),
    ("LINESTRING (1 0.5, 2 0.5)", "POLYGON ((0 0, 1 0, 1 1, 0 1, 0 0))"),
    ("LINESTRING (0 0, 1 0)", "POLYGON ((0 0, 1 0, 1 1, 0 1, 0 0))"),
    ("LINESTRING (0 0, 2 2)", "LINESTRING (0 2, 2 0)"),
    ("LINESTRING (0 0, 2 0)", "LINESTRING (1 0, 3 0)"),
    ("LINESTRING (0 0, 1 0, 1 1, 0 1)", "LINESTRING (0.5 -1, 0.5 2)"),
    ("LINESTRING (0 0, 2 0)", "POINT (1 0)"),
    ("LINESTRING (0 0, 2 0)", "POINT (0 0)"),
    ("MULTILINESTRING ((0 0, 1 0), (1 0, 2 0))", "POINT (1 0)"),
    ("MULTILINESTRING ((0 0, 1 0), (1 0, 1 1), (1 1, 0 0))", "POINT (0.5 0.25)"),
    ("MULTILINESTRING ((0 0, 1 0), (1 0, 1 1), (1 1, 0 0))", "POINT (5 5)"),
    ("MULTILINESTRING ((0 0, 1 0), (1 0, 1 1), (1 1, 0 0))", "POLYGON ((3 0, 4 0, 4 1, 3 1, 3 0))"),
    ("MULTIPOINT ((0.5 0.5), (5 5))", "POLYGON ((0 0, 1 0, 1 1, 0 1, 0 0))"),
    ("POINT (1 1)", "POINT (1 1)"),
    ("POINT (1 1)", "POINT (2 2)"),
]


def _pair(case):
    return [wkt.loads(text) for text in case]


class TestShapelyAgreement:
    """relate agrees with GEOS on simple valid input"""

    @pytest.mark.parametrize("case", CASES)
    def test_matrix_matches_shapely(self, case):
        shapely_a, shapely_b = _pair(case)
        a = GeometryAdapter.from_shapely(shapely_a)
        b = GeometryAdapter.from_shapely(shapely_b)
        assert str(relate(a, b)) == shapely_a.relate(shapely_b)


class TestRelateProperties:
    """Structural properties of the matrix"""

    @pytest.mark.parametrize("case", CASES)
    def test_swapping_arguments_transposes(self, case):
        a, b = [GeometryAdapter.from_shapely(g) for g in _pair(case)]
        assert relate(b, a) == relate(a, b).transpose()

    @pytest.mark.parametrize("text", sorted({text for case in CASES for text in case}))
    def test_reflexive_relate_has_no_exterior_contact(self, text):
        geometry = GeometryAdapter.from_shapely(wkt.loads(text))
        im = relate(geometry, geometry)
        assert im.is_equals(geometry.dimension, geometry.dimension)

    def test_repeated_calls_agree(self):
        a, b = [GeometryAdapter.from_shapely(g) for g in _pair(CASES[3])]
        assert relate(a, b) == relate(a, b)

    def test_concurrent_calls(self):
        pairs = [[GeometryAdapter.from_shapely(g) for g in _pair(case)] for case in CASES]
        expected = [str(relate(a, b)) for a, b in pairs]
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda pair: str(relate(*pair)), pairs * 4))
        assert results == expected * 4
