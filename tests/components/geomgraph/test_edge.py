"""Tests for edges and their intersection lists"""
import pytest

from georelate.core import Location, PartialLabelError
from georelate.components.geometry import Coordinate
from georelate.components.geomgraph import Edge, EdgeIntersectionList, Label
from georelate.components.relate import IntersectionMatrix


def c(x, y):
    return Coordinate(float(x), float(y))


def make_edge(*pairs, label=None):
    return Edge([c(x, y) for x, y in pairs], label or Label.line(0, Location.INTERIOR))


class TestEdge:
    """Test Edge"""

    def test_needs_two_coordinates(self):
        with pytest.raises(ValueError):
            Edge([c(0, 0)], Label.empty_line())

    def test_properties(self):
        edge = make_edge((0, 0), (1, 0), (0, 0))
        assert edge.coordinate == c(0, 0)
        assert edge.is_closed
        assert edge.is_isolated
        edge.mark_as_unisolated()
        assert not edge.is_isolated

    def test_vertex_hit_is_normalized(self):
        """A point at a vertex has one key whichever segment reports it"""
        edge = make_edge((0, 0), (1, 0), (2, 0))
        edge.add_intersection(c(1, 0), 0)
        edge.add_intersection(c(1, 0), 1)
        intersections = list(edge.edge_intersections)
        assert len(intersections) == 1
        assert intersections[0].segment_index == 1
        assert intersections[0].distance == 0.0

    def test_split_copies_label(self):
        edge = make_edge((0, 0), (2, 0))
        edge.add_intersection(c(1, 0), 0)
        pieces = edge.split()
        assert [p.coords for p in pieces] == [[c(0, 0), c(1, 0)], [c(1, 0), c(2, 0)]]
        pieces[0].label.set_on_location(1, Location.EXTERIOR)
        assert edge.label.is_empty(1)

    def test_partial_label_rejected(self):
        edge = make_edge((0, 0), (1, 0))
        with pytest.raises(PartialLabelError):
            edge.update_intersection_matrix(IntersectionMatrix())

    def test_update_intersection_matrix(self):
        label = Label.line(0, Location.INTERIOR)
        label.set_on_location(1, Location.EXTERIOR)
        edge = make_edge((0, 0), (1, 0), label=label)
        im = IntersectionMatrix()
        edge.update_intersection_matrix(im)
        assert str(im) == "FF1FFFFFF"


class TestEdgeIntersectionList:
    """Test EdgeIntersectionList"""

    def test_duplicates_are_merged(self):
        edge = make_edge((0, 0), (4, 0))
        eil = EdgeIntersectionList(edge)
        first = eil.add(c(1, 0), 0, 1.0)
        second = eil.add(c(1, 0), 0, 1.0)
        assert first is second
        assert len(eil) == 1

    def test_iteration_order(self):
        edge = make_edge((0, 0), (4, 0), (4, 4))
        eil = edge.edge_intersections
        eil.add(c(4, 2), 1, 2.0)
        eil.add(c(3, 0), 0, 3.0)
        eil.add(c(1, 0), 0, 1.0)
        assert [ei.coordinate for ei in eil] == [c(1, 0), c(3, 0), c(4, 2)]

    def test_add_endpoints(self):
        edge = make_edge((0, 0), (1, 0), (1, 1))
        edge.edge_intersections.add_endpoints()
        assert [ei.sort_key for ei in edge.edge_intersections] == [(0, 0.0), (2, 0.0)]
        assert [ei.coordinate for ei in edge.edge_intersections] == [c(0, 0), c(1, 1)]

    def test_split_edge_coordinates(self):
        edge = make_edge((0, 0), (2, 0), (2, 2))
        edge.add_intersection(c(1, 0), 0)
        edge.add_intersection(c(2, 1), 1)
        assert edge.edge_intersections.split_edge_coordinates() == [
            [c(0, 0), c(1, 0)],
            [c(1, 0), c(2, 0), c(2, 1)],
            [c(2, 1), c(2, 2)],
        ]

    def test_split_at_vertex(self):
        edge = make_edge((0, 0), (1, 0), (2, 0))
        edge.add_intersection(c(1, 0), 0)
        assert edge.edge_intersections.split_edge_coordinates() == [
            [c(0, 0), c(1, 0)],
            [c(1, 0), c(2, 0)],
        ]
