"""Tests for GeometryGraph construction and noding"""
import logging

import pytest

from georelate.core import BoundaryNodeRule, Dimension, GeometryType, Location, Position
from georelate.components.geometry import (
    Coordinate,
    Geometry,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Rect,
)
from georelate.components.algorithms import LineIntersector
from georelate.components.geomgraph import GeometryGraph


def c(x, y):
    return Coordinate(float(x), float(y))


class TestGeometryGraphConstruction:
    """Test how geometries are decomposed into edges and nodes"""

    def test_point(self):
        graph = GeometryGraph(0, Point(1, 2))
        assert graph.edges == []
        assert graph.find_node(c(1, 2)).label.location(0) == Location.INTERIOR

    def test_multi_point(self):
        graph = GeometryGraph(1, MultiPoint([(0, 0), (1, 1)]))
        assert len(list(graph.nodes)) == 2
        assert graph.find_node(c(1, 1)).label.location(1) == Location.INTERIOR

    def test_line_string_endpoints_are_boundary(self):
        graph = GeometryGraph(0, LineString([(0, 0), (1, 0), (2, 0)]))
        assert len(graph.edges) == 1
        assert graph.edges[0].label.location(0) == Location.INTERIOR
        assert {n.coordinate for n in graph.boundary_nodes()} == {c(0, 0), c(2, 0)}
        assert graph.is_boundary_node(c(0, 0))
        assert not graph.is_boundary_node(c(1, 0))

    def test_repeated_points_removed(self):
        graph = GeometryGraph(0, LineString([(0, 0), (0, 0), (1, 0), (1, 0)]))
        assert graph.edges[0].coords == [c(0, 0), c(1, 0)]

    def test_collapsed_line_is_skipped(self, caplog):
        with caplog.at_level(logging.WARNING):
            graph = GeometryGraph(0, LineString([(1, 1), (1, 1)]))
        assert graph.edges == []
        assert "fewer than 2 distinct points" in caplog.text

    def test_closed_line_has_no_boundary(self):
        graph = GeometryGraph(0, LineString([(0, 0), (1, 0), (1, 1), (0, 0)]))
        assert graph.boundary_nodes() == []
        assert graph.find_node(c(0, 0)).label.location(0) == Location.INTERIOR

    def test_mod2_shared_endpoint(self):
        mls = MultiLineString([[(0, 0), (1, 0)], [(1, 0), (2, 0)]])
        graph = GeometryGraph(0, mls)
        assert graph.find_node(c(1, 0)).label.location(0) == Location.INTERIOR
        assert graph.find_node(c(1, 0)).boundary_count == 2

    def test_endpoint_rule_shared_endpoint(self):
        mls = MultiLineString([[(0, 0), (1, 0)], [(1, 0), (2, 0)]])
        graph = GeometryGraph(0, mls, BoundaryNodeRule.ENDPOINT)
        assert graph.find_node(c(1, 0)).label.location(0) == Location.BOUNDARY

    def test_ccw_shell_interior_on_left(self):
        graph = GeometryGraph(0, Polygon.from_vertices([(0, 0), (1, 0), (1, 1), (0, 1)]))
        label = graph.edges[0].label
        assert label.location(0) == Location.BOUNDARY
        assert label.location(0, Position.LEFT) == Location.INTERIOR
        assert label.location(0, Position.RIGHT) == Location.EXTERIOR
        assert graph.find_node(c(0, 0)).label.location(0) == Location.BOUNDARY

    def test_cw_shell_interior_on_right(self):
        graph = GeometryGraph(0, Polygon.from_vertices([(0, 0), (0, 1), (1, 1), (1, 0)]))
        label = graph.edges[0].label
        assert label.location(0, Position.LEFT) == Location.EXTERIOR
        assert label.location(0, Position.RIGHT) == Location.INTERIOR

    def test_hole_sides_are_reversed(self):
        polygon = Polygon.from_vertices(
            [(0, 0), (10, 0), (10, 10), (0, 10)],
            holes=[[(2, 2), (4, 2), (4, 4), (2, 4)]],
        )
        graph = GeometryGraph(0, polygon)
        hole_label = graph.edges[1].label
        assert hole_label.location(0, Position.LEFT) == Location.EXTERIOR
        assert hole_label.location(0, Position.RIGHT) == Location.INTERIOR

    def test_rect_becomes_polygon_ring(self):
        graph = GeometryGraph(1, Rect((0, 0), (2, 1)))
        assert len(graph.edges) == 1
        assert len(graph.edges[0].coords) == 5
        assert graph.edges[0].label.is_area(1)

    def test_degenerate_ring_is_skipped(self, caplog):
        with caplog.at_level(logging.WARNING):
            graph = GeometryGraph(0, Polygon([(0, 0), (1, 1), (0, 0)]))
        assert graph.edges == []
        assert "degenerate ring" in caplog.text

    def test_collapsed_ring_is_skipped(self, caplog):
        flat = Polygon([(0, 0), (1, 0), (0, 0), (1, 0), (0, 0)])
        with caplog.at_level(logging.WARNING):
            graph = GeometryGraph(0, flat)
        assert graph.edges == []
        assert "collapsed ring" in caplog.text
        assert graph.dimension == Dimension.EMPTY

    def test_empty_geometry(self):
        graph = GeometryGraph(0, Polygon())
        assert graph.edges == []
        assert list(graph.nodes) == []

    def test_unsupported_geometry(self):
        class Circle(Geometry):
            geom_type = GeometryType.POLYGON
            dimension = Dimension.AREA
            is_empty = False

            def coords(self):
                return iter([])

        with pytest.raises(TypeError):
            GeometryGraph(0, Circle())


class TestSelfNoding:
    """Test compute_self_nodes and compute_split_edges"""

    def test_self_crossing_line(self):
        graph = GeometryGraph(0, LineString([(0, 0), (2, 2), (2, 0), (0, 2)]))
        intersector = graph.compute_self_nodes(LineIntersector())
        assert intersector.has_proper
        assert graph.find_node(c(1, 1)).label.location(0) == Location.INTERIOR

    def test_split_edges_meet_only_at_nodes(self):
        graph = GeometryGraph(0, LineString([(0, 0), (2, 2), (2, 0), (0, 2)]))
        graph.compute_self_nodes(LineIntersector())
        pieces = [edge.coords for edge in graph.compute_split_edges()]
        assert pieces == [
            [c(0, 0), c(1, 1)],
            [c(1, 1), c(2, 2), c(2, 0), c(1, 1)],
            [c(1, 1), c(0, 2)],
        ]
        # the original edge is untouched
        assert len(graph.edges) == 1
        assert len(graph.edges[0].coords) == 4

    def test_ring_segments_not_tested_for_polygons(self):
        graph = GeometryGraph(0, Polygon.from_vertices([(0, 0), (1, 0), (1, 1), (0, 1)]))
        intersector = graph.compute_self_nodes(LineIntersector())
        assert intersector.num_tests == 0
        assert not intersector.has_intersection

    def test_closing_vertex_is_trivial(self):
        graph = GeometryGraph(0, Polygon.from_vertices([(0, 0), (1, 0), (1, 1), (0, 1)]))
        intersector = graph.compute_self_nodes(LineIntersector(), compute_ring_self_nodes=True)
        assert intersector.num_tests > 0
        assert not intersector.has_intersection

    def test_multipolygon_touching_boundary_stays_boundary(self):
        mp = MultiPolygon([
            Polygon.from_vertices([(0, 0), (1, 0), (1, 1), (0, 1)]),
            Polygon.from_vertices([(2, 1), (2, 2), (1, 2), (1, 1)]),
        ])
        graph = GeometryGraph(0, mp)
        graph.compute_self_nodes(LineIntersector())
        assert graph.find_node(c(1, 1)).label.location(0) == Location.BOUNDARY


class TestEdgeIntersections:
    """Test compute_edge_intersections between two graphs"""

    def test_proper_crossing(self):
        graph_a = GeometryGraph(0, LineString([(0, 0), (2, 0)]))
        graph_b = GeometryGraph(1, LineString([(1, -1), (1, 1)]))
        intersector = graph_a.compute_edge_intersections(graph_b, LineIntersector())
        assert intersector.has_proper
        assert intersector.has_proper_interior
        assert not graph_a.edges[0].is_isolated
        assert not graph_b.edges[0].is_isolated
        assert [ei.coordinate for ei in graph_a.edges[0].edge_intersections] == [c(1, 0)]

    def test_endpoint_touch(self):
        graph_a = GeometryGraph(0, LineString([(0, 0), (2, 0)]))
        graph_b = GeometryGraph(1, LineString([(2, 0), (3, 1)]))
        intersector = graph_a.compute_edge_intersections(graph_b, LineIntersector())
        assert intersector.has_intersection
        assert not intersector.has_proper
        assert [ei.coordinate for ei in graph_b.edges[0].edge_intersections] == [c(2, 0)]

    def test_disjoint_edges_stay_isolated(self):
        graph_a = GeometryGraph(0, LineString([(0, 0), (1, 0)]))
        graph_b = GeometryGraph(1, LineString([(0, 1), (1, 1)]))
        graph_a.compute_edge_intersections(graph_b, LineIntersector())
        assert graph_a.edges[0].is_isolated
        assert graph_b.edges[0].is_isolated

    def test_proper_crossing_at_boundary_node_is_not_interior(self):
        """A proper crossing at a line endpoint of a self-crossing geometry is not interior"""
        graph_a = GeometryGraph(0, MultiLineString([[(0, 0), (2, 2)], [(1, 1), (1, 5)]]))
        graph_b = GeometryGraph(1, LineString([(0, 2), (2, 0)]))
        intersector = graph_a.compute_edge_intersections(graph_b, LineIntersector())
        assert intersector.has_proper
        assert not intersector.has_proper_interior


class TestGraphDimensions:
    """Test the dimensions reported by a graph"""

    def test_dimensions_by_type(self):
        square = Polygon.from_vertices([(0, 0), (1, 0), (1, 1), (0, 1)])
        assert GeometryGraph(0, Point(0, 0)).dimension == Dimension.POINT
        assert GeometryGraph(0, LineString([(0, 0), (1, 0)])).dimension == Dimension.LINE
        assert GeometryGraph(0, square).dimension == Dimension.AREA
        assert GeometryGraph(0, Polygon()).dimension == Dimension.EMPTY

    def test_boundary_dimension_by_type(self):
        square = Polygon.from_vertices([(0, 0), (1, 0), (1, 1), (0, 1)])
        assert GeometryGraph(0, Point(0, 0)).boundary_dimension == Dimension.EMPTY
        assert GeometryGraph(0, LineString([(0, 0), (1, 0)])).boundary_dimension == Dimension.POINT
        assert GeometryGraph(0, square).boundary_dimension == Dimension.LINE

    def test_closed_loop_of_parts_has_no_boundary_under_mod2(self):
        loop = MultiLineString([[(0, 0), (1, 0)], [(1, 0), (1, 1)], [(1, 1), (0, 0)]])
        assert GeometryGraph(0, loop).boundary_dimension == Dimension.EMPTY
        graph = GeometryGraph(0, loop, BoundaryNodeRule.ENDPOINT)
        assert graph.boundary_dimension == Dimension.POINT

    def test_closed_line_boundary_follows_rule(self):
        ring = LineString([(0, 0), (1, 0), (1, 1), (0, 0)])
        assert GeometryGraph(0, ring).boundary_dimension == Dimension.EMPTY
        assert GeometryGraph(0, ring, BoundaryNodeRule.ENDPOINT).boundary_dimension == Dimension.POINT
