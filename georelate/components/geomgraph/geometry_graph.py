"""
Geometry graph.

Decomposes one input geometry into labelled edges (lines and polygon
rings) and nodes (points, line endpoints and self-intersections), and nodes
its edges against themselves or against another graph.
"""
import logging
from typing import Iterator, List, Optional

from georelate.core import BoundaryNodeRule, Dimension, Location, Orientation, RELATE_CONSTANTS
from georelate.components.geometry import (
    Coordinate,
    Geometry,
    GeometryCollection,
    GeometryOps,
    Line,
    LineString,
    MultiPolygon,
    Point,
    Polygon,
    Rect,
)
from georelate.components.algorithms import LineIntersector, winding_order
from georelate.components.geomgraph.label import Label
from georelate.components.geomgraph.edge import Edge
from georelate.components.geomgraph.node import Node, NodeMap
from georelate.components.geomgraph.segment_intersector import SegmentIntersector
from georelate.components.geomgraph.edge_set_intersector import SweepLineEdgeSetIntersector

logger = logging.getLogger(__name__)

_MIN_LINE_POINTS = 2
_MIN_RING_POINTS = 4


class GeometryGraph:
    """
    Planar graph of a single relate argument

    Args:
        arg_index: 0 for the first relate argument, 1 for the second
        geometry: Geometry to decompose (may be empty)
        boundary_node_rule: Rule deciding which line endpoints are boundary
    """

    def __init__(
        self,
        arg_index: int,
        geometry: Geometry,
        boundary_node_rule: BoundaryNodeRule = RELATE_CONSTANTS.DEFAULT_BOUNDARY_NODE_RULE
    ):
        self._arg_index = arg_index
        self._geometry = geometry
        self._boundary_node_rule = boundary_node_rule
        self._nodes = NodeMap()
        self._edges: List[Edge] = []
        # multipolygon self-nodes on the boundary stay boundary, they are not counted
        self._use_boundary_determination_rule = True
        self._add_geometry(geometry)

    @property
    def arg_index(self) -> int:
        return self._arg_index

    @property
    def geometry(self) -> Geometry:
        return self._geometry

    @property
    def boundary_node_rule(self) -> BoundaryNodeRule:
        return self._boundary_node_rule

    @property
    def edges(self) -> List[Edge]:
        return self._edges

    @property
    def nodes(self) -> Iterator[Node]:
        return self._nodes.values()

    def find_node(self, coordinate: Coordinate) -> Optional[Node]:
        return self._nodes.find(coordinate)

    @property
    def dimension(self) -> Dimension:
        """Dimension of what the graph holds, skipped degenerate components excluded"""
        if any(edge.label.is_area() for edge in self._edges):
            return Dimension.AREA
        if self._edges:
            return Dimension.LINE
        if len(self._nodes) > 0:
            return Dimension.POINT
        return Dimension.EMPTY

    @property
    def boundary_dimension(self) -> Dimension:
        """
        Dimension of the boundary under the graph's boundary node rule

        Line endpoints that the rule folds into the interior, such as the
        joints of a closed loop under Mod-2, do not count.
        """
        if any(edge.label.is_area() for edge in self._edges):
            return Dimension.LINE
        if self.boundary_nodes():
            return Dimension.POINT
        return Dimension.EMPTY

    def boundary_nodes(self) -> List[Node]:
        return list(self._nodes.boundary_nodes(self._arg_index))

    def is_boundary_node(self, coordinate: Coordinate) -> bool:
        node = self.find_node(coordinate)
        return node is not None and node.label.location(self._arg_index) == Location.BOUNDARY

    def _add_geometry(self, geometry: Geometry) -> None:
        if geometry.is_empty:
            return

        if isinstance(geometry, MultiPolygon):
            self._use_boundary_determination_rule = False

        if isinstance(geometry, Point):
            self._add_point(geometry.coordinate)
        elif isinstance(geometry, Line):
            self._add_line_string(geometry.to_line_string())
        elif isinstance(geometry, LineString):
            self._add_line_string(geometry)
        elif isinstance(geometry, Rect):
            self._add_polygon(geometry.to_polygon())
        elif isinstance(geometry, Polygon):
            self._add_polygon(geometry)
        elif isinstance(geometry, GeometryCollection):
            for member in geometry.geoms:
                self._add_geometry(member)
        else:
            raise TypeError(f"Unsupported geometry type: {type(geometry).__name__}")

    def _add_point(self, coordinate: Coordinate) -> None:
        self._insert_point(coordinate, Location.INTERIOR)

    def _add_line_string(self, line: LineString) -> None:
        coords = GeometryOps.remove_repeated_points(line.coordinates)
        if len(coords) < _MIN_LINE_POINTS:
            logger.warning("[GEOMETRY GRAPH]: Skipping line string with fewer than %d distinct points",
                           _MIN_LINE_POINTS)
            return

        self._insert_edge(Edge(coords, Label.line(self._arg_index, Location.INTERIOR)))
        self._insert_boundary_point(coords[0])
        self._insert_boundary_point(coords[-1])

    def _add_polygon(self, polygon: Polygon) -> None:
        self._add_polygon_ring(polygon.exterior, Location.EXTERIOR, Location.INTERIOR)
        for hole in polygon.interiors:
            # holes are topologically labelled opposite to the shell
            self._add_polygon_ring(hole, Location.INTERIOR, Location.EXTERIOR)

    def _add_polygon_ring(self, ring: LineString, cw_left: Location, cw_right: Location) -> None:
        """
        Add a ring as an area edge

        Args:
            ring: Closed ring
            cw_left: Location left of the ring when it runs clockwise
            cw_right: Location right of the ring when it runs clockwise
        """
        if ring.is_empty:
            return
        coords = GeometryOps.remove_repeated_points(ring.coordinates)
        if len(coords) < _MIN_RING_POINTS:
            logger.warning("[GEOMETRY GRAPH]: Skipping degenerate ring with %d distinct points", len(coords))
            return

        orientation = winding_order(coords)
        if orientation is None:
            logger.warning("[GEOMETRY GRAPH]: Skipping collapsed ring with zero area")
            return

        left, right = cw_left, cw_right
        if orientation == Orientation.COUNTER_CLOCKWISE:
            left, right = cw_right, cw_left

        self._insert_edge(Edge(coords, Label.area(self._arg_index, Location.BOUNDARY, left, right)))
        # mark the ring start as a node on the boundary
        self._insert_point(coords[0], Location.BOUNDARY)

    def _insert_edge(self, edge: Edge) -> None:
        self._edges.append(edge)

    def _insert_point(self, coordinate: Coordinate, location: Location) -> None:
        self._nodes.add_node(coordinate).set_label(self._arg_index, location)

    def _insert_boundary_point(self, coordinate: Coordinate) -> None:
        """
        Count a line endpoint at the coordinate

        The node's location is recomputed from the number of endpoints seen
        so far, using the boundary node rule.
        """
        node = self._nodes.add_node(coordinate)
        node.boundary_count += 1
        node.set_label(self._arg_index, self._boundary_node_rule.determine_boundary(node.boundary_count))

    def _add_self_intersection_node(self, coordinate: Coordinate, location: Location) -> None:
        # a boundary node stays a boundary node
        if self.is_boundary_node(coordinate):
            return
        if location == Location.BOUNDARY and self._use_boundary_determination_rule:
            self._insert_boundary_point(coordinate)
        else:
            self._insert_point(coordinate, location)

    def _add_self_intersection_nodes(self) -> None:
        for edge in self._edges:
            location = edge.label.location(self._arg_index)
            for intersection in edge.edge_intersections:
                self._add_self_intersection_node(intersection.coordinate, location)

    def _is_rings_only(self) -> bool:
        return isinstance(self._geometry, (Polygon, MultiPolygon, Rect))

    def compute_self_nodes(self, line_intersector: LineIntersector, compute_ring_self_nodes: bool = False) -> SegmentIntersector:
        """
        Node the graph's edges against each other

        Segments of the same ring are not tested against each other for
        purely polygonal input unless compute_ring_self_nodes is set.

        Returns:
            The segment intersector used, for its proper-intersection flags
        """
        segment_intersector = SegmentIntersector(line_intersector, include_proper=True, record_isolated=False)
        test_all_segments = compute_ring_self_nodes or not self._is_rings_only()
        SweepLineEdgeSetIntersector().compute_intersections_within_set(self._edges, segment_intersector, test_all_segments)
        self._add_self_intersection_nodes()
        return segment_intersector

    def compute_edge_intersections(self, other: 'GeometryGraph', line_intersector: LineIntersector,
                                   include_proper: bool = True) -> SegmentIntersector:
        """
        Node this graph's edges against another graph's edges

        Edges touched by the other graph are marked as not isolated.

        Returns:
            The segment intersector used, for its proper-intersection flags
        """
        segment_intersector = SegmentIntersector(line_intersector, include_proper=include_proper,
                                                 record_isolated=True)
        segment_intersector.set_boundary_nodes(self.boundary_nodes(), other.boundary_nodes())
        SweepLineEdgeSetIntersector().compute_intersections_between_sets(self._edges, other.edges, segment_intersector)
        return segment_intersector

    def compute_split_edges(self) -> List[Edge]:
        """
        Edges cut at every recorded intersection

        The graph's own edges are left unchanged.
        """
        split_edges: List[Edge] = []
        for edge in self._edges:
            split_edges.extend(edge.split())
        return split_edges

    def __repr__(self) -> str:
        return (f"GeometryGraph(arg_index={self._arg_index}, edges={len(self._edges)}, "
                f"nodes={len(self._nodes)})")
