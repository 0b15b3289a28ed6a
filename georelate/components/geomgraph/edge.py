from typing import TYPE_CHECKING, List, Sequence

from georelate.core import Dimension, PartialLabelError
from georelate.components.geometry import Coordinate
from georelate.components.algorithms import LineIntersection, LineIntersector
from georelate.components.geomgraph.label import Label
from georelate.components.geomgraph.edge_intersection import EdgeIntersectionList

if TYPE_CHECKING:
    from georelate.components.relate.intersection_matrix import IntersectionMatrix


class Edge:
    """
    A labelled polyline of a geometry graph

    Edges are stored once per graph and referred to by identity. The
    coordinate list never changes; noding only records intersection points
    in the edge's intersection list.
    """

    def __init__(self, coords: Sequence[Coordinate], label: Label):
        """
        Initialize edge

        Args:
            coords: At least two coordinates, no consecutive duplicates
            label: Topology label of the edge
        """
        if len(coords) < 2:
            raise ValueError(f"Edge needs at least 2 coordinates, got {len(coords)}")
        self._coords = list(coords)
        self.label = label
        self._is_isolated = True
        self._edge_intersections = EdgeIntersectionList(self)

    @property
    def coords(self) -> List[Coordinate]:
        return self._coords

    @property
    def coordinate(self) -> Coordinate:
        """First coordinate of the edge"""
        return self._coords[0]

    @property
    def is_closed(self) -> bool:
        return self._coords[0] == self._coords[-1]

    @property
    def is_isolated(self) -> bool:
        """True while no edge of the other geometry has been found to touch it"""
        return self._is_isolated

    def mark_as_unisolated(self) -> None:
        self._is_isolated = False

    @property
    def edge_intersections(self) -> EdgeIntersectionList:
        return self._edge_intersections

    def add_intersections(self, intersection: LineIntersection, segment_index: int) -> None:
        """Record every point of a segment intersection on this edge"""
        for point in intersection.points:
            self.add_intersection(point, segment_index)

    def add_intersection(self, point: Coordinate, segment_index: int) -> None:
        """
        Record one intersection point found on segment segment_index

        A point equal to the segment's end vertex is stored against the
        next segment with distance 0, so a vertex has a single key.
        """
        normalized_index = segment_index
        distance = LineIntersector.compute_edge_distance(
            point, self._coords[segment_index], self._coords[segment_index + 1]
        )

        next_index = segment_index + 1
        if next_index < len(self._coords) and point == self._coords[next_index]:
            normalized_index = next_index
            distance = 0.0

        self._edge_intersections.add(point, normalized_index, distance)

    def split(self) -> List['Edge']:
        """
        Edges obtained by cutting this edge at every recorded intersection

        Each piece keeps a copy of this edge's label.
        """
        return [Edge(piece, self.label.copy()) for piece in self._edge_intersections.split_edge_coordinates()]

    def update_intersection_matrix(self, im: 'IntersectionMatrix') -> None:
        """
        Contribute this edge's label to the matrix

        Raises:
            PartialLabelError: If the label does not cover both geometries
        """
        if self.label.geometry_count < 2:
            raise PartialLabelError("edge", self.coordinate)
        im.set_at_least_from_label(self.label, Dimension.LINE)

    def __repr__(self) -> str:
        points = ", ".join(f"{c.x} {c.y}" for c in self._coords)
        return f"Edge({self.label!r}: LINESTRING({points}))"
