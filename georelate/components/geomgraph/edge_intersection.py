from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterator, List, Tuple

from georelate.components.geometry import Coordinate

if TYPE_CHECKING:
    from georelate.components.geomgraph.edge import Edge


@dataclass(frozen=True)
class EdgeIntersection:
    """
    A point where an edge is intersected

    segment_index is the segment containing the point and distance its
    ordering distance from the segment start. A point exactly at a vertex
    is always stored against the segment that starts there.
    """
    coordinate: Coordinate
    segment_index: int
    distance: float

    @property
    def sort_key(self) -> Tuple[int, float]:
        return (self.segment_index, self.distance)


class EdgeIntersectionList:
    """
    Ordered, duplicate-free set of the intersections along one edge

    Keyed by (segment_index, distance). Iteration is always in order along
    the edge.
    """

    def __init__(self, edge: 'Edge'):
        self._edge = edge
        self._nodes: Dict[Tuple[int, float], EdgeIntersection] = {}

    def add(self, coordinate: Coordinate, segment_index: int, distance: float) -> EdgeIntersection:
        """
        Add an intersection unless one already exists at the same position

        Returns:
            The stored EdgeIntersection (new or existing)
        """
        key = (segment_index, distance)
        existing = self._nodes.get(key)
        if existing is not None:
            return existing
        intersection = EdgeIntersection(coordinate, segment_index, distance)
        self._nodes[key] = intersection
        return intersection

    def add_endpoints(self) -> None:
        """Make sure the first and last edge points are present"""
        coords = self._edge.coords
        max_segment_index = len(coords) - 1
        self.add(coords[0], 0, 0.0)
        self.add(coords[max_segment_index], max_segment_index, 0.0)

    def split_edge_coordinates(self) -> List[List[Coordinate]]:
        """
        Coordinate lists of the pieces between consecutive intersections

        Endpoints are added first, so the pieces cover the whole edge.
        """
        self.add_endpoints()
        pieces = []
        ordered = list(self)
        for previous, current in zip(ordered, ordered[1:]):
            pieces.append(self._split_coordinates(previous, current))
        return pieces

    def _split_coordinates(self, ei0: EdgeIntersection, ei1: EdgeIntersection) -> List[Coordinate]:
        coords = self._edge.coords
        last_segment_start = coords[ei1.segment_index]
        use_end_point = ei1.distance > 0.0 or ei1.coordinate != last_segment_start

        piece = [ei0.coordinate]
        piece.extend(coords[ei0.segment_index + 1:ei1.segment_index + 1])
        if use_end_point:
            piece.append(ei1.coordinate)
        return piece

    def __iter__(self) -> Iterator[EdgeIntersection]:
        for key in sorted(self._nodes):
            yield self._nodes[key]

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"EdgeIntersectionList({list(self)!r})"
