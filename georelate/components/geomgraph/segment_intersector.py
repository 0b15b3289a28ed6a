from typing import Iterable, Set

from georelate.components.geometry import Coordinate
from georelate.components.algorithms import LineIntersection, LineIntersector
from georelate.components.geomgraph.edge import Edge
from georelate.components.geomgraph.node import Node


class SegmentIntersector:
    """
    Intersects pairs of segments and records the results on their edges

    Also tracks whether any proper intersection was found and whether one
    lies in the interior of both geometries, which lets relate conclude
    early for some dimension pairs.
    """

    def __init__(self, line_intersector: LineIntersector, include_proper: bool = True, record_isolated: bool = False):
        """
        Args:
            line_intersector: Segment intersection kernel
            include_proper: Record proper intersections on the edges
            record_isolated: Mark intersecting edges as not isolated
        """
        self._li = line_intersector
        self._include_proper = include_proper
        self._record_isolated = record_isolated
        self._boundary_coordinates: Set[Coordinate] = set()

        self.has_intersection = False
        self.has_proper = False
        self.has_proper_interior = False
        self.num_tests = 0

    def set_boundary_nodes(self, *node_groups: Iterable[Node]) -> None:
        """Boundary nodes of both geometries, used to classify proper intersections"""
        self._boundary_coordinates = {node.coordinate for nodes in node_groups for node in nodes}

    def _is_trivial_intersection(self, intersection: LineIntersection, e0: Edge, si0: int, e1: Edge, si1: int) -> bool:
        """
        True for the shared vertex of adjacent segments of one edge

        That includes the closing vertex of a closed edge, shared by its
        first and last segments.
        """
        if e0 is not e1 or not intersection.is_single_point:
            return False
        if abs(si0 - si1) == 1:
            return True
        if e0.is_closed:
            last_segment = len(e0.coords) - 2
            if (si0 == 0 and si1 == last_segment) or (si1 == 0 and si0 == last_segment):
                return True
        return False

    def _is_boundary_point(self, intersection: LineIntersection) -> bool:
        return any(point in self._boundary_coordinates for point in intersection.points)

    def add_intersections(self, e0: Edge, si0: int, e1: Edge, si1: int) -> None:
        """
        Intersect segment si0 of e0 with segment si1 of e1
        """
        if e0 is e1 and si0 == si1:
            return
        self.num_tests += 1

        intersection = self._li.compute_intersection(
            e0.coords[si0], e0.coords[si0 + 1], e1.coords[si1], e1.coords[si1 + 1]
        )
        if intersection is None:
            return

        if self._record_isolated:
            e0.mark_as_unisolated()
            e1.mark_as_unisolated()

        if self._is_trivial_intersection(intersection, e0, si0, e1, si1):
            return

        self.has_intersection = True
        if self._include_proper or not intersection.is_proper:
            e0.add_intersections(intersection, si0)
            e1.add_intersections(intersection, si1)

        if intersection.is_proper:
            self.has_proper = True
            if not self._is_boundary_point(intersection):
                self.has_proper_interior = True
