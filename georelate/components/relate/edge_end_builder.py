import logging
from typing import List, Optional, Sequence

from georelate.components.geomgraph import Edge, EdgeEnd, EdgeIntersection

logger = logging.getLogger(__name__)


class EdgeEndBuilder:
    """
    Computes the edge-ends of noded edges

    Every intersection on an edge gets a stub pointing back along the edge
    (with the label flipped) and one pointing forward. Only the edge and
    its own intersection list are looked at.
    """

    def compute_edge_ends(self, edges: Sequence[Edge]) -> List[EdgeEnd]:
        edge_ends: List[EdgeEnd] = []
        for edge in edges:
            self._compute_edge_ends(edge, edge_ends)
        return edge_ends

    def _compute_edge_ends(self, edge: Edge, edge_ends: List[EdgeEnd]) -> None:
        intersections = edge.edge_intersections
        intersections.add_endpoints()

        ordered = list(intersections)
        for i, current in enumerate(ordered):
            previous = ordered[i - 1] if i > 0 else None
            following = ordered[i + 1] if i + 1 < len(ordered) else None
            self._create_edge_end_for_prev(edge, edge_ends, current, previous)
            self._create_edge_end_for_next(edge, edge_ends, current, following)

    @staticmethod
    def _append(edge_ends: List[EdgeEnd], edge_end: Optional[EdgeEnd]) -> None:
        if edge_end is not None:
            edge_ends.append(edge_end)

    @staticmethod
    def _make_edge_end(edge: Edge, current: EdgeIntersection, direction, flip: bool) -> Optional[EdgeEnd]:
        if direction == current.coordinate:
            logger.debug("[EDGE END BUILDER]: Skipping zero length stub at %s", current.coordinate)
            return None
        label = edge.label.copy()
        if flip:
            label.flip()
        return EdgeEnd(edge, current.coordinate, direction, label)

    def _create_edge_end_for_prev(
        self,
        edge: Edge,
        edge_ends: List[EdgeEnd],
        current: EdgeIntersection,
        previous: Optional[EdgeIntersection]
    ) -> None:
        """
        Stub from current back towards the previous vertex, or towards the
        previous intersection if that one is closer
        """
        prev_index = current.segment_index
        if current.distance == 0.0:
            # at the edge start there is nothing behind
            if prev_index == 0:
                return
            prev_index -= 1

        direction = edge.coords[prev_index]
        if previous is not None and previous.segment_index >= prev_index:
            direction = previous.coordinate

        self._append(edge_ends, self._make_edge_end(edge, current, direction, flip=True))

    def _create_edge_end_for_next(
        self,
        edge: Edge,
        edge_ends: List[EdgeEnd],
        current: EdgeIntersection,
        following: Optional[EdgeIntersection]
    ) -> None:
        """
        Stub from current forward towards the next vertex, or towards the
        next intersection if it lies on the same segment
        """
        next_index = current.segment_index + 1
        # at the edge end there is nothing ahead
        if next_index >= len(edge.coords) and following is None:
            return

        direction = edge.coords[next_index] if next_index < len(edge.coords) else None
        if following is not None and following.segment_index == current.segment_index:
            direction = following.coordinate
        if direction is None:
            return

        self._append(edge_ends, self._make_edge_end(edge, current, direction, flip=False))
