"""
Sweep-line search for intersecting segment pairs.

Every segment contributes an insert event at its minimum x and a delete
event at its maximum x. Events are sorted by x with inserts first, so
segments that only touch at an x value are still tested. Each insert is
compared with the inserts that follow it before its own delete, which is
exactly the set of segments whose x-ranges overlap it.
"""
from dataclasses import dataclass, field
from typing import Hashable, List, Optional, Sequence

from georelate.components.geomgraph.edge import Edge
from georelate.components.geomgraph.segment_intersector import SegmentIntersector

_INSERT = 0
_DELETE = 1


@dataclass
class _SweepLineEvent:
    x: float
    kind: int
    edge: Optional[Edge] = None
    segment_index: int = -1
    group: Optional[Hashable] = None
    min_y: float = 0.0
    max_y: float = 0.0
    insert_event: Optional['_SweepLineEvent'] = None
    delete_index: int = field(default=-1, repr=False)

    @property
    def is_insert(self) -> bool:
        return self.kind == _INSERT


class SweepLineEdgeSetIntersector:
    """Finds intersections within one edge set or between two edge sets"""

    def __init__(self):
        self._events: List[_SweepLineEvent] = []

    def _add_edge(self, edge: Edge, group: Optional[Hashable]) -> None:
        coords = edge.coords
        for i in range(len(coords) - 1):
            p0, p1 = coords[i], coords[i + 1]
            insert = _SweepLineEvent(
                x=min(p0.x, p1.x),
                kind=_INSERT,
                edge=edge,
                segment_index=i,
                group=group,
                min_y=min(p0.y, p1.y),
                max_y=max(p0.y, p1.y),
            )
            self._events.append(insert)
            self._events.append(_SweepLineEvent(x=max(p0.x, p1.x), kind=_DELETE, insert_event=insert))

    def _prepare_events(self) -> None:
        # stable sort keeps edge order for events at the same x
        self._events.sort(key=lambda event: (event.x, event.kind))
        for index, event in enumerate(self._events):
            if not event.is_insert:
                event.insert_event.delete_index = index

    def _process_overlaps(self, segment_intersector: SegmentIntersector) -> None:
        events = self._events
        for start, event in enumerate(events):
            if not event.is_insert:
                continue
            for other in events[start + 1:event.delete_index]:
                if not other.is_insert:
                    continue
                if event.group is not None and event.group == other.group:
                    continue
                if other.min_y > event.max_y or other.max_y < event.min_y:
                    continue
                segment_intersector.add_intersections(event.edge, event.segment_index,
                                                      other.edge, other.segment_index)

    def compute_intersections_within_set(
        self,
        edges: Sequence[Edge],
        segment_intersector: SegmentIntersector,
        test_all_segments: bool
    ) -> None:
        """
        Intersect the segments of one edge set with each other

        Args:
            edges: Edges of a single geometry
            segment_intersector: Receives every candidate pair
            test_all_segments: Also test segments of the same edge against
                each other
        """
        self._events = []
        for edge in edges:
            self._add_edge(edge, None if test_all_segments else id(edge))
        self._prepare_events()
        self._process_overlaps(segment_intersector)

    def compute_intersections_between_sets(
        self,
        edges0: Sequence[Edge],
        edges1: Sequence[Edge],
        segment_intersector: SegmentIntersector
    ) -> None:
        """Intersect every segment of edges0 with every overlapping segment of edges1"""
        self._events = []
        for edge in edges0:
            self._add_edge(edge, 0)
        for edge in edges1:
            self._add_edge(edge, 1)
        self._prepare_events()
        self._process_overlaps(segment_intersector)
