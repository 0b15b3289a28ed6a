"""
Ordered star of edge-ends around a node.

Edge-ends are kept sorted counter-clockwise. Labelling fills in every
location an edge-end does not know yet: side labels are propagated around
the star, and locations still missing after that are found by locating the
node in the other geometry's areas.
"""
import bisect
import logging
from functools import cmp_to_key
from typing import TYPE_CHECKING, Iterator, List, Optional, Sequence

from georelate.core import Location, Position, TopologyInconsistencyError
from georelate.components.geometry import Coordinate
from georelate.components.algorithms import PointLocator
from georelate.components.geomgraph.edge_end import EdgeEnd

if TYPE_CHECKING:
    from georelate.components.geomgraph.geometry_graph import GeometryGraph

logger = logging.getLogger(__name__)

_DIRECTION_KEY = cmp_to_key(lambda a, b: a.compare_direction(b))


class EdgeEndStar:
    """
    Edge-ends incident to one node, sorted by direction

    Subclasses decide how an inserted edge-end is merged with edge-ends
    already present in the same direction.
    """

    def __init__(self):
        self._edge_ends: List[EdgeEnd] = []
        self._keys: list = []
        # cached point-in-area result of the node, per geometry
        self._area_locations = [Location.NONE, Location.NONE]

    def insert(self, edge_end: EdgeEnd) -> None:
        self._insert_edge_end(edge_end)

    def _insert_edge_end(self, edge_end: EdgeEnd) -> None:
        key = _DIRECTION_KEY(edge_end)
        index = bisect.bisect_right(self._keys, key)
        self._keys.insert(index, key)
        self._edge_ends.insert(index, edge_end)

    def find(self, edge_end: EdgeEnd) -> Optional[EdgeEnd]:
        """Edge-end already in the star with the same direction, if any"""
        key = _DIRECTION_KEY(edge_end)
        index = bisect.bisect_left(self._keys, key)
        if index < len(self._edge_ends) and self._edge_ends[index].compare_direction(edge_end) == 0:
            return self._edge_ends[index]
        return None

    @property
    def edge_ends(self) -> List[EdgeEnd]:
        return self._edge_ends

    @property
    def coordinate(self) -> Optional[Coordinate]:
        if not self._edge_ends:
            return None
        return self._edge_ends[0].coordinate

    def __iter__(self) -> Iterator[EdgeEnd]:
        return iter(self._edge_ends)

    def __len__(self) -> int:
        return len(self._edge_ends)

    def compute_labelling(self, graphs: Sequence['GeometryGraph']) -> None:
        """
        Complete the labels of every edge-end in the star

        Args:
            graphs: The two geometry graphs, indexed like the labels

        Raises:
            TopologyInconsistencyError: If side labels conflict
        """
        boundary_node_rule = graphs[0].boundary_node_rule
        for edge_end in self._edge_ends:
            edge_end.compute_label(boundary_node_rule)

        self.propagate_side_labels(0)
        self.propagate_side_labels(1)

        # a line-labelled edge on an area boundary means the area collapsed
        # to a line here, so any unknown location is outside it
        has_dimensional_collapse = [False, False]
        for edge_end in self._edge_ends:
            for geom_index in (0, 1):
                if edge_end.label.is_line(geom_index) and edge_end.label.location(geom_index) == Location.BOUNDARY:
                    has_dimensional_collapse[geom_index] = True

        for edge_end in self._edge_ends:
            label = edge_end.label
            for geom_index in (0, 1):
                if not label.is_any_empty(geom_index):
                    continue
                if has_dimensional_collapse[geom_index]:
                    location = Location.EXTERIOR
                else:
                    location = self._locate_in_areas(geom_index, edge_end.coordinate, graphs)
                label.set_all_locations_if_empty(geom_index, location)

    def _locate_in_areas(self, geom_index: int, coordinate: Coordinate, graphs: Sequence['GeometryGraph']) -> Location:
        if self._area_locations[geom_index] == Location.NONE:
            self._area_locations[geom_index] = PointLocator.locate_in_areas(coordinate, graphs[geom_index].geometry)
        return self._area_locations[geom_index]

    def propagate_side_labels(self, geom_index: int) -> None:
        """
        Carry known side locations counter-clockwise around the star

        Starts from the last area edge-end's LEFT location (the side that
        faces the first edge-end), then walks the star once.

        Raises:
            TopologyInconsistencyError: If a known side disagrees with the
                propagated location
        """
        start_location = Location.NONE
        for edge_end in self._edge_ends:
            label = edge_end.label
            if label.is_area(geom_index) and label.location(geom_index, Position.LEFT) != Location.NONE:
                start_location = label.location(geom_index, Position.LEFT)

        # no area edges for this geometry
        if start_location == Location.NONE:
            return

        current_location = start_location
        for edge_end in self._edge_ends:
            label = edge_end.label
            if label.location(geom_index, Position.ON) == Location.NONE:
                label.set_location(geom_index, Position.ON, current_location)

            if not label.is_area(geom_index):
                continue

            left_location = label.location(geom_index, Position.LEFT)
            right_location = label.location(geom_index, Position.RIGHT)

            if right_location != Location.NONE:
                if right_location != current_location:
                    logger.debug("[EDGE END STAR]: side location conflict at %s", edge_end)
                    raise TopologyInconsistencyError("side location conflict", edge_end.coordinate)
                if left_location == Location.NONE:
                    raise TopologyInconsistencyError("found single null side", edge_end.coordinate)
                current_location = left_location
            else:
                if label.location(geom_index, Position.LEFT) != Location.NONE:
                    raise TopologyInconsistencyError("found single null side", edge_end.coordinate)
                label.set_location(geom_index, Position.RIGHT, current_location)
                label.set_location(geom_index, Position.LEFT, current_location)

    def __repr__(self) -> str:
        lines = [f"EdgeEndStar: {self.coordinate}"]
        lines.extend(f"  {edge_end!r}" for edge_end in self._edge_ends)
        return "\n".join(lines)
