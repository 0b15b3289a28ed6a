from typing import Callable, Dict, Iterator, Optional

from georelate.core import Location
from georelate.components.geometry import Coordinate
from georelate.components.geomgraph.label import Label
from georelate.components.geomgraph.edge_end import EdgeEnd
from georelate.components.geomgraph.edge_end_star import EdgeEndStar


class Node:
    """
    A graph node: a coordinate with a label and, optionally, a star of edge-ends
    """

    def __init__(self, coordinate: Coordinate, edge_ends: Optional[EdgeEndStar] = None):
        self.coordinate = coordinate
        self.edge_ends = edge_ends
        self.label = Label.empty_line()
        # line endpoints counted at this node
        self.boundary_count = 0

    def add_edge_end(self, edge_end: EdgeEnd) -> None:
        if self.edge_ends is None:
            raise ValueError(f"Node at {self.coordinate} has no edge-end star")
        self.edge_ends.insert(edge_end)

    @property
    def is_isolated(self) -> bool:
        """True if only one geometry has labelled this node"""
        return self.label.geometry_count == 1

    def set_label(self, geom_index: int, location: Location) -> None:
        self.label.set_on_location(geom_index, location)

    def set_label_boundary(self, geom_index: int) -> None:
        """
        Count one more line endpoint at this node

        Under the mod-2 rule two endpoints cancel, so the location toggles
        between BOUNDARY and INTERIOR.
        """
        location = self.label.location(geom_index)
        if location == Location.BOUNDARY:
            new_location = Location.INTERIOR
        else:
            new_location = Location.BOUNDARY
        self.label.set_on_location(geom_index, new_location)

    def __repr__(self) -> str:
        return f"Node(({self.coordinate.x} {self.coordinate.y}) {self.label!r})"


class NodeFactory:
    """Creates plain nodes without edge-end stars"""

    def create_node(self, coordinate: Coordinate) -> Node:
        return Node(coordinate)


class NodeMap:
    """
    Nodes of a graph keyed by exact coordinate

    Nodes are created through the factory, so the same map serves plain
    geometry graphs and relate graphs whose nodes carry edge-end bundles.
    """

    def __init__(self, node_factory: Optional[NodeFactory] = None):
        self._node_factory = node_factory or NodeFactory()
        self._nodes: Dict[Coordinate, Node] = {}

    def add_node(self, coordinate: Coordinate) -> Node:
        """Get the node at the coordinate, creating it if needed"""
        node = self._nodes.get(coordinate)
        if node is None:
            node = self._node_factory.create_node(coordinate)
            self._nodes[coordinate] = node
        return node

    def add_edge_end(self, edge_end: EdgeEnd) -> None:
        """Attach an edge-end to the node at its origin"""
        node = self.add_node(edge_end.coordinate)
        node.add_edge_end(edge_end)

    def find(self, coordinate: Coordinate) -> Optional[Node]:
        return self._nodes.get(coordinate)

    def boundary_nodes(self, geom_index: int) -> Iterator[Node]:
        return (node for node in self._nodes.values() if node.label.location(geom_index) == Location.BOUNDARY)

    def values(self, key: Optional[Callable] = None) -> Iterator[Node]:
        """Nodes in insertion order, or sorted by the given key"""
        if key is None:
            return iter(list(self._nodes.values()))
        return iter(sorted(self._nodes.values(), key=key))

    def __contains__(self, coordinate: Coordinate) -> bool:
        return coordinate in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)
