"""
Nodes of the relate graph.

A RelateNode keeps its edge-ends grouped in EdgeEndBundles, one per
direction, so coincident edges of either geometry are labelled together.
"""
from typing import TYPE_CHECKING, List

from georelate.core import BoundaryNodeRule, Dimension, Location, PartialLabelError, Position
from georelate.components.geometry import Coordinate
from georelate.components.geomgraph import EdgeEnd, EdgeEndStar, Label, Node, NodeFactory

if TYPE_CHECKING:
    from georelate.components.relate.intersection_matrix import IntersectionMatrix


class EdgeEndBundle(EdgeEnd):
    """
    Edge-ends leaving the same node in the same direction

    Behaves as a single edge-end whose label summarises the whole bundle.
    """

    def __init__(self, edge_end: EdgeEnd):
        super().__init__(edge_end.edge, edge_end.coordinate, edge_end.direction_coordinate, edge_end.label)
        self._edge_ends: List[EdgeEnd] = [edge_end]

    def insert(self, edge_end: EdgeEnd) -> None:
        self._edge_ends.append(edge_end)

    @property
    def edge_ends(self) -> List[EdgeEnd]:
        return self._edge_ends

    def compute_label(self, boundary_node_rule: BoundaryNodeRule) -> None:
        """
        Merge the labels of the bundled edge-ends

        The summary is an area label as soon as one member is an area edge.
        """
        is_area = any(edge_end.label.is_area() for edge_end in self._edge_ends)
        self.label = Label.empty_area() if is_area else Label.empty_line()

        for geom_index in (0, 1):
            self._compute_label_on(geom_index, boundary_node_rule)
            if is_area:
                self._compute_label_side(geom_index, Position.LEFT)
                self._compute_label_side(geom_index, Position.RIGHT)

    def _compute_label_on(self, geom_index: int, boundary_node_rule: BoundaryNodeRule) -> None:
        """
        ON location of the bundle for one geometry

        Boundary edges are counted and resolved with the boundary node rule,
        so two polygons sharing an edge in one collection make it interior.
        Boundary takes precedence over an interior edge lying on top of it.
        """
        boundary_count = 0
        found_interior = False
        for edge_end in self._edge_ends:
            location = edge_end.label.location(geom_index)
            if location == Location.BOUNDARY:
                boundary_count += 1
            elif location == Location.INTERIOR:
                found_interior = True

        location = Location.NONE
        if found_interior:
            location = Location.INTERIOR
        if boundary_count > 0:
            location = boundary_node_rule.determine_boundary(boundary_count)
        self.label.set_on_location(geom_index, location)

    def _compute_label_side(self, geom_index: int, side: Position) -> None:
        # interior wins over exterior: touching polygons of one collection
        # have the interior on both sides of their shared edge
        found_exterior = False
        for edge_end in self._edge_ends:
            if not edge_end.label.is_area():
                continue
            location = edge_end.label.location(geom_index, side)
            if location == Location.INTERIOR:
                self.label.set_location(geom_index, side, Location.INTERIOR)
                return
            if location == Location.EXTERIOR:
                found_exterior = True
        if found_exterior:
            self.label.set_location(geom_index, side, Location.EXTERIOR)

    def update_intersection_matrix(self, im: 'IntersectionMatrix') -> None:
        im.set_at_least_from_label(self.label, Dimension.LINE)

    def __repr__(self) -> str:
        return f"EdgeEndBundle({len(self._edge_ends)} x {super().__repr__()})"


class EdgeEndBundleStar(EdgeEndStar):
    """Edge-end star that merges same-direction edge-ends into bundles"""

    def insert(self, edge_end: EdgeEnd) -> None:
        bundle = self.find(edge_end)
        if bundle is None:
            self._insert_edge_end(EdgeEndBundle(edge_end))
        else:
            bundle.insert(edge_end)

    def update_intersection_matrix(self, im: 'IntersectionMatrix') -> None:
        for bundle in self.edge_ends:
            bundle.update_intersection_matrix(im)


class RelateNode(Node):
    """Node of the relate graph, carrying an EdgeEndBundleStar"""

    def __init__(self, coordinate: Coordinate):
        super().__init__(coordinate, EdgeEndBundleStar())

    def update_intersection_matrix(self, im: 'IntersectionMatrix') -> None:
        """
        Fold the node's own label in as a point intersection

        Raises:
            PartialLabelError: If the node is not labelled for both geometries
        """
        if self.label.geometry_count < 2:
            raise PartialLabelError("node", self.coordinate)
        im.set_at_least_if_valid(self.label.location(0), self.label.location(1), Dimension.POINT)

    def update_intersection_matrix_from_edges(self, im: 'IntersectionMatrix') -> None:
        self.edge_ends.update_intersection_matrix(im)


class RelateNodeFactory(NodeFactory):
    def create_node(self, coordinate: Coordinate) -> RelateNode:
        return RelateNode(coordinate)
