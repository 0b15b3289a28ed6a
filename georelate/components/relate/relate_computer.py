"""
Relate computation.

Builds one geometry graph per argument, nodes them, labels every node and
edge-end bundle with its location in both geometries and folds the labels
into an IntersectionMatrix. No full planar graph is ever built: the labels
of the edges incident to each node are enough to fill the matrix.
"""
import logging
from typing import List

from georelate.core import BoundaryNodeRule, Dimension, GeometryType, Location, RELATE_CONSTANTS
from georelate.components.geometry import Geometry, GeometryOps
from georelate.components.algorithms import LineIntersector, PointLocator
from georelate.components.geomgraph import Edge, EdgeEnd, GeometryGraph, Node, NodeMap, SegmentIntersector
from georelate.components.relate.edge_end_builder import EdgeEndBuilder
from georelate.components.relate.intersection_matrix import IntersectionMatrix
from georelate.components.relate.relate_node import RelateNodeFactory

logger = logging.getLogger(__name__)

# lower bounds implied by a proper intersection, keyed by (dim A, dim B)
_PROPER_BOUNDS = {
    (Dimension.AREA, Dimension.AREA): "212101212",
    (Dimension.AREA, Dimension.LINE): "FFF0FFFF2",
    (Dimension.LINE, Dimension.AREA): "F0FFFFFF2",
}
_PROPER_INTERIOR_BOUNDS = {
    (Dimension.AREA, Dimension.LINE): "1FFFFF1FF",
    (Dimension.LINE, Dimension.AREA): "1F1FFFFFF",
    (Dimension.LINE, Dimension.LINE): "0FFFFFFFF",
}


def _node_order(node: Node):
    return (node.coordinate.x, node.coordinate.y)


class RelateComputer:
    """
    Computes the intersection matrix of two geometries

    A computer is used for a single computation: it owns both graphs, the
    node map and the matrix, and shares nothing with other instances.

    Args:
        geometry_a: First geometry (rows of the matrix)
        geometry_b: Second geometry (columns of the matrix)
        boundary_node_rule: Rule for line endpoints, default Mod-2
    """

    def __init__(
        self,
        geometry_a: Geometry,
        geometry_b: Geometry,
        boundary_node_rule: BoundaryNodeRule = RELATE_CONSTANTS.DEFAULT_BOUNDARY_NODE_RULE
    ):
        self._boundary_node_rule = boundary_node_rule
        self._graphs = [
            GeometryGraph(0, geometry_a, boundary_node_rule),
            GeometryGraph(1, geometry_b, boundary_node_rule),
        ]
        self._li = LineIntersector()
        self._point_locator = PointLocator(boundary_node_rule)
        self._nodes = NodeMap(RelateNodeFactory())
        self._isolated_edges: List[Edge] = []
        self._im = IntersectionMatrix()

    @property
    def graphs(self) -> List[GeometryGraph]:
        return self._graphs

    def compute(self) -> IntersectionMatrix:
        """
        Run the computation

        Returns:
            The frozen intersection matrix of A and B

        Raises:
            TopologyInconsistencyError: If side labels around a node conflict
            PartialLabelError: If a component ends up labelled for one geometry only
        """
        im = self._im
        if im.is_frozen:
            return im
        # both geometries are bounded, so their exteriors always share an area
        im.set(Location.EXTERIOR, Location.EXTERIOR, Dimension.AREA)

        geometry_a, geometry_b = self._graphs[0].geometry, self._graphs[1].geometry
        envelope_a = GeometryOps.bounding_rect(geometry_a)
        envelope_b = GeometryOps.bounding_rect(geometry_b)
        if not GeometryOps.envelopes_intersect(envelope_a, envelope_b):
            logger.debug("[RELATE COMPUTER]: Envelopes are disjoint, skipping graph construction")
            self._compute_disjoint_im(im)
            return im.freeze()

        self._graphs[0].compute_self_nodes(self._li)
        self._graphs[1].compute_self_nodes(self._li)
        intersector = self._graphs[0].compute_edge_intersections(self._graphs[1], self._li)

        self._compute_intersection_nodes(0)
        self._compute_intersection_nodes(1)
        # the graphs' own node labels override labels derived from intersections
        self._copy_nodes_and_labels(0)
        self._copy_nodes_and_labels(1)
        self._label_isolated_nodes()

        self._compute_proper_intersection_im(intersector, im)

        builder = EdgeEndBuilder()
        self._insert_edge_ends(builder.compute_edge_ends(self._graphs[0].edges))
        self._insert_edge_ends(builder.compute_edge_ends(self._graphs[1].edges))
        logger.debug("[RELATE COMPUTER]: %d nodes, %d + %d edges",
                     len(self._nodes), len(self._graphs[0].edges), len(self._graphs[1].edges))

        self._label_node_edges()

        self._label_isolated_edges(0, 1)
        self._label_isolated_edges(1, 0)

        self._update_im(im)
        logger.debug("[RELATE COMPUTER]: Result %s", im)
        return im.freeze()

    def _insert_edge_ends(self, edge_ends: List[EdgeEnd]) -> None:
        for edge_end in edge_ends:
            self._nodes.add_edge_end(edge_end)

    def _compute_proper_intersection_im(self, intersector: SegmentIntersector, im: IntersectionMatrix) -> None:
        """
        Lower bounds implied by a proper intersection

        Only sound when each input has a single dimension. In a mixed
        collection the crossing may involve a line while a polygon lies
        elsewhere, so no bound is applied.
        """
        if any(graph.geometry.geom_type == GeometryType.GEOMETRY_COLLECTION for graph in self._graphs):
            return
        dims = (self._graphs[0].dimension, self._graphs[1].dimension)
        if intersector.has_proper and dims in _PROPER_BOUNDS:
            im.set_at_least_from_pattern(_PROPER_BOUNDS[dims])
        if intersector.has_proper_interior and dims in _PROPER_INTERIOR_BOUNDS:
            im.set_at_least_from_pattern(_PROPER_INTERIOR_BOUNDS[dims])

    def _copy_nodes_and_labels(self, arg_index: int) -> None:
        for graph_node in self._graphs[arg_index].nodes:
            node = self._nodes.add_node(graph_node.coordinate)
            node.set_label(arg_index, graph_node.label.location(arg_index))

    def _compute_intersection_nodes(self, arg_index: int) -> None:
        """
        Create a node for every intersection recorded on the graph's edges

        Nodes on area boundaries are toggled per edge; other nodes are
        interior unless already labelled.
        """
        for edge in self._graphs[arg_index].edges:
            is_boundary_edge = edge.label.location(arg_index) == Location.BOUNDARY
            for intersection in edge.edge_intersections:
                node = self._nodes.add_node(intersection.coordinate)
                if is_boundary_edge:
                    node.set_label_boundary(arg_index)
                elif node.label.is_empty(arg_index):
                    node.set_label(arg_index, Location.INTERIOR)

    def _compute_disjoint_im(self, im: IntersectionMatrix) -> None:
        # dimensions come from the graphs so the boundary node rule applies
        graph_a, graph_b = self._graphs
        if graph_a.dimension != Dimension.EMPTY:
            im.set(Location.INTERIOR, Location.EXTERIOR, graph_a.dimension)
            im.set(Location.BOUNDARY, Location.EXTERIOR, graph_a.boundary_dimension)

        if graph_b.dimension != Dimension.EMPTY:
            im.set(Location.EXTERIOR, Location.INTERIOR, graph_b.dimension)
            im.set(Location.EXTERIOR, Location.BOUNDARY, graph_b.boundary_dimension)

    def _label_node_edges(self) -> None:
        for node in self._nodes.values(key=_node_order):
            node.edge_ends.compute_labelling(self._graphs)

    def _update_im(self, im: IntersectionMatrix) -> None:
        for edge in self._isolated_edges:
            edge.update_intersection_matrix(im)
        for node in self._nodes.values(key=_node_order):
            node.update_intersection_matrix(im)
            node.update_intersection_matrix_from_edges(im)

    def _label_isolated_edges(self, this_index: int, target_index: int) -> None:
        """
        Label the edges of one graph that touch nothing in the other

        Such an edge cannot meet the target's boundary, so one point of it
        locates the whole edge.
        """
        target = self._graphs[target_index]
        for edge in self._graphs[this_index].edges:
            if edge.is_isolated:
                self._label_isolated_edge(edge, target_index, target)
                self._isolated_edges.append(edge)

    def _label_isolated_edge(self, edge: Edge, target_index: int, target: GeometryGraph) -> None:
        if target.dimension > Dimension.POINT:
            location = self._point_locator.locate(edge.coordinate, target.geometry)
            edge.label.set_all_locations(target_index, location)
        else:
            edge.label.set_all_locations(target_index, Location.EXTERIOR)

    def _label_isolated_nodes(self) -> None:
        """Locate nodes known to one geometry only against the other one"""
        for node in self._nodes.values():
            if node.is_isolated:
                target_index = 0 if node.label.is_empty(0) else 1
                location = self._point_locator.locate(node.coordinate, self._graphs[target_index].geometry)
                node.label.set_all_locations(target_index, location)
