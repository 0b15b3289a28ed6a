"""
Topology graph shared by the relate computation.

Labels, edges, edge-ends, nodes, and the noding of one or two geometry
graphs.
"""

from georelate.components.geomgraph.label import Label, TopologyPosition
from georelate.components.geomgraph.edge_intersection import EdgeIntersection, EdgeIntersectionList
from georelate.components.geomgraph.edge import Edge
from georelate.components.geomgraph.edge_end import EdgeEnd
from georelate.components.geomgraph.edge_end_star import EdgeEndStar
from georelate.components.geomgraph.node import Node, NodeFactory, NodeMap
from georelate.components.geomgraph.segment_intersector import SegmentIntersector
from georelate.components.geomgraph.edge_set_intersector import SweepLineEdgeSetIntersector
from georelate.components.geomgraph.geometry_graph import GeometryGraph

__all__ = [
    'Label',
    'TopologyPosition',
    'EdgeIntersection',
    'EdgeIntersectionList',
    'Edge',
    'EdgeEnd',
    'EdgeEndStar',
    'Node',
    'NodeFactory',
    'NodeMap',
    'SegmentIntersector',
    'SweepLineEdgeSetIntersector',
    'GeometryGraph',
]
