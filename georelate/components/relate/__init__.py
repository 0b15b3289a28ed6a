"""
DE-9IM relate computation.

Edge-end construction, node bundling, the intersection matrix and the
public relate/predicate functions.
"""

from georelate.components.relate.intersection_matrix import IntersectionMatrix
from georelate.components.relate.edge_end_builder import EdgeEndBuilder
from georelate.components.relate.relate_node import (
    EdgeEndBundle,
    EdgeEndBundleStar,
    RelateNode,
    RelateNodeFactory,
)
from georelate.components.relate.relate_computer import RelateComputer
from georelate.components.relate.relate_operation import (
    as_geometry,
    relate,
    relate_pattern,
    intersects,
    disjoint,
    touches,
    crosses,
    overlaps,
    within,
    contains,
    covers,
    covered_by,
    equals,
)

__all__ = [
    'IntersectionMatrix',
    'EdgeEndBuilder',
    'EdgeEndBundle',
    'EdgeEndBundleStar',
    'RelateNode',
    'RelateNodeFactory',
    'RelateComputer',
    'as_geometry',
    'relate',
    'relate_pattern',
    'intersects',
    'disjoint',
    'touches',
    'crosses',
    'overlaps',
    'within',
    'contains',
    'covers',
    'covered_by',
    'equals',
]
