"""
Robust geometric kernel used by the relate engine.

Orientation predicate, segment intersection and point location.
"""

from georelate.components.algorithms.orientation import orientation_index, winding_order
from georelate.components.algorithms.line_intersector import (
    LineIntersection,
    LineIntersector,
    envelope_contains,
    envelopes_intersect,
    is_on_segment,
)
from georelate.components.algorithms.point_locator import (
    PointLocator,
    RayCrossingCounter,
    is_on_line,
)

__all__ = [
    'orientation_index',
    'winding_order',
    'LineIntersection',
    'LineIntersector',
    'envelope_contains',
    'envelopes_intersect',
    'is_on_segment',
    'PointLocator',
    'RayCrossingCounter',
    'is_on_line',
]
