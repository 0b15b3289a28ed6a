"""
Public relate entry points.

relate() converts and validates its inputs, then runs a fresh
RelateComputer. The named predicates are thin wrappers that test the
resulting matrix.
"""
import logging
from typing import Any, Tuple

from georelate.core import BoundaryNodeRule, RELATE_CONSTANTS
from georelate.components.geometry import Geometry, GeometryAdapter, GeometryParserFactory
from georelate.components.relate.intersection_matrix import IntersectionMatrix
from georelate.components.relate.relate_computer import RelateComputer
from georelate.validation import GeometryValidatorManager

logger = logging.getLogger(__name__)

_DEFAULT_RULE = RELATE_CONSTANTS.DEFAULT_BOUNDARY_NODE_RULE


def as_geometry(value: Any) -> Geometry:
    """
    Convert relate input to a georelate geometry

    Accepts georelate geometries, shapely geometries and the payloads
    understood by GeometryParserFactory (GeoJSON-like dicts, vertex lists).

    Raises:
        GeometryParseError: If the value cannot be converted
    """
    if isinstance(value, Geometry):
        return value
    if GeometryAdapter.is_shapely(value):
        return GeometryAdapter.from_shapely(value)
    return GeometryParserFactory.parse(value)


def _relate(a: Any, b: Any, boundary_node_rule: BoundaryNodeRule, validate: bool) -> Tuple[IntersectionMatrix, Geometry, Geometry]:
    geometry_a = as_geometry(a)
    geometry_b = as_geometry(b)
    if validate:
        GeometryValidatorManager.ensure_valid(geometry_a)
        GeometryValidatorManager.ensure_valid(geometry_b)
    logger.debug("[RELATE]: %s / %s", geometry_a.geom_type.value, geometry_b.geom_type.value)
    im = RelateComputer(geometry_a, geometry_b, boundary_node_rule).compute()
    return im, geometry_a, geometry_b


def relate(
    a: Any,
    b: Any,
    boundary_node_rule: BoundaryNodeRule = _DEFAULT_RULE,
    validate: bool = True
) -> IntersectionMatrix:
    """
    Compute the DE-9IM intersection matrix of two geometries

    Args:
        a: First geometry (matrix rows)
        b: Second geometry (matrix columns)
        boundary_node_rule: Rule for line endpoints, Mod-2 by default
        validate: Reject malformed input before computing

    Returns:
        Frozen IntersectionMatrix

    Raises:
        GeometryParseError: If an input cannot be converted
        GeometryValidationError: If validate is set and an input is malformed
        TopologyError: If an internal labelling invariant fails
    """
    return _relate(a, b, boundary_node_rule, validate)[0]


def relate_pattern(a: Any, b: Any, pattern: str, boundary_node_rule: BoundaryNodeRule = _DEFAULT_RULE) -> bool:
    """
    Test the relationship of two geometries against a DE-9IM pattern

    Raises:
        InvalidPatternError: If the pattern is malformed
    """
    return relate(a, b, boundary_node_rule).matches(pattern)


def intersects(a: Any, b: Any, boundary_node_rule: BoundaryNodeRule = _DEFAULT_RULE) -> bool:
    return relate(a, b, boundary_node_rule).is_intersects()


def disjoint(a: Any, b: Any, boundary_node_rule: BoundaryNodeRule = _DEFAULT_RULE) -> bool:
    return relate(a, b, boundary_node_rule).is_disjoint()


def touches(a: Any, b: Any, boundary_node_rule: BoundaryNodeRule = _DEFAULT_RULE) -> bool:
    im, geometry_a, geometry_b = _relate(a, b, boundary_node_rule, True)
    return im.is_touches(geometry_a.dimension, geometry_b.dimension)


def crosses(a: Any, b: Any, boundary_node_rule: BoundaryNodeRule = _DEFAULT_RULE) -> bool:
    im, geometry_a, geometry_b = _relate(a, b, boundary_node_rule, True)
    return im.is_crosses(geometry_a.dimension, geometry_b.dimension)


def overlaps(a: Any, b: Any, boundary_node_rule: BoundaryNodeRule = _DEFAULT_RULE) -> bool:
    im, geometry_a, geometry_b = _relate(a, b, boundary_node_rule, True)
    return im.is_overlaps(geometry_a.dimension, geometry_b.dimension)


def within(a: Any, b: Any, boundary_node_rule: BoundaryNodeRule = _DEFAULT_RULE) -> bool:
    return relate(a, b, boundary_node_rule).is_within()


def contains(a: Any, b: Any, boundary_node_rule: BoundaryNodeRule = _DEFAULT_RULE) -> bool:
    return relate(a, b, boundary_node_rule).is_contains()


def covers(a: Any, b: Any, boundary_node_rule: BoundaryNodeRule = _DEFAULT_RULE) -> bool:
    return relate(a, b, boundary_node_rule).is_covers()


def covered_by(a: Any, b: Any, boundary_node_rule: BoundaryNodeRule = _DEFAULT_RULE) -> bool:
    return relate(a, b, boundary_node_rule).is_covered_by()


def equals(a: Any, b: Any, boundary_node_rule: BoundaryNodeRule = _DEFAULT_RULE) -> bool:
    im, geometry_a, geometry_b = _relate(a, b, boundary_node_rule, True)
    return im.is_equals(geometry_a.dimension, geometry_b.dimension)
