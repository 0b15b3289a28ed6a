"""Core enums, exceptions and constants shared by all georelate components"""
from georelate.core.enums import (
    Location,
    Position,
    Dimension,
    DimensionSymbol,
    Quadrant,
    Orientation,
    GeometryType,
    BoundaryNodeRule,
    ParameterName,
)
from georelate.core.exceptions import (
    GeoRelateException,
    GeometryValidationError,
    InvalidGeometryError,
    NonFiniteCoordinateError,
    InvalidRectBoundsError,
    TopologyError,
    TopologyInconsistencyError,
    PartialLabelError,
    InvalidPatternError,
    GeometryParseError,
)
from georelate.core.relate_constants import RelateConstants, RELATE_CONSTANTS

__all__ = [
    "Location",
    "Position",
    "Dimension",
    "DimensionSymbol",
    "Quadrant",
    "Orientation",
    "GeometryType",
    "BoundaryNodeRule",
    "ParameterName",
    "GeoRelateException",
    "GeometryValidationError",
    "InvalidGeometryError",
    "NonFiniteCoordinateError",
    "InvalidRectBoundsError",
    "TopologyError",
    "TopologyInconsistencyError",
    "PartialLabelError",
    "InvalidPatternError",
    "GeometryParseError",
    "RelateConstants",
    "RELATE_CONSTANTS",
]
