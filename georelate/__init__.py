"""
georelate - DE-9IM spatial relationships of planar geometries.

    >>> from georelate import relate, Polygon
    >>> a = Polygon([(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)])
    >>> b = Polygon([(2, 0), (3, 0), (3, 1), (2, 1), (2, 0)])
    >>> str(relate(a, b))
    'FF2FF1212'
"""
from georelate.core import (
    BoundaryNodeRule,
    Dimension,
    Location,
    RELATE_CONSTANTS,
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
from georelate.components.geometry import (
    Coordinate,
    Point,
    Line,
    LineString,
    Polygon,
    Rect,
    GeometryCollection,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryAdapter,
    GeometryParserFactory,
)
from georelate.components.relate import (
    IntersectionMatrix,
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
from georelate.validation import GeometryValidatorManager

__version__ = "1.0.0"

__all__ = [
    "BoundaryNodeRule",
    "Dimension",
    "Location",
    "RELATE_CONSTANTS",
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
    "Coordinate",
    "Point",
    "Line",
    "LineString",
    "Polygon",
    "Rect",
    "GeometryCollection",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "GeometryAdapter",
    "GeometryParserFactory",
    "IntersectionMatrix",
    "relate",
    "relate_pattern",
    "intersects",
    "disjoint",
    "touches",
    "crosses",
    "overlaps",
    "within",
    "contains",
    "covers",
    "covered_by",
    "equals",
    "GeometryValidatorManager",
]
