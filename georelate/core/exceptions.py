"""
Custom exceptions for the relate engine.

This module defines custom exception classes for the error conditions
that can occur while validating input geometries and while computing
their topological relationship.
"""

from typing import Optional, List, Any


class GeoRelateException(Exception):
    """Base exception class for all georelate errors"""
    pass


class GeometryValidationError(GeoRelateException):
    """Base exception for geometry validation errors"""
    pass


class InvalidGeometryError(GeometryValidationError):
    """
    Exception raised when an input geometry violates the caller contract.

    Unclosed rings, rings or lines with too few distinct points and
    zero-length rings are rejected before any graph is built.
    """

    def __init__(self, geometry_type: str, errors: Optional[List[Any]] = None, details: Optional[str] = None):
        """
        Initialize InvalidGeometryError.

        Args:
            geometry_type: Type name of the rejected geometry
            errors: Validation errors collected for the geometry (optional)
            details: Free text explanation (optional)
        """
        self.geometry_type = geometry_type
        self.errors = errors or []
        self.details = details

        message = f"Invalid {geometry_type} geometry"
        if details:
            message += f": {details}"
        elif self.errors:
            message += ": " + "; ".join(str(e) for e in self.errors)

        super().__init__(message)


class NonFiniteCoordinateError(GeometryValidationError):
    """
    Exception raised when a coordinate is NaN or infinite.

    Relate results are undefined for such input, so it is rejected before
    graph construction.
    """

    def __init__(self, x: float, y: float, index: Optional[int] = None):
        """
        Initialize NonFiniteCoordinateError.

        Args:
            x: Offending x value
            y: Offending y value
            index: Position of the coordinate within its geometry (optional)
        """
        self.x = x
        self.y = y
        self.index = index

        message = f"Coordinate ({x}, {y}) is not finite"
        if index is not None:
            message += f" (coordinate index {index})"

        super().__init__(message)


class InvalidRectBoundsError(GeometryValidationError):
    """Exception raised when a Rect's min corner exceeds its max corner"""

    MESSAGE = (
        "Failed to create Rect: 'min' coordinate's x/y value must be smaller "
        "or equal to the 'max' x/y value"
    )

    def __init__(self):
        super().__init__(self.MESSAGE)


class TopologyError(GeoRelateException):
    """
    Base exception for internal topology invariant failures.

    These are not caller errors: they indicate that noding left the graph
    in a state the labelling cannot reconcile.
    """
    pass


class TopologyInconsistencyError(TopologyError):
    """
    Exception raised when side labels around a node disagree.

    Raised when the location propagated around a node does not match the
    known side label of the next edge-end for the same geometry.
    """

    def __init__(self, details: str, coordinate: Optional[Any] = None):
        """
        Initialize TopologyInconsistencyError.

        Args:
            details: Description of the conflict
            coordinate: Node coordinate where it was found (optional)
        """
        self.details = details
        self.coordinate = coordinate

        message = f"Topology inconsistency: {details}"
        if coordinate is not None:
            message += f" at ({coordinate.x}, {coordinate.y})"

        super().__init__(message)


class PartialLabelError(TopologyError):
    """Exception raised when a graph component reaches the matrix with an incomplete label"""

    def __init__(self, component: str, coordinate: Optional[Any] = None):
        self.component = component
        self.coordinate = coordinate

        message = f"Found partial label on {component}"
        if coordinate is not None:
            message += f" at ({coordinate.x}, {coordinate.y})"

        super().__init__(message)


class InvalidPatternError(GeoRelateException):
    """Exception raised when a DE-9IM pattern string is malformed"""

    def __init__(self, pattern: Any, details: str):
        """
        Initialize InvalidPatternError.

        Args:
            pattern: The rejected pattern
            details: Why it was rejected
        """
        self.pattern = pattern
        self.details = details

        super().__init__(f"Invalid DE-9IM pattern {pattern!r}: {details}")


class GeometryParseError(GeoRelateException):
    """Exception raised when a geometry payload cannot be converted"""

    def __init__(self, source_type: str, details: str):
        """
        Initialize GeometryParseError.

        Args:
            source_type: Kind of payload that failed (e.g. 'GeoJSON', 'shapely')
            details: Details about the failure
        """
        self.source_type = source_type
        self.details = details

        super().__init__(f"Failed to parse {source_type} geometry: {details}")
