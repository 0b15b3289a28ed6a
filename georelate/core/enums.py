from enum import Enum, IntEnum


class Location(IntEnum):
    """
    Location of a point relative to one geometry

    Values double as row/column indexes of the intersection matrix.
    NONE marks a location that is not (yet) known.
    """
    NONE = -1
    INTERIOR = 0
    BOUNDARY = 1
    EXTERIOR = 2

    @property
    def symbol(self) -> str:
        """Single character used in diagnostics (i, b, e or -)"""
        return _LOCATION_SYMBOLS[self]


_LOCATION_SYMBOLS = {
    Location.NONE: "-",
    Location.INTERIOR: "i",
    Location.BOUNDARY: "b",
    Location.EXTERIOR: "e",
}


class Position(IntEnum):
    """Position of a location relative to a directed edge"""
    ON = 0
    LEFT = 1
    RIGHT = 2

    def opposite(self) -> 'Position':
        """LEFT <-> RIGHT, ON stays ON"""
        if self == Position.LEFT:
            return Position.RIGHT
        if self == Position.RIGHT:
            return Position.LEFT
        return self


class Dimension(IntEnum):
    """
    Topological dimension values stored in an intersection matrix

    EMPTY (-1) is written as 'F' in DE-9IM strings.
    """
    EMPTY = -1
    POINT = 0
    LINE = 1
    AREA = 2

    @property
    def symbol(self) -> str:
        """DE-9IM symbol for this dimension"""
        if self == Dimension.EMPTY:
            return "F"
        return str(int(self))


class DimensionSymbol(str, Enum):
    """Symbols allowed in a DE-9IM pattern"""
    FALSE = "F"
    TRUE = "T"
    DONT_CARE = "*"
    P = "0"
    L = "1"
    A = "2"


class Quadrant(IntEnum):
    """
    Quadrant of a direction vector, counter-clockwise from the positive x axis

    Used as the coarse bucket of the pseudo-angle that orders edge-ends
    around a node.
    """
    NE = 0
    NW = 1
    SW = 2
    SE = 3

    @classmethod
    def of(cls, dx: float, dy: float) -> 'Quadrant':
        """
        Quadrant of a non-zero direction vector

        Raises:
            ValueError: If the vector is (0, 0)
        """
        if dx == 0.0 and dy == 0.0:
            raise ValueError(f"Cannot compute the quadrant for point ({dx}, {dy})")
        if dx >= 0.0:
            return cls.NE if dy >= 0.0 else cls.SE
        return cls.NW if dy >= 0.0 else cls.SW


class Orientation(IntEnum):
    """Orientation of a point relative to a directed segment"""
    CLOCKWISE = -1
    COLLINEAR = 0
    COUNTER_CLOCKWISE = 1


class GeometryType(str, Enum):
    """Geometry type enumeration, values match shapely's geom_type"""
    POINT = "Point"
    LINE = "Line"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"
    RECT = "Rect"
    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"


class BoundaryNodeRule(str, Enum):
    """
    Rule deciding whether a point shared by line endpoints is on the boundary

    MOD2 is the OGC SFS rule: a point is on the boundary when it is the
    endpoint of an odd number of line components.
    """
    MOD2 = "mod2"
    ENDPOINT = "endpoint"
    MULTIVALENT_ENDPOINT = "multivalent_endpoint"
    MONOVALENT_ENDPOINT = "monovalent_endpoint"

    def is_in_boundary(self, boundary_count: int) -> bool:
        """
        Check whether a point with the given endpoint count is a boundary point

        Args:
            boundary_count: Number of line endpoints meeting at the point

        Returns:
            True if the point lies on the boundary under this rule
        """
        if self == BoundaryNodeRule.MOD2:
            return boundary_count % 2 == 1
        if self == BoundaryNodeRule.ENDPOINT:
            return boundary_count > 0
        if self == BoundaryNodeRule.MULTIVALENT_ENDPOINT:
            return boundary_count > 1
        return boundary_count == 1

    def determine_boundary(self, boundary_count: int) -> Location:
        """BOUNDARY if the count is in the boundary, INTERIOR otherwise"""
        return Location.BOUNDARY if self.is_in_boundary(boundary_count) else Location.INTERIOR


class ParameterName(Enum):
    """Keys of GeoJSON-like geometry payloads"""
    TYPE = "type"
    COORDINATES = "coordinates"
    GEOMETRIES = "geometries"
    X = "x"
    Y = "y"
