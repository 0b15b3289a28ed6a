from typing import Iterable, Iterator, List

from georelate.core import Dimension, GeometryType
from georelate.components.geometry.coordinate import Coordinate, CoordinateLike
from georelate.components.geometry.geometry_base import Geometry


class LineString(Geometry):
    """
    An ordered sequence of coordinates joined by straight segments

    Also used for polygon rings, which must be closed (first coordinate
    equal to the last).
    """

    def __init__(self, coordinates: Iterable[CoordinateLike] = ()):
        """
        Initialize line string

        Args:
            coordinates: Sequence of Coordinate objects or (x, y) pairs
        """
        self._coordinates = [Coordinate.from_value(c) for c in coordinates]

    @property
    def coordinates(self) -> List[Coordinate]:
        """Get the coordinate list"""
        return self._coordinates

    @property
    def geom_type(self) -> GeometryType:
        return GeometryType.LINE_STRING

    @property
    def dimension(self) -> Dimension:
        return Dimension.EMPTY if self.is_empty else Dimension.LINE

    @property
    def is_empty(self) -> bool:
        return len(self._coordinates) == 0

    @property
    def is_closed(self) -> bool:
        """True if the line ends where it starts"""
        return not self.is_empty and self._coordinates[0] == self._coordinates[-1]

    def coords(self) -> Iterator[Coordinate]:
        return iter(self._coordinates)

    def segments(self) -> Iterator['Line']:
        """Iterate over the segments of the line"""
        for start, end in zip(self._coordinates, self._coordinates[1:]):
            yield Line(start, end)

    def __len__(self) -> int:
        return len(self._coordinates)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LineString):
            return NotImplemented
        return self._coordinates == other._coordinates

    def __hash__(self) -> int:
        return hash(tuple(self._coordinates))


class Line(Geometry):
    """A single line segment between two coordinates"""

    def __init__(self, start: CoordinateLike, end: CoordinateLike):
        self.start = Coordinate.from_value(start)
        self.end = Coordinate.from_value(end)

    @property
    def dx(self) -> float:
        return self.end.x - self.start.x

    @property
    def dy(self) -> float:
        return self.end.y - self.start.y

    @property
    def geom_type(self) -> GeometryType:
        return GeometryType.LINE

    @property
    def dimension(self) -> Dimension:
        return Dimension.LINE

    @property
    def is_empty(self) -> bool:
        return False

    def coords(self) -> Iterator[Coordinate]:
        yield self.start
        yield self.end

    def to_line_string(self) -> LineString:
        return LineString([self.start, self.end])

    def __eq__(self, other) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self.start == other.start and self.end == other.end

    def __hash__(self) -> int:
        return hash((self.start, self.end))
