from typing import Iterator

from georelate.core import Dimension, GeometryType, InvalidRectBoundsError
from georelate.components.geometry.coordinate import Coordinate, CoordinateLike
from georelate.components.geometry.geometry_base import Geometry
from georelate.components.geometry.polygon import Polygon


class Rect(Geometry):
    """
    An axis-aligned rectangle defined by its min and max corners

    The constructor orders the corners so min <= max on both axes, which
    keeps width and height non-negative. The setters do not reorder: they
    raise InvalidRectBoundsError when the new corner breaks that ordering.
    """

    def __init__(self, c1: CoordinateLike, c2: CoordinateLike):
        """
        Initialize rectangle from two opposite corners

        Args:
            c1: Any corner
            c2: The opposite corner
        """
        c1 = Coordinate.from_value(c1)
        c2 = Coordinate.from_value(c2)
        self._min = Coordinate(min(c1.x, c2.x), min(c1.y, c2.y))
        self._max = Coordinate(max(c1.x, c2.x), max(c1.y, c2.y))

    @property
    def min(self) -> Coordinate:
        """Bottom-left corner"""
        return self._min

    @min.setter
    def min(self, value: CoordinateLike) -> None:
        self.set_min(value)

    @property
    def max(self) -> Coordinate:
        """Top-right corner"""
        return self._max

    @max.setter
    def max(self, value: CoordinateLike) -> None:
        self.set_max(value)

    def set_min(self, value: CoordinateLike) -> None:
        """
        Set the min corner

        Raises:
            InvalidRectBoundsError: If the new min exceeds max on either axis
        """
        candidate = Coordinate.from_value(value)
        self._assert_valid_bounds(candidate, self._max)
        self._min = candidate

    def set_max(self, value: CoordinateLike) -> None:
        """
        Set the max corner

        Raises:
            InvalidRectBoundsError: If the new max is below min on either axis
        """
        candidate = Coordinate.from_value(value)
        self._assert_valid_bounds(self._min, candidate)
        self._max = candidate

    @staticmethod
    def _assert_valid_bounds(min_corner: Coordinate, max_corner: Coordinate) -> None:
        if not (min_corner.x <= max_corner.x and min_corner.y <= max_corner.y):
            raise InvalidRectBoundsError()

    @property
    def width(self) -> float:
        return self._max.x - self._min.x

    @property
    def height(self) -> float:
        return self._max.y - self._min.y

    @property
    def center(self) -> Coordinate:
        return Coordinate((self._max.x + self._min.x) / 2, (self._max.y + self._min.y) / 2)

    def intersects(self, other: 'Rect') -> bool:
        """True if the two rectangles share at least one point"""
        return not (
            other._min.x > self._max.x or other._max.x < self._min.x
            or other._min.y > self._max.y or other._max.y < self._min.y
        )

    def to_polygon(self) -> Polygon:
        """
        Create a Polygon from the Rect

        The ring runs min -> (min.x, max.y) -> max -> (max.x, min.y) -> min.
        """
        return Polygon([
            (self._min.x, self._min.y),
            (self._min.x, self._max.y),
            (self._max.x, self._max.y),
            (self._max.x, self._min.y),
            (self._min.x, self._min.y),
        ])

    @property
    def geom_type(self) -> GeometryType:
        return GeometryType.RECT

    @property
    def dimension(self) -> Dimension:
        return Dimension.AREA

    @property
    def is_empty(self) -> bool:
        return False

    def coords(self) -> Iterator[Coordinate]:
        return self.to_polygon().coords()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return self._min == other._min and self._max == other._max

    def __repr__(self) -> str:
        return f"Rect(min={self._min!r}, max={self._max!r})"
