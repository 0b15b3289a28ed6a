from typing import Iterator
from dataclasses import dataclass

from georelate.core import Dimension, GeometryType
from georelate.components.geometry.coordinate import Coordinate
from georelate.components.geometry.geometry_base import Geometry


@dataclass(frozen=True, repr=False)
class Point(Geometry):
    """Represents a single 2D point"""
    x: float
    y: float

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.x, self.y)

    @property
    def geom_type(self) -> GeometryType:
        return GeometryType.POINT

    @property
    def dimension(self) -> Dimension:
        return Dimension.POINT

    @property
    def is_empty(self) -> bool:
        return False

    def coords(self) -> Iterator[Coordinate]:
        yield self.coordinate

    @classmethod
    def from_coordinate(cls, coordinate: Coordinate) -> 'Point':
        return cls(coordinate.x, coordinate.y)
