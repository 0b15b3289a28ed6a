from typing import Iterable, Iterator, List, Optional, Sequence, Union

from georelate.core import Dimension, GeometryType
from georelate.components.geometry.coordinate import Coordinate, CoordinateLike
from georelate.components.geometry.geometry_base import Geometry
from georelate.components.geometry.line_string import LineString


RingLike = Union[LineString, Iterable[CoordinateLike]]


def _as_ring(ring: RingLike) -> LineString:
    if isinstance(ring, LineString):
        return ring
    return LineString(ring)


class Polygon(Geometry):
    """
    A polygon with one exterior ring and any number of interior rings (holes)

    Rings are stored as given. They must be closed; use from_vertices to
    build a polygon from an open vertex list.
    """

    def __init__(self, exterior: RingLike = (), interiors: Iterable[RingLike] = ()):
        """
        Initialize polygon

        Args:
            exterior: Shell ring as a LineString or a coordinate sequence
            interiors: Hole rings
        """
        self._exterior = _as_ring(exterior)
        self._interiors = [_as_ring(ring) for ring in interiors]

    @property
    def exterior(self) -> LineString:
        """Get the shell ring"""
        return self._exterior

    @property
    def interiors(self) -> List[LineString]:
        """Get the hole rings"""
        return self._interiors

    def rings(self) -> Iterator[LineString]:
        """Iterate over the shell followed by the holes"""
        yield self._exterior
        yield from self._interiors

    @property
    def geom_type(self) -> GeometryType:
        return GeometryType.POLYGON

    @property
    def dimension(self) -> Dimension:
        return Dimension.EMPTY if self.is_empty else Dimension.AREA

    @property
    def is_empty(self) -> bool:
        return self._exterior.is_empty

    def coords(self) -> Iterator[Coordinate]:
        for ring in self.rings():
            yield from ring.coords()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self._exterior == other._exterior and self._interiors == other._interiors

    def __hash__(self) -> int:
        return hash((self._exterior, tuple(self._interiors)))

    @staticmethod
    def close_ring(vertices: Sequence[CoordinateLike]) -> List[Coordinate]:
        """
        Close an open vertex list by repeating its first vertex

        Args:
            vertices: Ring vertices, closed or open

        Returns:
            Closed coordinate list (unchanged if already closed or empty)
        """
        coords = [Coordinate.from_value(v) for v in vertices]
        if coords and coords[0] != coords[-1]:
            coords.append(coords[0])
        return coords

    @classmethod
    def from_vertices(
        cls,
        vertices: Sequence[CoordinateLike],
        holes: Optional[Sequence[Sequence[CoordinateLike]]] = None
    ) -> 'Polygon':
        """
        Create polygon from open or closed vertex lists

        Args:
            vertices: Shell vertices like [(0, 0), (1, 0), (1, 1)]
            holes: Hole vertex lists (optional)

        Returns:
            Polygon instance with closed rings
        """
        return cls(
            cls.close_ring(vertices),
            [cls.close_ring(hole) for hole in holes or []]
        )
