from typing import Iterable, Iterator, List

from georelate.core import Dimension, GeometryType
from georelate.components.geometry.coordinate import Coordinate
from georelate.components.geometry.geometry_base import Geometry
from georelate.components.geometry.point import Point
from georelate.components.geometry.line_string import LineString
from georelate.components.geometry.polygon import Polygon


class GeometryCollection(Geometry):
    """
    A heterogeneous collection of geometries

    Dimension is the maximum over the members.
    """

    def __init__(self, geoms: Iterable[Geometry] = ()):
        self._geoms = list(geoms)

    @property
    def geoms(self) -> List[Geometry]:
        return self._geoms

    @property
    def geom_type(self) -> GeometryType:
        return GeometryType.GEOMETRY_COLLECTION

    @property
    def dimension(self) -> Dimension:
        return max((g.dimension for g in self._geoms), default=Dimension.EMPTY)

    @property
    def is_empty(self) -> bool:
        return all(g.is_empty for g in self._geoms)

    def coords(self) -> Iterator[Coordinate]:
        for geom in self._geoms:
            yield from geom.coords()

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self._geoms)

    def __len__(self) -> int:
        return len(self._geoms)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._geoms == other._geoms

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(self._geoms)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._geoms!r})"


class MultiPoint(GeometryCollection):
    """A collection of points"""

    def __init__(self, points: Iterable = ()):
        super().__init__(p if isinstance(p, Point) else Point(float(p[0]), float(p[1])) for p in points)

    @property
    def geom_type(self) -> GeometryType:
        return GeometryType.MULTI_POINT


class MultiLineString(GeometryCollection):
    """A collection of line strings"""

    def __init__(self, lines: Iterable = ()):
        super().__init__(l if isinstance(l, LineString) else LineString(l) for l in lines)

    @property
    def geom_type(self) -> GeometryType:
        return GeometryType.MULTI_LINE_STRING

    @property
    def is_closed(self) -> bool:
        """True if every member is closed"""
        return not self.is_empty and all(l.is_closed for l in self._geoms)


class MultiPolygon(GeometryCollection):
    """A collection of polygons"""

    def __init__(self, polygons: Iterable[Polygon] = ()):
        super().__init__(polygons)

    @property
    def geom_type(self) -> GeometryType:
        return GeometryType.MULTI_POLYGON
