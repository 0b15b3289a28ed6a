from typing import Any, Callable, Dict
import logging

from shapely.geometry import (
    Point as ShapelyPoint,
    LineString as ShapelyLine,
    Polygon as ShapelyPolygon,
    MultiPoint as ShapelyMultiPoint,
    MultiLineString as ShapelyMultiLine,
    MultiPolygon as ShapelyMultiPolygon,
    GeometryCollection as ShapelyCollection,
    box as ShapelyBox,
)

from georelate.core import GeometryType, GeometryParseError
from georelate.components.geometry.geometry_base import Geometry
from georelate.components.geometry.point import Point
from georelate.components.geometry.line_string import Line, LineString
from georelate.components.geometry.polygon import Polygon
from georelate.components.geometry.rect import Rect
from georelate.components.geometry.multi_geometries import (
    GeometryCollection,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
)

logger = logging.getLogger(__name__)

_LINEAR_RING = "LinearRing"


class GeometryAdapter:
    """
    Adapter between shapely geometries and georelate geometries (Adapter Pattern)

    Only coordinates are carried over; z values are dropped.
    """

    @staticmethod
    def _xy(coords) -> list:
        return [(float(c[0]), float(c[1])) for c in coords]

    @staticmethod
    def _from_shapely_point(geometry: Any) -> Geometry:
        if geometry.is_empty:
            return MultiPoint([])
        return Point(float(geometry.x), float(geometry.y))

    @staticmethod
    def _from_shapely_line(geometry: Any) -> Geometry:
        return LineString(GeometryAdapter._xy(geometry.coords))

    @staticmethod
    def _from_shapely_polygon(geometry: Any) -> Geometry:
        if geometry.is_empty:
            return Polygon()
        return Polygon(
            GeometryAdapter._xy(geometry.exterior.coords),
            [GeometryAdapter._xy(ring.coords) for ring in geometry.interiors]
        )

    @staticmethod
    def _from_shapely_multi_point(geometry: Any) -> Geometry:
        return MultiPoint([GeometryAdapter._from_shapely_point(g) for g in geometry.geoms])

    @staticmethod
    def _from_shapely_multi_line(geometry: Any) -> Geometry:
        return MultiLineString([GeometryAdapter._from_shapely_line(g) for g in geometry.geoms])

    @staticmethod
    def _from_shapely_multi_polygon(geometry: Any) -> Geometry:
        return MultiPolygon([GeometryAdapter._from_shapely_polygon(g) for g in geometry.geoms])

    @staticmethod
    def _from_shapely_collection(geometry: Any) -> Geometry:
        return GeometryCollection([GeometryAdapter.from_shapely(g) for g in geometry.geoms])

    # Strategy map: GeometryType -> conversion function (Strategy Pattern)
    SHAPELY_HANDLERS: Dict[GeometryType, Callable] = {
        GeometryType.POINT: _from_shapely_point.__func__,  # type: ignore
        GeometryType.LINE_STRING: _from_shapely_line.__func__,  # type: ignore
        GeometryType.POLYGON: _from_shapely_polygon.__func__,  # type: ignore
        GeometryType.MULTI_POINT: _from_shapely_multi_point.__func__,  # type: ignore
        GeometryType.MULTI_LINE_STRING: _from_shapely_multi_line.__func__,  # type: ignore
        GeometryType.MULTI_POLYGON: _from_shapely_multi_polygon.__func__,  # type: ignore
        GeometryType.GEOMETRY_COLLECTION: _from_shapely_collection.__func__,  # type: ignore
    }

    @classmethod
    def is_shapely(cls, geometry: Any) -> bool:
        """True if the object looks like a shapely geometry"""
        return hasattr(geometry, "geom_type") and hasattr(geometry, "wkt")

    @classmethod
    def from_shapely(cls, geometry: Any) -> Geometry:
        """
        Convert a shapely geometry

        Args:
            geometry: Shapely geometry object

        Returns:
            Equivalent georelate geometry

        Raises:
            GeometryParseError: If the geometry type is not supported
        """
        geom_type_str = geometry.geom_type
        if geom_type_str == _LINEAR_RING:
            return cls._from_shapely_line(geometry)

        for geom_type, handler in cls.SHAPELY_HANDLERS.items():
            if geom_type_str == geom_type.value:
                return handler(geometry)

        logger.debug("[GEOMETRY ADAPTER]: No handler for shapely type %s", geom_type_str)
        raise GeometryParseError("shapely", f"unsupported geometry type '{geom_type_str}'")

    @classmethod
    def to_shapely(cls, geometry: Geometry) -> Any:
        """
        Convert a georelate geometry to shapely

        Args:
            geometry: georelate geometry

        Returns:
            Shapely geometry object
        """
        if isinstance(geometry, Point):
            return ShapelyPoint(geometry.x, geometry.y)
        if isinstance(geometry, Line):
            return ShapelyLine([geometry.start.to_tuple(), geometry.end.to_tuple()])
        if isinstance(geometry, LineString):
            return ShapelyLine([c.to_tuple() for c in geometry.coordinates])
        if isinstance(geometry, Rect):
            return ShapelyBox(geometry.min.x, geometry.min.y, geometry.max.x, geometry.max.y)
        if isinstance(geometry, Polygon):
            if geometry.is_empty:
                return ShapelyPolygon()
            return ShapelyPolygon(
                [c.to_tuple() for c in geometry.exterior.coordinates],
                [[c.to_tuple() for c in ring.coordinates] for ring in geometry.interiors]
            )
        if isinstance(geometry, MultiPoint):
            return ShapelyMultiPoint([(p.x, p.y) for p in geometry.geoms])
        if isinstance(geometry, MultiLineString):
            return ShapelyMultiLine([[c.to_tuple() for c in l.coordinates] for l in geometry.geoms])
        if isinstance(geometry, MultiPolygon):
            return ShapelyMultiPolygon([cls.to_shapely(p) for p in geometry.geoms])
        if isinstance(geometry, GeometryCollection):
            return ShapelyCollection([cls.to_shapely(g) for g in geometry.geoms])
        raise GeometryParseError("georelate", f"unsupported geometry type '{type(geometry).__name__}'")
