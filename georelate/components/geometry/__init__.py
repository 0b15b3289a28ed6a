"""
Geometry module for the relate engine.

This module provides the geometry value types the engine consumes, along
with closed-form helpers, shapely conversion and payload parsing.
"""

from georelate.components.geometry.coordinate import Coordinate, CoordinateLike
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
from georelate.components.geometry.geometry_ops import GeometryOps
from georelate.components.geometry.geometry_adapter import GeometryAdapter
from georelate.components.geometry.geometry_parser import (
    IGeometryDataParser,
    GeoJsonGeometryParser,
    VertexListPolygonParser,
    GeometryParserFactory,
)

__all__ = [
    'Coordinate',
    'CoordinateLike',
    'Geometry',
    'Point',
    'Line',
    'LineString',
    'Polygon',
    'Rect',
    'GeometryCollection',
    'MultiPoint',
    'MultiLineString',
    'MultiPolygon',
    'GeometryOps',
    'GeometryAdapter',
    'IGeometryDataParser',
    'GeoJsonGeometryParser',
    'VertexListPolygonParser',
    'GeometryParserFactory',
]
