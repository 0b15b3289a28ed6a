from typing import List, Tuple, Any
from abc import ABC, abstractmethod

from pydantic import ValidationError

from georelate.core import ParameterName, GeometryParseError
from georelate.models import (
    GEOMETRY_SCHEMA_ADAPTER,
    PointSchema,
    LineStringSchema,
    PolygonSchema,
    MultiPointSchema,
    MultiLineStringSchema,
    MultiPolygonSchema,
    GeometryCollectionSchema,
)
from georelate.components.geometry.geometry_base import Geometry
from georelate.components.geometry.point import Point
from georelate.components.geometry.line_string import LineString
from georelate.components.geometry.polygon import Polygon
from georelate.components.geometry.multi_geometries import (
    GeometryCollection,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
)


class IGeometryDataParser(ABC):
    """
    Abstract base class for geometry data parsers (Strategy Pattern)

    Each parser handles a specific input format and converts it to a
    georelate geometry.
    """

    @abstractmethod
    def can_parse(self, data: Any) -> bool:
        """
        Check if this parser can handle the given data format

        Args:
            data: Input data to check

        Returns:
            True if parser can handle this format
        """
        pass

    @abstractmethod
    def parse(self, data: Any) -> Geometry:
        """
        Parse data into a geometry

        Args:
            data: Input data to parse

        Returns:
            Geometry instance

        Raises:
            GeometryParseError: If data format is invalid
        """
        pass


class GeoJsonGeometryParser(IGeometryDataParser):
    """
    Parser for GeoJSON-like dictionaries: {"type": "Polygon", "coordinates": [...]}

    The payload is validated with the pydantic schemas first, then converted.
    """

    def can_parse(self, data: Any) -> bool:
        """Check if data is a dict with a 'type' key"""
        return isinstance(data, dict) and ParameterName.TYPE.value in data

    def parse(self, data: dict) -> Geometry:
        try:
            schema = GEOMETRY_SCHEMA_ADAPTER.validate_python(data)
        except ValidationError as e:
            raise GeometryParseError("GeoJSON", f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}") from e
        return self._to_geometry(schema)

    @staticmethod
    def _xy(position: List[float]) -> Tuple[float, float]:
        return (float(position[0]), float(position[1]))

    def _polygon(self, rings: List[List[List[float]]]) -> Polygon:
        if not rings:
            return Polygon()
        shell = [self._xy(p) for p in rings[0]]
        holes = [[self._xy(p) for p in ring] for ring in rings[1:]]
        return Polygon.from_vertices(shell, holes)

    def _to_geometry(self, schema: Any) -> Geometry:
        if isinstance(schema, PointSchema):
            return Point(*self._xy(schema.coordinates))
        if isinstance(schema, LineStringSchema):
            return LineString([self._xy(p) for p in schema.coordinates])
        if isinstance(schema, PolygonSchema):
            return self._polygon(schema.coordinates)
        if isinstance(schema, MultiPointSchema):
            return MultiPoint([self._xy(p) for p in schema.coordinates])
        if isinstance(schema, MultiLineStringSchema):
            return MultiLineString([[self._xy(p) for p in line] for line in schema.coordinates])
        if isinstance(schema, MultiPolygonSchema):
            return MultiPolygon([self._polygon(rings) for rings in schema.coordinates])
        if isinstance(schema, GeometryCollectionSchema):
            return GeometryCollection([self._to_geometry(g) for g in schema.geometries])
        raise GeometryParseError("GeoJSON", f"unsupported schema {type(schema).__name__}")


class VertexListPolygonParser(IGeometryDataParser):
    """
    Parser for plain polygon vertex lists: [[0, 0], [3, 0], ...] or [{"x": 0, "y": 0}, ...]

    The ring is closed automatically.
    """

    def can_parse(self, data: Any) -> bool:
        """Check if data is a non-empty list of lists/tuples/dicts"""
        if not isinstance(data, list) or not data:
            return False
        return isinstance(data[0], (list, tuple, dict))

    def parse(self, data: List[Any]) -> Geometry:
        vertices = []
        for i, point in enumerate(data):
            if isinstance(point, dict):
                if ParameterName.X.value not in point or ParameterName.Y.value not in point:
                    raise GeometryParseError(
                        "vertex list",
                        f"point at index {i} missing 'x' or 'y' key. Got: {point}"
                    )
                raw = (point[ParameterName.X.value], point[ParameterName.Y.value])
            elif isinstance(point, (list, tuple)):
                if len(point) < 2:
                    raise GeometryParseError(
                        "vertex list",
                        f"point at index {i} must have at least 2 elements. Got: {point}"
                    )
                raw = (point[0], point[1])
            else:
                raise GeometryParseError(
                    "vertex list",
                    f"point at index {i} is not a list, tuple or dict. Got type: {type(point).__name__}"
                )

            try:
                vertices.append((float(raw[0]), float(raw[1])))
            except (TypeError, ValueError) as e:
                raise GeometryParseError(
                    "vertex list",
                    f"point at index {i} has invalid coordinate values. "
                    f"Error: {type(e).__name__}: {str(e)}. Point: {point}"
                ) from e

        return Polygon.from_vertices(vertices)


class GeometryParserFactory:
    """
    Factory for selecting the appropriate geometry parser (Factory Pattern)
    """

    # Available parsers in priority order
    _PARSERS = [
        GeoJsonGeometryParser(),
        VertexListPolygonParser(),
    ]

    @classmethod
    def get_parser(cls, data: Any) -> IGeometryDataParser:
        """
        Get appropriate parser for the given data format

        Raises:
            GeometryParseError: If no parser can handle the data format
        """
        for parser in cls._PARSERS:
            if parser.can_parse(data):
                return parser

        raise GeometryParseError(
            type(data).__name__,
            f"unsupported format, value: {data!r}. "
            f"Expected a GeoJSON-like dict or [[x, y], ...]"
        )

    @classmethod
    def parse(cls, data: Any) -> Geometry:
        """Parse data with the first parser that accepts it"""
        return cls.get_parser(data).parse(data)
