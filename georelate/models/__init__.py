from georelate.models.geometry_schema import (
    PointSchema,
    LineStringSchema,
    PolygonSchema,
    MultiPointSchema,
    MultiLineStringSchema,
    MultiPolygonSchema,
    GeometryCollectionSchema,
    GeometrySchema,
    GEOMETRY_SCHEMA_ADAPTER,
)

__all__ = [
    "PointSchema",
    "LineStringSchema",
    "PolygonSchema",
    "MultiPointSchema",
    "MultiLineStringSchema",
    "MultiPolygonSchema",
    "GeometryCollectionSchema",
    "GeometrySchema",
    "GEOMETRY_SCHEMA_ADAPTER",
]
