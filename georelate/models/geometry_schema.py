"""GeoJSON-like geometry payload models using Pydantic for type safety and validation"""
from typing import Annotated, List, Literal, Union
from pydantic import BaseModel, Field, TypeAdapter

Position2D = Annotated[List[float], Field(min_length=2, description="[x, y] (extra values ignored)")]


class PointSchema(BaseModel):
    """Point payload: {"type": "Point", "coordinates": [x, y]}"""
    type: Literal["Point"]
    coordinates: Position2D


class LineStringSchema(BaseModel):
    """LineString payload: {"type": "LineString", "coordinates": [[x, y], ...]}"""
    type: Literal["LineString"]
    coordinates: List[Position2D]


class PolygonSchema(BaseModel):
    """
    Polygon payload: shell ring followed by hole rings

    Rings may be open; the parser closes them.
    """
    type: Literal["Polygon"]
    coordinates: List[List[Position2D]]

    class Config:
        json_schema_extra = {
            "example": {
                "type": "Polygon",
                "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]]
            }
        }


class MultiPointSchema(BaseModel):
    type: Literal["MultiPoint"]
    coordinates: List[Position2D]


class MultiLineStringSchema(BaseModel):
    type: Literal["MultiLineString"]
    coordinates: List[List[Position2D]]


class MultiPolygonSchema(BaseModel):
    type: Literal["MultiPolygon"]
    coordinates: List[List[List[Position2D]]]


class GeometryCollectionSchema(BaseModel):
    """GeometryCollection payload: {"type": "GeometryCollection", "geometries": [...]}"""
    type: Literal["GeometryCollection"]
    geometries: List["GeometrySchema"] = Field(default_factory=list)


GeometrySchema = Annotated[
    Union[
        PointSchema,
        LineStringSchema,
        PolygonSchema,
        MultiPointSchema,
        MultiLineStringSchema,
        MultiPolygonSchema,
        GeometryCollectionSchema,
    ],
    Field(discriminator="type"),
]

GeometryCollectionSchema.model_rebuild()

# Validates any of the payloads above, picking the model from "type"
GEOMETRY_SCHEMA_ADAPTER = TypeAdapter(GeometrySchema)
