from geojson_assembler.enums.geojson_type import GeoJSONType
from pydantic import BaseModel, Field, field_validator
from typing import Any, Literal

COORDINATES_TYPE = tuple[float, float] | tuple[float, float, float]


def _check_ring(ring: list[COORDINATES_TYPE]) -> list[COORDINATES_TYPE]:
    if len(ring) < 4:
        raise ValueError(f'a linear ring needs at least 4 positions, got {len(ring)}')
    if ring[0] != ring[-1]:
        raise ValueError('a linear ring must end on its first position')
    return ring

# ----- Geometry Types -----
class Point(BaseModel):
    type: Literal["Point"]
    coordinates: COORDINATES_TYPE

class MultiPoint(BaseModel):
    type: Literal["MultiPoint"]
    coordinates: list[COORDINATES_TYPE]

class LineString(BaseModel):
    type: Literal["LineString"]
    coordinates: list[COORDINATES_TYPE] = Field(min_length=2)

class MultiLineString(BaseModel):
    type: Literal["MultiLineString"]
    coordinates: list[list[COORDINATES_TYPE]]

    @field_validator('coordinates')
    @classmethod
    def check_lines(cls, lines):
        for line in lines:
            if len(line) < 2:
                raise ValueError(f'a line needs at least 2 positions, got {len(line)}')
        return lines

class Polygon(BaseModel):
    type: Literal["Polygon"]
    # Each linear ring: at least 4 positions, first == last per RFC 7946
    coordinates: list[list[COORDINATES_TYPE]] = Field(min_length=1)

    @field_validator('coordinates')
    @classmethod
    def check_rings(cls, rings):
        return [_check_ring(ring) for ring in rings]

class MultiPolygon(BaseModel):
    type: Literal["MultiPolygon"]
    coordinates: list[list[list[COORDINATES_TYPE]]]

    @field_validator('coordinates')
    @classmethod
    def check_polygons(cls, polygons):
        for rings in polygons:
            if not rings:
                raise ValueError('a polygon needs at least 1 ring')
            for ring in rings:
                _check_ring(ring)
        return polygons

class GeometryCollection(BaseModel):
    type: Literal["GeometryCollection"]
    geometries: list["Geometry"]

Geometry = Point | MultiPoint | LineString | MultiLineString | Polygon | MultiPolygon | GeometryCollection

GeometryCollection.model_rebuild()

# ----- Core GeoJSON Objects -----
class Feature(BaseModel):
    type: Literal["Feature"]
    geometry: Geometry | None = None
    properties: dict[str, Any] | None = Field(default=None)
    id: str | int | float | None = None

class FeatureCollection(BaseModel):
    type: Literal["FeatureCollection"]
    features: list[Feature]


MODELS: dict[GeoJSONType, type[BaseModel]] = {
    GeoJSONType.POINT: Point,
    GeoJSONType.MULTI_POINT: MultiPoint,
    GeoJSONType.LINE_STRING: LineString,
    GeoJSONType.MULTI_LINE_STRING: MultiLineString,
    GeoJSONType.POLYGON: Polygon,
    GeoJSONType.MULTI_POLYGON: MultiPolygon,
    GeoJSONType.GEOMETRY_COLLECTION: GeometryCollection,
    GeoJSONType.FEATURE: Feature,
    GeoJSONType.FEATURE_COLLECTION: FeatureCollection,
}


def validate_document(document: dict[str, Any]) -> BaseModel:
    """Parses an assembled document into its model, raising on any mismatch."""
    if not isinstance(document, dict):
        raise ValueError(f'Expected a GeoJSON object, got {type(document).__name__}')
    model = MODELS.get(document.get('type'))
    if model is None:
        raise ValueError(f'Unknown GeoJSON type: {document.get("type")!r}')
    return model.model_validate(document)
