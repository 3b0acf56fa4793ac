"""GeoJSON geometry, Feature and FeatureCollection objects (RFC 7946).

The builders return plain dict/list documents that `json.dumps` can write
as-is. Coordinates are pulled through callbacks, see
`geojson_assembler.core.coordinates` for the callback shapes.
"""

import copy
import logging
from collections.abc import Callable, Sequence
from geojson_assembler.core import coordinates
from geojson_assembler.core.accessors import check_arity, read_count
from geojson_assembler.core.exceptions import InvalidGeometry, InvocationContractViolation
from geojson_assembler.core.settings import settings
from geojson_assembler.enums.geojson_type import GeoJSONType, type_name
from geojson_assembler.schemas.geojson import validate_document
from typing import Any


logger = logging.getLogger(__name__)

Document = dict[str, Any]


def _checked(document: Document) -> Document:
    if settings.validate_output:
        try:
            validate_document(document)
        except ValueError as error:
            raise InvalidGeometry(f'Assembled {document["type"]} is not valid GeoJSON: {error}') from error
    return document


def _coordinates_object(kind: GeoJSONType, coords: list) -> Document:
    return _checked({'type': type_name(kind), 'coordinates': coords})


def point(lon: float, lat: float, alt: float | None = None) -> Document:
    return _coordinates_object(GeoJSONType.POINT, coordinates.point_coordinates(lon, lat, alt))


def multi_point(num_points: int, get_point: Callable[[int], Sequence[float]]) -> Document:
    return _coordinates_object(
        GeoJSONType.MULTI_POINT,
        coordinates.multi_point_coordinates(num_points, get_point),
    )


def line_string(num_points: int, get_point: Callable[[int], Sequence[float]]) -> Document:
    return _coordinates_object(
        GeoJSONType.LINE_STRING,
        coordinates.line_string_coordinates(num_points, get_point),
    )


def multi_line_string(
    num_lines: int,
    get_line_length: Callable[[int], int],
    get_point: Callable[[int, int], Sequence[float]],
) -> Document:
    return _coordinates_object(
        GeoJSONType.MULTI_LINE_STRING,
        coordinates.multi_line_string_coordinates(num_lines, get_line_length, get_point),
    )


def polygon(
    num_rings: int,
    get_ring_length: Callable[[int], int],
    get_point: Callable[[int, int], Sequence[float]],
) -> Document:
    return _coordinates_object(
        GeoJSONType.POLYGON,
        coordinates.polygon_coordinates(num_rings, get_ring_length, get_point),
    )


def multi_polygon(
    num_polygons: int,
    get_num_rings: Callable[[int], int],
    get_ring_length: Callable[[int, int], int],
    get_point: Callable[[int, int, int], Sequence[float]],
) -> Document:
    return _coordinates_object(
        GeoJSONType.MULTI_POLYGON,
        coordinates.multi_polygon_coordinates(num_polygons, get_num_rings, get_ring_length, get_point),
    )


def geometry_collection(num_geometries: int, get_geometry: Callable[[int], Document]) -> Document:
    """Returns a GeometryCollection object (section 3.1.8).

    The geometries returned by `get_geometry(i)` are copied, not inspected.
    """
    count = read_count(num_geometries, 'num_geometries')
    check_arity(get_geometry, 1, 'get_geometry')
    geometries = [copy.deepcopy(get_geometry(i)) for i in range(count)]
    return _checked({'type': type_name(GeoJSONType.GEOMETRY_COLLECTION), 'geometries': geometries})


def feature(geometry: Document | None, properties: Any, feature_id: str | int | float | None = None) -> Document:
    """Returns a Feature object (section 3.2).

    The "id" member is only written when `feature_id` is given.
    """
    document = {
        'type': type_name(GeoJSONType.FEATURE),
        'geometry': copy.deepcopy(geometry),
        'properties': copy.deepcopy(properties),
    }
    if feature_id is not None:
        if isinstance(feature_id, bool) or not isinstance(feature_id, (str, int, float)):
            raise InvocationContractViolation(
                f'Feature ids must be a string or a number, got {type(feature_id).__name__}'
            )
        document['id'] = feature_id
    return _checked(document)


def feature_collection(num_features: int, get_feature: Callable[[int], Document]) -> Document:
    """Returns a FeatureCollection object (section 3.3)."""
    count = read_count(num_features, 'num_features')
    check_arity(get_feature, 1, 'get_feature')
    features = [copy.deepcopy(get_feature(i)) for i in range(count)]
    logger.debug('Assembled feature collection with %d feature(s)', count)
    return _checked({'type': type_name(GeoJSONType.FEATURE_COLLECTION), 'features': features})
