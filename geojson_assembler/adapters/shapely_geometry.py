import logging
from geojson_assembler import geometry
from geojson_assembler.core.exceptions import InvalidGeometry, InvocationContractViolation
from geojson_assembler.utils import open_ring_length
from shapely.geometry.base import BaseGeometry
from typing import Any


logger = logging.getLogger(__name__)


def _rings(polygon) -> list[list[tuple[float, ...]]]:
    return [list(polygon.exterior.coords)] + [list(ring.coords) for ring in polygon.interiors]


def encode_shape(geom: BaseGeometry) -> dict[str, Any]:
    """Encodes a shapely geometry by pulling its coordinates through the builders.

    Polygon rings are re-wound (exterior CCW, holes CW) whatever their
    orientation in the shapely object.
    """
    logger.debug('Encoding shapely %s', geom.geom_type)

    match geom.geom_type:
        case 'Point':
            if geom.is_empty:
                raise InvalidGeometry('Cannot encode an empty Point')
            return geometry.point(*geom.coords[0])
        case 'MultiPoint':
            points = [part.coords[0] for part in geom.geoms]
            return geometry.multi_point(len(points), lambda i: points[i])
        case 'LineString' | 'LinearRing':
            coords = list(geom.coords)
            return geometry.line_string(len(coords), lambda i: coords[i])
        case 'MultiLineString':
            lines = [list(line.coords) for line in geom.geoms]
            return geometry.multi_line_string(
                len(lines),
                lambda i: len(lines[i]),
                lambda i, j: lines[i][j],
            )
        case 'Polygon':
            rings = _rings(geom)
            return geometry.polygon(
                len(rings),
                lambda i: open_ring_length(rings[i]),
                lambda i, j: rings[i][j],
            )
        case 'MultiPolygon':
            polygons = [_rings(part) for part in geom.geoms]
            return geometry.multi_polygon(
                len(polygons),
                lambda i: len(polygons[i]),
                lambda i, r: open_ring_length(polygons[i][r]),
                lambda i, r, j: polygons[i][r][j],
            )
        case 'GeometryCollection':
            parts = list(geom.geoms)
            return geometry.geometry_collection(len(parts), lambda i: encode_shape(parts[i]))
        case _:
            raise InvocationContractViolation(f'Unsupported geometry type: {geom.geom_type}')


def encode_feature(geom: BaseGeometry | None, properties: Any, feature_id: str | int | float | None = None) -> dict[str, Any]:
    encoded = None if geom is None else encode_shape(geom)
    return geometry.feature(encoded, properties, feature_id)
