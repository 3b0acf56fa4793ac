"""Coordinate payloads of the GeoJSON geometry objects (RFC 7946, section 3.1).

Every builder pulls positions from caller callbacks, in ascending index
order and exactly once per index, and returns plain nested lists that go
into the "coordinates" member of the matching geometry object.

Point accessors return `(lon, lat)` or `(lon, lat, alt)` and take the
indices of the position as positional arguments, e.g. `accessor(i)` for a
LineString or `accessor(polygon, ring, point)` for a MultiPolygon.
"""

import logging
from collections.abc import Callable, Sequence
from functools import partial
from geojson_assembler.core.accessors import CountReader, PositionReader, read_count
from geojson_assembler.core.exceptions import InvalidGeometry
from geojson_assembler.core.orientation import is_counterclockwise


logger = logging.getLogger(__name__)

Position = list[float]
Pull = Callable[..., Sequence[float]]


def position(lon: float, lat: float, alt: float | None = None) -> Position:
    """Returns a position array (section 3.1.1).

    lon/lat are decimal degrees, alt is the WGS84 ellipsoidal height in meters.
    """
    if alt is None:
        return [float(lon), float(lat)]
    return [float(lon), float(lat), float(alt)]


def point_coordinates(lon: float, lat: float, alt: float | None = None) -> Position:
    return position(lon, lat, alt)


def _pull_positions(count: int, pull: Pull) -> list[Position]:
    return [position(*pull(i)) for i in range(count)]


def _line_string(count: int, pull: Pull) -> list[Position]:
    if count < 2:
        raise InvalidGeometry(f'LineString objects must have at least 2 points, got {count}')
    return _pull_positions(count, pull)


def _linear_ring(count: int, ccw: bool, pull: Pull) -> list[Position]:
    if count < 3:
        raise InvalidGeometry(f'Linear rings must have at least 3 points, got {count}')

    coords = _pull_positions(count, pull)

    # Orientation is measured on the raw pull, before reversal and closure
    if is_counterclockwise(coords) != ccw:
        logger.debug('Reversing %d point ring to %s order', count, 'CCW' if ccw else 'CW')
        coords.reverse()

    coords.append(list(coords[0]))
    return coords


def _polygon(ring_count: int, ring_length: Callable[[int], int], pull: Pull) -> list[list[Position]]:
    if ring_count < 1:
        raise InvalidGeometry('Polygon objects must have at least 1 ring')

    rings = []
    for i in range(ring_count):
        try:
            # Ring 0 is the exterior (CCW), every other ring is a hole (CW)
            rings.append(_linear_ring(ring_length(i), i == 0, partial(pull, i)))
        except InvalidGeometry as error:
            error.at(i)
            raise
    return rings


def multi_point_coordinates(num_points: int, get_point: Callable[[int], Sequence[float]]) -> list[Position]:
    """Returns the coordinates of a MultiPoint object (section 3.1.3).

    `get_point(i)` returns the i-th position, an empty MultiPoint is allowed.
    """
    count = read_count(num_points, 'num_points')
    reader = PositionReader(get_point, 1, 'get_point')
    return _pull_positions(count, reader.read)


def line_string_coordinates(num_points: int, get_point: Callable[[int], Sequence[float]]) -> list[Position]:
    """Returns the coordinates of a LineString object (section 3.1.4).

    Raises InvalidGeometry for fewer than 2 points, before `get_point` is called.
    """
    count = read_count(num_points, 'num_points')
    reader = PositionReader(get_point, 1, 'get_point')
    return _line_string(count, reader.read)


def multi_line_string_coordinates(
    num_lines: int,
    get_line_length: Callable[[int], int],
    get_point: Callable[[int, int], Sequence[float]],
) -> list[list[Position]]:
    """Returns the coordinates of a MultiLineString object (section 3.1.5).

    `get_line_length(line)` is queried right before the points of that line
    are pulled with `get_point(line, point)`. A line with fewer than 2 points
    raises InvalidGeometry whose `path` is `(line,)`.
    """
    count = read_count(num_lines, 'num_lines')
    lengths = CountReader(get_line_length, 1, 'get_line_length')
    reader = PositionReader(get_point, 2, 'get_point')

    lines = []
    for i in range(count):
        try:
            lines.append(_line_string(lengths.read(i), partial(reader.read, i)))
        except InvalidGeometry as error:
            error.at(i)
            raise
    return lines


def linear_ring_coordinates(
    num_points: int,
    ccw: bool,
    get_point: Callable[[int], Sequence[float]],
) -> list[Position]:
    """Returns a closed linear ring wound CCW (`ccw=True`) or CW.

    The `num_points` positions are pulled as-is, reversed when their winding
    disagrees with `ccw`, then the first position is repeated at the end.
    """
    count = read_count(num_points, 'num_points')
    reader = PositionReader(get_point, 1, 'get_point')
    return _linear_ring(count, ccw, reader.read)


def polygon_coordinates(
    num_rings: int,
    get_ring_length: Callable[[int], int],
    get_point: Callable[[int, int], Sequence[float]],
) -> list[list[Position]]:
    """Returns the coordinates of a Polygon object (section 3.1.6).

    Ring 0 is the exterior ring and comes out counterclockwise, the other
    rings are holes and come out clockwise. Every ring is closed.
    """
    count = read_count(num_rings, 'num_rings')
    lengths = CountReader(get_ring_length, 1, 'get_ring_length')
    reader = PositionReader(get_point, 2, 'get_point')
    logger.debug('Assembling polygon with %d ring(s)', count)
    return _polygon(count, lengths.read, reader.read)


def multi_polygon_coordinates(
    num_polygons: int,
    get_num_rings: Callable[[int], int],
    get_ring_length: Callable[[int, int], int],
    get_point: Callable[[int, int, int], Sequence[float]],
) -> list[list[list[Position]]]:
    """Returns the coordinates of a MultiPolygon object (section 3.1.7).

    Each polygon follows the Polygon rules on its own: its ring 0 is its
    exterior. A polygon without rings raises InvalidGeometry.
    """
    count = read_count(num_polygons, 'num_polygons')
    ring_counts = CountReader(get_num_rings, 1, 'get_num_rings')
    lengths = CountReader(get_ring_length, 2, 'get_ring_length')
    reader = PositionReader(get_point, 3, 'get_point')
    logger.debug('Assembling multipolygon with %d polygon(s)', count)

    polygons = []
    for i in range(count):
        try:
            polygons.append(_polygon(ring_counts.read(i), partial(lengths.read, i), partial(reader.read, i)))
        except InvalidGeometry as error:
            error.at(i)
            raise
    return polygons
