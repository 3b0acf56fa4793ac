from enum import StrEnum


class GeoJSONType(StrEnum):
    POINT = 'Point'
    MULTI_POINT = 'MultiPoint'
    LINE_STRING = 'LineString'
    MULTI_LINE_STRING = 'MultiLineString'
    POLYGON = 'Polygon'
    MULTI_POLYGON = 'MultiPolygon'
    GEOMETRY_COLLECTION = 'GeometryCollection'
    FEATURE = 'Feature'
    FEATURE_COLLECTION = 'FeatureCollection'


def type_name(kind: GeoJSONType | str) -> str:
    """Returns the tag string written in the "type" member for `kind`.

    Raises ValueError when `kind` is not one of the nine GeoJSON types.
    """
    try:
        return GeoJSONType(kind).value
    except ValueError:
        raise ValueError(f'Invalid GeoJSON type given: {kind!r}') from None
