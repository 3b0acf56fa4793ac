"""Pull-based GeoJSON (RFC 7946) document assembly.

Callers describe their geometry through index accessors; the builders pull
positions on demand, fix polygon ring winding and return plain documents.
"""

from geojson_assembler.core.coordinates import (
    linear_ring_coordinates,
    line_string_coordinates,
    multi_line_string_coordinates,
    multi_point_coordinates,
    multi_polygon_coordinates,
    point_coordinates,
    polygon_coordinates,
    position,
)
from geojson_assembler.core.exceptions import (
    GeoJSONAssemblerError,
    InvalidGeometry,
    InvocationContractViolation,
)
from geojson_assembler.core.orientation import edge_sum, is_clockwise, is_counterclockwise
from geojson_assembler.enums.geojson_type import GeoJSONType, type_name
from geojson_assembler.geometry import (
    feature,
    feature_collection,
    geometry_collection,
    line_string,
    multi_line_string,
    multi_point,
    multi_polygon,
    point,
    polygon,
)

__all__ = [
    "GeoJSONAssemblerError",
    "GeoJSONType",
    "InvalidGeometry",
    "InvocationContractViolation",
    "edge_sum",
    "feature",
    "feature_collection",
    "geometry_collection",
    "is_clockwise",
    "is_counterclockwise",
    "line_string",
    "line_string_coordinates",
    "linear_ring_coordinates",
    "multi_line_string",
    "multi_line_string_coordinates",
    "multi_point",
    "multi_point_coordinates",
    "multi_polygon",
    "multi_polygon_coordinates",
    "point",
    "point_coordinates",
    "polygon",
    "polygon_coordinates",
    "position",
    "type_name",
]
