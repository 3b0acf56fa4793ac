"""Accessors over numpy position arrays of shape (N, 2) or (N, 3)."""

import numpy as np
from collections.abc import Callable, Sequence
from geojson_assembler import geometry
from geojson_assembler.core.exceptions import InvocationContractViolation
from geojson_assembler.utils import open_ring_length
from typing import Any


def as_position_array(array: Any, name: str = 'array') -> np.ndarray:
    positions = np.asarray(array, dtype=float)
    if positions.size == 0:
        # A bare [] has shape (0,), read it as zero 2D positions
        positions = positions.reshape(0, 2)
    if positions.ndim != 2 or positions.shape[1] not in (2, 3):
        raise InvocationContractViolation(
            f'{name} must have shape (N, 2) or (N, 3), got {positions.shape}'
        )
    return positions


def array_accessor(array: Any) -> Callable[[int], tuple[float, ...]]:
    positions = as_position_array(array)

    def get_point(i: int) -> tuple[float, ...]:
        return tuple(positions[i].tolist())

    return get_point


def ragged_accessors(
    arrays: Sequence[Any],
) -> tuple[Callable[[int], int], Callable[[int, int], tuple[float, ...]]]:
    """Returns `(get_length, get_point)` over a list of position arrays."""
    parts = [as_position_array(array, f'arrays[{i}]') for i, array in enumerate(arrays)]

    def get_length(i: int) -> int:
        return len(parts[i])

    def get_point(i: int, j: int) -> tuple[float, ...]:
        return tuple(parts[i][j].tolist())

    return get_length, get_point


def encode_multi_point(array: Any) -> dict[str, Any]:
    positions = as_position_array(array)
    return geometry.multi_point(len(positions), array_accessor(positions))


def encode_line_string(array: Any) -> dict[str, Any]:
    positions = as_position_array(array)
    return geometry.line_string(len(positions), array_accessor(positions))


def encode_multi_line_string(arrays: Sequence[Any]) -> dict[str, Any]:
    get_length, get_point = ragged_accessors(arrays)
    return geometry.multi_line_string(len(arrays), get_length, get_point)


def encode_polygon(rings: Sequence[Any]) -> dict[str, Any]:
    """Encodes a polygon from its rings, exterior first.

    Rings may be open or closed, a closing repeat is dropped before the
    winding is fixed.
    """
    parts = [as_position_array(ring, f'rings[{i}]') for i, ring in enumerate(rings)]
    return geometry.polygon(
        len(parts),
        lambda i: open_ring_length(parts[i]),
        lambda i, j: tuple(parts[i][j].tolist()),
    )
