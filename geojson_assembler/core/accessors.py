import inspect
import operator
from collections.abc import Callable, Sequence
from geojson_assembler.core.exceptions import InvocationContractViolation
from geojson_assembler.core.settings import settings
from typing import Any


PositionTuple = tuple[float, float] | tuple[float, float, float]


def check_arity(callback: Callable[..., Any], arity: int, name: str) -> None:
    """Rejects `callback` unless it can be called with `arity` positional indices."""
    if not callable(callback):
        raise InvocationContractViolation(f'{name} must be callable, got {type(callback).__name__}')
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        # No introspectable signature (some builtins), the first call decides
        return
    try:
        signature.bind(*range(arity))
    except TypeError:
        raise InvocationContractViolation(
            f'{name} must accept {arity} index argument(s), but its signature is {signature}'
        ) from None


def read_count(value: Any, name: str) -> int:
    try:
        count = operator.index(value)
    except TypeError:
        raise InvocationContractViolation(
            f'{name} must be a non-negative integer, got {type(value).__name__}'
        ) from None
    if count < 0:
        raise InvocationContractViolation(f'{name} must be a non-negative integer, got {count}')
    return count


class CountReader:
    """Wraps a length callback (ring length, line length, ring count, ...)."""

    def __init__(self, callback: Callable[..., Any], arity: int, name: str):
        check_arity(callback, arity, name)
        self.callback = callback
        self.name = name

    def read(self, *indices: int) -> int:
        return read_count(self.callback(*indices), f'{self.name}{list(indices)}')


class PositionReader:
    """Pulls positions from a point accessor.

    The accessor returns `(lon, lat)` or `(lon, lat, alt)`. The first position
    read fixes the dimensionality for the rest of the call.
    """

    def __init__(self, accessor: Callable[..., Sequence[float]], arity: int, name: str = 'accessor'):
        check_arity(accessor, arity, name)
        self.accessor = accessor
        self.name = name
        self.strict = settings.strict_dimensions
        self.dimensions: int | None = None

    def read(self, *indices: int) -> PositionTuple:
        value = self.accessor(*indices)
        try:
            size = len(value)
        except TypeError:
            raise InvocationContractViolation(
                f'{self.name}{list(indices)} must return (lon, lat) or (lon, lat, alt), '
                f'got {type(value).__name__}'
            ) from None
        if size not in (2, 3):
            raise InvocationContractViolation(
                f'{self.name}{list(indices)} must return (lon, lat) or (lon, lat, alt), '
                f'got {size} values'
            )

        if self.dimensions is None:
            self.dimensions = size
        elif self.strict and size != self.dimensions:
            raise InvocationContractViolation(
                f'{self.name}{list(indices)} returned a {size}D position after {self.dimensions}D ones'
            )
        return tuple(value)
