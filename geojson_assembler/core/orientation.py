from collections.abc import Sequence


def edge_sum(coords: Sequence[Sequence[float]]) -> float:
    """Sum of (x2 - x1) * (y2 + y1) over the edges of the ring.

    The sequence is treated as cyclic, the last vertex connects back to the
    first whether or not the ring is already closed. Only lon/lat are used.
    The sum is > 0 for clockwise rings and < 0 for counterclockwise ones.
    """
    total = 0.0
    for i in range(len(coords)):
        current = coords[i]
        nxt = coords[(i + 1) % len(coords)]
        total += (nxt[0] - current[0]) * (nxt[1] + current[1])
    return total


def is_counterclockwise(coords: Sequence[Sequence[float]]) -> bool:
    # A zero sum (degenerate ring) is not counterclockwise
    return edge_sum(coords) < 0


def is_clockwise(coords: Sequence[Sequence[float]]) -> bool:
    return not is_counterclockwise(coords)
