from collections.abc import Sequence


def open_ring_length(ring: Sequence[Sequence[float]]) -> int:
    """Number of distinct ring positions, without a trailing closing repeat.

    Rings handed to the polygon builders must be open: the builders close
    them after fixing their winding.
    """
    count = len(ring)
    if count > 1 and tuple(ring[0]) == tuple(ring[-1]):
        return count - 1
    return count
