"""Enumeration of grid coordinates."""

import numpy as np
from typing import Iterator

from .topology import Coordinate


def points(width: int, height: int) -> Iterator[Coordinate]:
    """Yield every (x, y) in a width x height grid.

    Order is x-major: all rows of column 0, then all rows of column 1, etc.
    Each call starts a fresh enumeration.

    Args:
        width: Grid width in cells
        height: Grid height in cells

    Yields:
        Coordinates (x, y) with 0 <= x < width and 0 <= y < height
    """
    for x in range(width):
        for y in range(height):
            yield (x, y)


def count_points(width: int, height: int) -> int:
    """Number of coordinates produced by points(width, height)."""
    return max(0, width) * max(0, height)


def points_array(width: int, height: int) -> np.ndarray:
    """All grid coordinates as an (N, 2) int64 array, in points() order.

    Args:
        width: Grid width in cells
        height: Grid height in cells

    Returns:
        Array whose row i is the i-th coordinate yielded by points()
    """
    if width <= 0 or height <= 0:
        return np.empty((0, 2), dtype=np.int64)

    xs, ys = np.meshgrid(np.arange(width, dtype=np.int64),
                         np.arange(height, dtype=np.int64),
                         indexing='ij')
    return np.stack([xs.ravel(), ys.ravel()], axis=1)
