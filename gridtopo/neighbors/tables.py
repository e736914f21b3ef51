"""Precomputed neighbor lookup tables.

Kernels that visit every cell repeatedly (cellular automata, diffusion,
flow routing) are better served by a dense array of neighbor coordinates
than by calling neighborhood() per cell per step. These helpers build
those arrays once from the same composition rules.
"""

import numpy as np
import logging

from ..core.points import count_points, points
from ..core.topology import Topology
from .neighborhood import Neighborhood, neighborhood

logger = logging.getLogger(__name__)

# Fill value for slots past the end of a cell's neighborhood
MISSING = -1


def neighbor_table(topology: Topology, width: int, height: int,
                   kind: Neighborhood) -> np.ndarray:
    """Build a dense table of every cell's neighbors.

    Args:
        topology: Boundary behavior of the grid
        width: Grid width in cells
        height: Grid height in cells
        kind: Neighborhood shape

    Returns:
        int64 array of shape (width*height, kind.max_size, 2). Row i
        belongs to the i-th coordinate of points(width, height); its
        neighbors come first in emission order and unused slots hold -1.
    """
    table = np.full((count_points(width, height), kind.max_size, 2), MISSING, dtype=np.int64)

    for row, (x, y) in enumerate(points(width, height)):
        for slot, cell in enumerate(neighborhood(topology, width, height, x, y, kind)):
            table[row, slot] = cell

    logger.debug(f"Built {kind.value} neighbor table for {topology.value} {width}x{height} grid")
    return table


def neighbor_counts(topology: Topology, width: int, height: int,
                    kind: Neighborhood) -> np.ndarray:
    """Count neighbors of every cell.

    Returns:
        int64 array of shape (width, height); entry [x, y] is the size of
        the neighborhood of (x, y)
    """
    table = neighbor_table(topology, width, height, kind)
    counts = np.count_nonzero(table[:, :, 0] != MISSING, axis=1)
    return counts.astype(np.int64).reshape(max(0, width), max(0, height))
