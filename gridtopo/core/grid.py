"""Bundled grid configuration.

GridTopology fixes a topology and extent once so callers do not have to
thread (topology, width, height) through every call. It is also the only
part of the library that validates its inputs.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple
import logging

import numpy as np

from .points import count_points, points
from .topology import Coordinate, Direction, Topology, adjacent_cell, is_corner, is_edge, walk
from ..neighbors.neighborhood import Neighborhood, neighborhood
from ..neighbors.tables import neighbor_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridTopology:
    """Immutable grid topology and extent.

    Attributes:
        topology: Boundary behavior (bounded or torus)
        width: Grid width in cells
        height: Grid height in cells
    """

    topology: Topology
    width: int
    height: int

    def __post_init__(self):
        """Validate topology and dimensions.

        Raises:
            ValueError: If topology is not a Topology or a dimension is not a positive int
        """
        if not isinstance(self.topology, Topology):
            raise ValueError(f"topology must be a Topology, got {self.topology!r}")
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {value!r}")
            if value < 1:
                raise ValueError(f"{name} must be >= 1, got {value}")

        logger.debug(f"Created {self.topology.value} grid topology {self.width}x{self.height}")

    @property
    def n_cells(self) -> int:
        """Total number of cells."""
        return count_points(self.width, self.height)

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid extent as (width, height)."""
        return (self.width, self.height)

    @property
    def is_bounded(self) -> bool:
        return self.topology is Topology.BOUNDED

    def contains(self, x: int, y: int) -> bool:
        """Check if (x, y) lies inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def check(self, x: int, y: int) -> None:
        """Raise if (x, y) lies outside the grid.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.contains(x, y):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {self.width}x{self.height} grid")

    def adjacent(self, x: int, y: int, direction: Direction) -> Optional[Coordinate]:
        """Cell one step from (x, y), or None if blocked."""
        return adjacent_cell(self.topology, self.width, self.height, x, y, direction)

    def walk(self, x: int, y: int, directions: Iterable[Direction]) -> Optional[Coordinate]:
        """Cell reached by a sequence of steps, or None if any step is blocked."""
        return walk(self.topology, self.width, self.height, x, y, directions)

    def is_edge(self, x: int, y: int) -> bool:
        return is_edge(self.topology, self.width, self.height, x, y)

    def is_corner(self, x: int, y: int) -> bool:
        return is_corner(self.topology, self.width, self.height, x, y)

    def points(self) -> Iterator[Coordinate]:
        """Iterate all coordinates in x-major order."""
        return points(self.width, self.height)

    def neighborhood(self, x: int, y: int, kind: Neighborhood) -> Iterator[Coordinate]:
        """Iterate the neighbors of (x, y) for a neighborhood shape."""
        return neighborhood(self.topology, self.width, self.height, x, y, kind)

    def neighbor_table(self, kind: Neighborhood) -> np.ndarray:
        """Dense neighbor table, see gridtopo.neighbors.tables.neighbor_table."""
        return neighbor_table(self.topology, self.width, self.height, kind)

    def __contains__(self, key: Tuple[int, int]) -> bool:
        """Support (x, y) in grid syntax. Anything but an (x, y) pair is not contained."""
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        x, y = key
        return self.contains(x, y)

    def __iter__(self) -> Iterator[Coordinate]:
        return self.points()

    def __len__(self) -> int:
        return self.n_cells
