"""Neighborhood shapes composed from single-step adjacency.

Diagonal neighbors are modeled as two orthogonal steps (north or south first,
then east or west). If either step is blocked by a bounded edge the diagonal
neighbor does not exist; there are no partial moves.
"""

from enum import Enum
from typing import Iterator, Tuple

from ..core.topology import Coordinate, Direction, Topology, walk

N, S, E, W = Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST

# Emission order is part of the public contract
ORTHOGONAL_CHAINS: Tuple[Tuple[Direction, ...], ...] = ((N,), (S,), (E,), (W,))
DIAGONAL_CHAINS: Tuple[Tuple[Direction, ...], ...] = ((N, E), (S, E), (N, W), (S, W))


class Neighborhood(Enum):
    """Shapes of cells around a point. None of them include the point itself."""
    ORTHOGONAL = "orthogonal"  # N, S, E, W
    DIAGONAL = "diagonal"      # NE, SE, NW, SW
    SQUARE = "square"          # Both of the above

    @property
    def max_size(self) -> int:
        """Largest number of neighbors this shape can produce."""
        return len(neighbor_offsets(self))


def neighbor_offsets(kind: Neighborhood) -> Tuple[Tuple[Direction, ...], ...]:
    """Direction chains walked for a neighborhood shape, in emission order.

    Args:
        kind: Neighborhood shape

    Returns:
        Tuple of direction chains; each chain is walked from the center point
    """
    if kind is Neighborhood.ORTHOGONAL:
        return ORTHOGONAL_CHAINS
    if kind is Neighborhood.DIAGONAL:
        return DIAGONAL_CHAINS
    if kind is Neighborhood.SQUARE:
        return ORTHOGONAL_CHAINS + DIAGONAL_CHAINS
    raise ValueError(f"Unknown neighborhood: {kind!r}")


def neighborhood(topology: Topology, width: int, height: int,
                 x: int, y: int, kind: Neighborhood) -> Iterator[Coordinate]:
    """Yield the neighbors of (x, y) for a neighborhood shape.

    Blocked directions on a bounded grid are skipped, so the number of
    results varies between 0 and kind.max_size.

    Args:
        topology: Boundary behavior of the grid
        width: Grid width in cells
        height: Grid height in cells
        x: X coordinate of the center cell
        y: Y coordinate of the center cell
        kind: Neighborhood shape

    Yields:
        Neighbor coordinates, orthogonal ones (N, S, E, W) before
        diagonal ones (NE, SE, NW, SW)
    """
    for chain in neighbor_offsets(kind):
        cell = walk(topology, width, height, x, y, chain)
        if cell is not None:
            yield cell
