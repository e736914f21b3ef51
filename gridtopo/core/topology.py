"""Grid topologies and single-step adjacency.

This module holds the primitive every other part of the library builds on:
given a topology, a grid extent and a coordinate, find the cell one step away
in a cardinal direction. Moves that leave a bounded grid produce ``None``
rather than raising, so callers can drop them by omission.

Coordinates are ``(x, y)`` tuples where x is the column and y is the row,
with y increasing southward. Inputs are trusted: nothing here checks that
``x < width`` or ``y < height``.
"""

from enum import Enum
from typing import Iterable, Optional, Tuple

Coordinate = Tuple[int, int]


class Topology(Enum):
    """How a grid behaves at its boundary."""
    BOUNDED = "bounded"  # Finite grid, no wrap-around
    TORUS = "torus"      # Wraps on both axes, keeping the axis not moved in


class Direction(Enum):
    """The four cardinal moves."""
    NORTH = "N"  # y - 1
    SOUTH = "S"  # y + 1
    EAST = "E"   # x + 1
    WEST = "W"   # x - 1

    @property
    def opposite(self) -> 'Direction':
        """Direction that undoes this one."""
        return _OPPOSITES[self]

    @property
    def delta(self) -> Tuple[int, int]:
        """Unwrapped (dx, dy) unit offset."""
        return _DELTAS[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}


def _bounded_step(width: int, height: int, x: int, y: int,
                  direction: Direction) -> Optional[Coordinate]:
    if direction is Direction.NORTH:
        return (x, y - 1) if y > 0 else None
    if direction is Direction.SOUTH:
        return (x, y + 1) if y + 1 < height else None
    if direction is Direction.EAST:
        return (x + 1, y) if x + 1 < width else None
    if direction is Direction.WEST:
        return (x - 1, y) if x > 0 else None
    raise ValueError(f"Unknown direction: {direction!r}")


def _torus_step(width: int, height: int, x: int, y: int,
                direction: Direction) -> Coordinate:
    # South wraps modulo width, not height (pinned by test_torus_south_wraps_by_width)
    if direction is Direction.NORTH:
        return (x, y - 1 if y > 0 else height - 1)
    if direction is Direction.SOUTH:
        return (x, (y + 1) % width)
    if direction is Direction.EAST:
        return ((x + 1) % width, y)
    if direction is Direction.WEST:
        return (x - 1 if x > 0 else width - 1, y)
    raise ValueError(f"Unknown direction: {direction!r}")


def adjacent_cell(topology: Topology, width: int, height: int,
                  x: int, y: int, direction: Direction) -> Optional[Coordinate]:
    """Get the cell one step from (x, y) in the given direction.

    Args:
        topology: Boundary behavior of the grid
        width: Grid width in cells
        height: Grid height in cells
        x: X coordinate (column), assumed < width
        y: Y coordinate (row), assumed < height
        direction: Cardinal direction to move in

    Returns:
        The adjacent (x, y), or None if the move leaves a bounded grid.
        A torus always returns a coordinate.
    """
    if topology is Topology.BOUNDED:
        return _bounded_step(width, height, x, y, direction)
    if topology is Topology.TORUS:
        return _torus_step(width, height, x, y, direction)
    raise ValueError(f"Unknown topology: {topology!r}")


def walk(topology: Topology, width: int, height: int, x: int, y: int,
         directions: Iterable[Direction]) -> Optional[Coordinate]:
    """Apply a sequence of single steps, stopping at the first blocked one.

    Args:
        topology: Boundary behavior of the grid
        width: Grid width in cells
        height: Grid height in cells
        x: Starting X coordinate
        y: Starting Y coordinate
        directions: Steps to take in order

    Returns:
        Final (x, y), or None if any step was blocked. No steps returns
        the starting point.
    """
    position: Optional[Coordinate] = (x, y)
    for direction in directions:
        position = adjacent_cell(topology, width, height, position[0], position[1], direction)
        if position is None:
            return None
    return position


def is_edge(topology: Topology, width: int, height: int, x: int, y: int) -> bool:
    """Check if (x, y) lies on the boundary of a bounded grid.

    A torus has no edge, so this is always False for Topology.TORUS.
    """
    if topology is Topology.BOUNDED:
        return x == 0 or x + 1 == width or y == 0 or y + 1 == height
    if topology is Topology.TORUS:
        return False
    raise ValueError(f"Unknown topology: {topology!r}")


def is_corner(topology: Topology, width: int, height: int, x: int, y: int) -> bool:
    """Check if (x, y) is on both an x boundary and a y boundary of a bounded grid."""
    if topology is Topology.BOUNDED:
        return (x == 0 or x + 1 == width) and (y == 0 or y + 1 == height)
    if topology is Topology.TORUS:
        return False
    raise ValueError(f"Unknown topology: {topology!r}")
