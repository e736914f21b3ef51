"""Topology primitives: adjacency, boundary predicates, point enumeration."""

from .topology import (
    Coordinate, Direction, Topology, adjacent_cell, is_corner, is_edge, walk
)
from .points import count_points, points, points_array
from .grid import GridTopology

__all__ = [
    'Coordinate',
    'Direction',
    'Topology',
    'adjacent_cell',
    'walk',
    'is_edge',
    'is_corner',
    'points',
    'count_points',
    'points_array',
    'GridTopology',
]
