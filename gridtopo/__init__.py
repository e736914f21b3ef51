"""
gridtopo: coordinates and neighbors on 2D grids

Pure functions for reasoning about positions on a grid under bounded or
toroidal topology. The library never stores cell values; it only answers
which coordinates exist and which are adjacent.
"""

from .core.topology import (
    Coordinate, Direction, Topology, adjacent_cell, is_corner, is_edge, walk
)
from .core.points import count_points, points, points_array
from .core.grid import GridTopology
from .neighbors.neighborhood import Neighborhood, neighbor_offsets, neighborhood
from .neighbors.tables import neighbor_counts, neighbor_table

__version__ = "0.1.0"

__all__ = [
    'Topology',
    'Direction',
    'Neighborhood',
    'Coordinate',
    'adjacent_cell',
    'walk',
    'is_edge',
    'is_corner',
    'points',
    'count_points',
    'points_array',
    'neighborhood',
    'neighbor_offsets',
    'neighbor_table',
    'neighbor_counts',
    'GridTopology',
]
