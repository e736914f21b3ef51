"""Neighborhood composition and dense neighbor tables."""

from .neighborhood import Neighborhood, neighbor_offsets, neighborhood
from .tables import MISSING, neighbor_counts, neighbor_table

__all__ = [
    'Neighborhood',
    'neighborhood',
    'neighbor_offsets',
    'neighbor_table',
    'neighbor_counts',
    'MISSING',
]
