"""Tests for dense neighbor lookup tables.

Checks table layout against neighborhood() and verifies memory stays
reasonable for large grids.
"""

import numpy as np
import pytest
from gridtopo.core.points import points, points_array
from gridtopo.core.topology import Topology
from gridtopo.neighbors.neighborhood import Neighborhood, neighborhood
from gridtopo.neighbors.tables import MISSING, neighbor_counts, neighbor_table


class TestNeighborTable:
    """Test neighbor table layout."""

    def test_shape(self):
        table = neighbor_table(Topology.BOUNDED, 4, 3, Neighborhood.SQUARE)
        assert table.shape == (12, 8, 2)
        assert table.dtype == np.int64

    def test_bounded_corner_row_padded(self):
        """Row 0 is cell (0, 0); unused slots hold the fill value."""
        table = neighbor_table(Topology.BOUNDED, 3, 3, Neighborhood.ORTHOGONAL)
        np.testing.assert_array_equal(table[0], [[0, 1], [1, 0], [MISSING, MISSING], [MISSING, MISSING]])

    def test_rows_follow_points_order(self):
        """Row x*height + y holds the neighbors of (x, y)."""
        table = neighbor_table(Topology.BOUNDED, 3, 3, Neighborhood.ORTHOGONAL)
        np.testing.assert_array_equal(table[1 * 3 + 1], [[1, 0], [1, 2], [2, 1], [0, 1]])

    @pytest.mark.parametrize("topology", list(Topology))
    @pytest.mark.parametrize("kind", list(Neighborhood))
    def test_matches_neighborhood(self, topology, kind):
        table = neighbor_table(topology, 4, 4, kind)

        for row, (x, y) in enumerate(points(4, 4)):
            expected = list(neighborhood(topology, 4, 4, x, y, kind))
            actual = [tuple(int(v) for v in cell) for cell in table[row] if cell[0] != MISSING]
            assert actual == expected

    def test_torus_has_no_padding(self):
        table = neighbor_table(Topology.TORUS, 5, 5, Neighborhood.SQUARE)
        assert not np.any(table == MISSING)

    def test_wide_torus_rows_out_of_range(self):
        """On a 5x3 torus the bottom row's south neighbor has y == height."""
        table = neighbor_table(Topology.TORUS, 5, 3, Neighborhood.ORTHOGONAL)

        # Row 2 is cell (0, 2)
        np.testing.assert_array_equal(table[2], [[0, 1], [0, 3], [1, 2], [4, 2]])
        assert table[:, :, 1].max() == 3

        # Only the bottom-row cells (x, 2) produce out-of-range rows
        out_of_range = {tuple(int(v) for v in cell)
                        for cell, row in zip(points_array(5, 3), table)
                        if np.any(row[:, 1] >= 3)}
        assert out_of_range == {(x, 2) for x in range(5)}

    def test_empty_grid(self):
        table = neighbor_table(Topology.BOUNDED, 0, 4, Neighborhood.DIAGONAL)
        assert table.shape == (0, 4, 2)


class TestNeighborCounts:
    """Test per-cell neighbor counts."""

    def test_bounded_square(self):
        counts = neighbor_counts(Topology.BOUNDED, 3, 3, Neighborhood.SQUARE)
        np.testing.assert_array_equal(counts, [[3, 5, 3], [5, 8, 5], [3, 5, 3]])

    def test_indexed_by_x_then_y(self):
        """A 4x2 grid gives a (4, 2) array."""
        counts = neighbor_counts(Topology.BOUNDED, 4, 2, Neighborhood.ORTHOGONAL)
        assert counts.shape == (4, 2)
        np.testing.assert_array_equal(counts, [[2, 2], [3, 3], [3, 3], [2, 2]])

    def test_torus_full(self):
        counts = neighbor_counts(Topology.TORUS, 6, 6, Neighborhood.DIAGONAL)
        assert np.all(counts == 4)


def test_table_memory_usage():
    """Neighbor table for a 200x200 grid stays well under 50MB."""
    import psutil
    import os

    process = psutil.Process(os.getpid())
    memory_before = process.memory_info().rss / 1024 / 1024  # MB

    table = neighbor_table(Topology.TORUS, 200, 200, Neighborhood.SQUARE)

    memory_after = process.memory_info().rss / 1024 / 1024  # MB
    memory_used = memory_after - memory_before

    assert table.shape == (40000, 8, 2)
    assert table.nbytes == 40000 * 8 * 2 * 8
    assert memory_used < 50, f"Table used {memory_used:.1f}MB (> 50MB limit)"
