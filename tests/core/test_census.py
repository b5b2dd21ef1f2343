"""Tests for the neighbor census."""

import numpy as np

import lifegrid.core.census as census_module
from lifegrid.core.census import census
from lifegrid.core.grid import BooleanGrid


def padded(pattern):
    grid = BooleanGrid(len(pattern))
    return grid.expand(pattern)


class TestCensus:
    """Test cases for census()."""

    def test_empty_grid(self):
        """Test that an empty grid has no neighbors anywhere."""
        counts = census(BooleanGrid(5).cells)
        assert counts.shape == (5, 5)
        assert not counts.any()

    def test_single_cell(self):
        """Test neighbors of a lone live cell."""
        counts = census(padded([[0, 0, 0], [0, 1, 0], [0, 0, 0]]))
        expected = np.array([[1, 1, 1], [1, 0, 1], [1, 1, 1]])
        assert np.array_equal(counts, expected)

    def test_full_grid(self):
        """Test corner, edge and center counts with every cell alive."""
        counts = census(padded(np.ones((3, 3), dtype=bool)))
        expected = np.array([[3, 5, 3], [5, 8, 5], [3, 5, 3]])
        assert np.array_equal(counts, expected)

    def test_values_in_range(self):
        """Test every count lies in [0, 8]."""
        rng = np.random.default_rng(42)
        counts = census(padded(rng.random((12, 12)) < 0.5))
        assert counts.min() >= 0
        assert counts.max() <= 8

    def test_edges_do_not_wrap(self):
        """Test that cells on one edge are not neighbors of the opposite edge."""
        pattern = np.zeros((4, 4), dtype=bool)
        pattern[0, 0] = True
        counts = census(padded(pattern))

        assert counts[3, 3] == 0
        assert counts[0, 3] == 0
        assert counts[3, 0] == 0
        assert counts[1, 1] == 1

    def test_matches_direct_count(self):
        """Test the census against an explicit neighbor loop."""
        rng = np.random.default_rng(7)
        pattern = rng.random((6, 6)) < 0.4
        cells = padded(pattern)
        counts = census(cells)

        for r in range(1, 7):
            for c in range(1, 7):
                expected = int(cells[r - 1:r + 2, c - 1:c + 2].sum()) - int(cells[r, c])
                assert counts[r - 1, c - 1] == expected

    def test_does_not_modify_input(self):
        """Test census is a pure function of its input."""
        cells = padded(np.eye(4, dtype=bool))
        before = cells.copy()
        census(cells)
        assert np.array_equal(cells, before)

    def test_threads_configured_on_first_use(self, monkeypatch):
        """Test torch is set single-threaded once, when the census first runs."""
        calls = []
        monkeypatch.setattr(census_module, "_threads_configured", False)
        monkeypatch.setattr(census_module.torch, "set_num_threads", calls.append)

        census(BooleanGrid(3).cells)
        census(BooleanGrid(3).cells)

        assert calls == [1]
