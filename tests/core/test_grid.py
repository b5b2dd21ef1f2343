"""Tests for the BooleanGrid class."""

import numpy as np
import pytest

from lifegrid.core.errors import DimensionMismatchError, InvalidSizeError, LiveBorderError
from lifegrid.core.grid import BooleanGrid


class TestBooleanGrid:
    """Test cases for the BooleanGrid class."""

    @pytest.mark.parametrize("size", [1, 2, 7, 20])
    def test_initialization(self, size):
        """Test an empty grid of every size."""
        grid = BooleanGrid(size)
        external = grid.to_external()

        assert grid.size == size
        assert grid.shape == (size + 2, size + 2)
        assert external.shape == (size, size)
        assert not external.any()
        assert grid.population == 0

    @pytest.mark.parametrize("size", [0, -1, -10, 2.5, "7", None, True])
    def test_invalid_size(self, size):
        """Test that non-positive or non-integer sizes are rejected."""
        with pytest.raises(InvalidSizeError):
            BooleanGrid(size)

    def test_invalid_size_is_value_error(self):
        """Test InvalidSizeError can be caught as ValueError."""
        with pytest.raises(ValueError):
            BooleanGrid(0)

    def test_expand(self):
        """Test embedding an N x N matrix in a dead border."""
        grid = BooleanGrid(3)
        expanded = grid.expand(np.ones((3, 3), dtype=bool))

        assert expanded.shape == (5, 5)
        assert expanded[1:4, 1:4].all()
        assert np.count_nonzero(expanded) == 9

    def test_expand_wrong_shape(self):
        """Test expand rejects matrices that are not N x N."""
        grid = BooleanGrid(3)
        with pytest.raises(DimensionMismatchError):
            grid.expand(np.ones((2, 3), dtype=bool))

    def test_replace(self):
        """Test wholesale state replacement."""
        grid = BooleanGrid(3)
        pattern = np.eye(3, dtype=bool)
        grid.replace(grid.expand(pattern))

        assert np.array_equal(grid.to_external(), pattern)
        assert grid.population == 3

    def test_replace_rejects_live_border(self):
        """Test the border cannot be brought to life."""
        grid = BooleanGrid(3)
        cells = np.zeros((5, 5), dtype=bool)
        cells[0, 2] = True

        with pytest.raises(LiveBorderError, match="1 live cell"):
            grid.replace(cells)
        assert grid.population == 0

    def test_replace_rejects_wrong_shape(self):
        """Test replacement with a differently sized array."""
        grid = BooleanGrid(3)
        with pytest.raises(DimensionMismatchError):
            grid.replace(np.zeros((3, 3), dtype=bool))

    def test_cells_is_read_only(self):
        """Test the exposed cell array cannot be written."""
        grid = BooleanGrid(3)
        with pytest.raises(ValueError):
            grid.cells[1, 1] = True

    def test_to_external_is_a_copy(self):
        """Test that mutating the external view leaves the grid alone."""
        grid = BooleanGrid(3)
        external = grid.to_external()
        external[0, 0] = True
        assert grid.population == 0

    def test_clear(self):
        """Test grid clearing."""
        grid = BooleanGrid(3)
        grid.replace(grid.expand(np.ones((3, 3), dtype=bool)))
        assert grid.population == 9

        grid.clear()
        assert grid.population == 0

    def test_equality(self):
        """Test grid equality."""
        a = BooleanGrid(3)
        b = BooleanGrid(3)
        assert a == b
        assert a != BooleanGrid(4)
        assert a != "not a grid"

        b.replace(b.expand(np.eye(3, dtype=bool)))
        assert a != b

    def test_str_and_to_list(self):
        """Test string and list representations."""
        grid = BooleanGrid(2)
        grid.replace(grid.expand([[1, 0], [0, 1]]))

        assert str(grid) == "10\n01"
        assert grid.to_list() == [[True, False], [False, True]]

    def test_live_border_error_message(self):
        """Test the live border error names the border, not shapes."""
        grid = BooleanGrid(3)
        cells = np.zeros((5, 5), dtype=bool)
        cells[0, 0] = cells[4, 4] = True

        with pytest.raises(DimensionMismatchError) as excinfo:
            grid.replace(cells)

        assert isinstance(excinfo.value, LiveBorderError)
        assert excinfo.value.live_cells == 2
        assert "border" in str(excinfo.value)
        assert "shape" not in str(excinfo.value)
