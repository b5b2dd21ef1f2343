"""Bordered boolean grid holding the simulation state."""

from typing import Tuple
import numpy as np

from .errors import InvalidSizeError, LiveBorderError
from .matrix import as_bool_matrix, check_shape, pad_border, strip_border, to_ascii


class BooleanGrid:
    """Square boolean grid with a permanently dead one-cell border.

    A grid of logical size N is stored as an (N+2)x(N+2) array. Rows and
    columns 0 and N+1 form the border; logical cell (r, c) lives at
    internal index (r+1, c+1).
    """

    def __init__(self, size: int) -> None:
        """Initialize an all-dead grid.

        Args:
            size: Logical side length N

        Raises:
            InvalidSizeError: If size is not a positive integer
        """
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size <= 0:
            raise InvalidSizeError(size)

        self.size = int(size)
        self._cells = np.zeros((self.size + 2, self.size + 2), dtype=bool)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the padded cell array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def shape(self) -> Tuple[int, int]:
        """Internal (bordered) dimensions."""
        return self._cells.shape

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def to_external(self) -> np.ndarray:
        """Return the logical N x N state with the border removed."""
        return check_shape(strip_border(self._cells), (self.size, self.size), "to_external")

    def expand(self, pattern) -> np.ndarray:
        """Embed an N x N matrix in a dead border.

        Args:
            pattern: N x N boolean matrix

        Returns:
            (N+2)x(N+2) boolean array

        Raises:
            DimensionMismatchError: If pattern is not N x N
        """
        matrix = check_shape(as_bool_matrix(pattern), (self.size, self.size), "expand")
        return check_shape(pad_border(matrix), self.shape, "expand")

    def replace(self, cells: np.ndarray) -> None:
        """Swap in a whole new padded state.

        Raises:
            DimensionMismatchError: If the shape is wrong
            LiveBorderError: If a border cell is alive
        """
        new_cells = check_shape(np.asarray(cells, dtype=bool), self.shape, "replace")
        border = new_cells.copy()
        border[1:-1, 1:-1] = False
        if border.any():
            raise LiveBorderError(int(np.count_nonzero(border)), "replace")
        self._cells = new_cells.copy()

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells = np.zeros_like(self._cells)

    def to_list(self) -> list:
        """Logical state as nested lists of bools."""
        return self.to_external().tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BooleanGrid):
            return False
        return self.size == other.size and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation of the logical state, '1' alive and '0' dead."""
        return to_ascii(self.to_external())
