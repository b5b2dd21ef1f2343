"""Merge boolean patterns into a grid at a logical offset."""

import logging
import numpy as np

from .errors import PatternTooLargeError
from .grid import BooleanGrid
from .matrix import as_bool_matrix, resize, shift, strip_border, pad_border

logger = logging.getLogger(__name__)


def _check_fits(pattern: np.ndarray, size: int, offset_row: int, offset_col: int) -> None:
    """Raise if any live cell of pattern would land outside the logical grid."""
    rows, cols = np.nonzero(pattern)
    if rows.size == 0:
        return
    if offset_row + rows.max() >= size or offset_col + cols.max() >= size:
        raise PatternTooLargeError(pattern.shape, (offset_row, offset_col), size)


def overlay(grid: BooleanGrid, pattern, offset_row: int = 0, offset_col: int = 0) -> np.ndarray:
    """Build the full-size padded overlay for a pattern at an offset.

    The pattern is padded to the internal grid size, shifted right by
    offset_col + 1 and down by offset_row + 1 so that its (0, 0) cell lands
    on logical cell (offset_row, offset_col). Content shifted past the edge
    is dropped, and anything that lands on the border is cleared.
    """
    matrix = as_bool_matrix(pattern)
    rows, cols = grid.shape

    padded = resize(matrix, rows, cols, fill=False)
    padded = shift(padded, offset_col + 1, axis=1)
    padded = shift(padded, offset_row + 1, axis=0)

    return pad_border(strip_border(padded))


def place(
    grid: BooleanGrid,
    pattern,
    offset_row: int = 0,
    offset_col: int = 0,
    clip: bool = False,
) -> BooleanGrid:
    """Union a pattern into the grid.

    Args:
        grid: Target grid, modified in place
        pattern: R x C boolean matrix (nested lists or numpy array)
        offset_row: Rows to move the pattern down, in logical coordinates
        offset_col: Columns to move the pattern right, in logical coordinates
        clip: Discard live cells that fall outside the grid instead of raising

    Returns:
        The same grid, for chaining

    Raises:
        ValueError: If an offset is negative or the pattern is not 2D
        PatternTooLargeError: If live cells would leave the grid and clip is False
    """
    if offset_row < 0 or offset_col < 0:
        raise ValueError(f"Offsets must be non-negative, got ({offset_row}, {offset_col})")

    matrix = as_bool_matrix(pattern)
    if not clip:
        _check_fits(matrix, grid.size, offset_row, offset_col)

    merged = np.logical_or(grid.cells, overlay(grid, matrix, offset_row, offset_col))
    grid.replace(merged)

    logger.debug(
        "Placed %dx%d pattern at (%d, %d), population now %d",
        matrix.shape[0], matrix.shape[1], offset_row, offset_col, grid.population,
    )
    return grid
