"""Boolean matrix helpers shared by the core components.

Everything here is a pure function: inputs are never modified and a new
array is always returned.
"""

from typing import Tuple
import numpy as np

from .errors import DimensionMismatchError


def as_bool_matrix(data) -> np.ndarray:
    """Coerce nested lists or arrays of 0/1 (or bools) into a 2D bool array.

    Raises:
        ValueError: If the data is not two dimensional
    """
    arr = np.asarray(data)
    if arr.ndim != 2:
        raise ValueError(f"Expected a 2D matrix, got {arr.ndim} dimension(s)")
    return arr.astype(bool)


def check_shape(matrix: np.ndarray, expected: Tuple[int, int], context: str = "") -> np.ndarray:
    """Return matrix unchanged if it has the expected shape."""
    if matrix.shape != tuple(expected):
        raise DimensionMismatchError(expected, matrix.shape, context)
    return matrix


def pad_border(matrix: np.ndarray) -> np.ndarray:
    """Surround a matrix with a one-cell dead border."""
    return np.pad(matrix.astype(bool), 1, mode="constant", constant_values=False)


def strip_border(matrix: np.ndarray) -> np.ndarray:
    """Remove the outermost row and column on all four sides."""
    return matrix[1:-1, 1:-1].copy()


def resize(matrix: np.ndarray, rows: int, cols: int, fill: bool = False) -> np.ndarray:
    """Grow or crop a matrix at its bottom and right edges.

    New cells take the fill value; cells beyond the new size are dropped.
    """
    result = np.full((rows, cols), fill, dtype=bool)
    keep_rows = min(rows, matrix.shape[0])
    keep_cols = min(cols, matrix.shape[1])
    result[:keep_rows, :keep_cols] = matrix[:keep_rows, :keep_cols]
    return result


def shift(matrix: np.ndarray, count: int, axis: int = 1, fill: bool = False) -> np.ndarray:
    """Shift content right (axis=1) or down (axis=0) by count cells.

    Vacated leading cells take the fill value and content pushed past the
    last row or column is discarded; nothing wraps around.
    """
    if count < 0:
        raise ValueError(f"Shift count must be non-negative, got {count}")
    result = np.full(matrix.shape, fill, dtype=bool)
    length = matrix.shape[axis]
    if count >= length:
        return result
    if axis == 1:
        result[:, count:] = matrix[:, : length - count]
    else:
        result[count:, :] = matrix[: length - count, :]
    return result


def to_ascii(matrix: np.ndarray, alive: str = "1", dead: str = "0") -> str:
    """Render a matrix as one line of characters per row."""
    return "\n".join("".join(alive if cell else dead for cell in row) for row in matrix)
