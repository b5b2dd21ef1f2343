"""Conway's transition rule expressed as boolean matrix algebra.

    X1 = (X & (N == 2)) | (N == 3)

where X is the current padded state, N the census and X1 the next state.
A live cell with two neighbors survives through the AND term; any cell with
three neighbors is alive next generation through the OR term, which covers
both birth and survival. Everything else dies or stays dead.
"""

import logging
import numpy as np

from .census import census
from .grid import BooleanGrid
from .matrix import check_shape, pad_border

logger = logging.getLogger(__name__)

__all__ = ["SURVIVE", "BIRTH", "next_generation", "step"]

SURVIVE = 2
BIRTH = 3


def filter(counts: np.ndarray, value: int) -> np.ndarray:
    """Mark cells whose census equals value, expanded with a dead border."""
    return pad_border(np.asarray(counts) == value)


def next_generation(cells: np.ndarray) -> np.ndarray:
    """Compute the next padded state from the current one."""
    counts = census(cells)
    n2 = check_shape(filter(counts, SURVIVE), cells.shape, "filter")
    n3 = check_shape(filter(counts, BIRTH), cells.shape, "filter")
    return np.logical_or(np.logical_and(cells, n2), n3)


def step(grid: BooleanGrid) -> BooleanGrid:
    """Advance the grid one generation, replacing its state wholesale."""
    grid.replace(next_generation(grid.cells))
    logger.debug("Stepped %dx%d grid, population %d", grid.size, grid.size, grid.population)
    return grid
