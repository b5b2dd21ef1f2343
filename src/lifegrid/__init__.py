"""Conway's Game of Life on a bounded grid, built from boolean matrix operations."""

__version__ = "0.1.0"

from .core.errors import LifeGridError, InvalidSizeError, PatternTooLargeError, DimensionMismatchError, LiveBorderError
from .core.grid import BooleanGrid
from .core.game import GameGrid
from .core.patterns import Pattern, PatternLibrary
from .core.config import SimulationConfig

__all__ = [
    "GameGrid",
    "BooleanGrid",
    "Pattern",
    "PatternLibrary",
    "SimulationConfig",
    "LifeGridError",
    "InvalidSizeError",
    "PatternTooLargeError",
    "DimensionMismatchError",
    "LiveBorderError",
]
