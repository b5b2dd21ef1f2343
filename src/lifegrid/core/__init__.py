"""Core Game of Life logic."""

from .errors import LifeGridError, InvalidSizeError, PatternTooLargeError, DimensionMismatchError, LiveBorderError
from .grid import BooleanGrid
from .game import GameGrid
from .patterns import Pattern, PatternLibrary
from .config import SimulationConfig, build_game, run_simulation

__all__ = [
    "LifeGridError",
    "InvalidSizeError",
    "PatternTooLargeError",
    "DimensionMismatchError",
    "LiveBorderError",
    "BooleanGrid",
    "GameGrid",
    "Pattern",
    "PatternLibrary",
    "SimulationConfig",
    "build_game",
    "run_simulation",
]
