"""Simulation configuration and helpers that build games from it."""

from typing import Optional
from dataclasses import dataclass, asdict
import logging

from .errors import InvalidSizeError
from .game import GameGrid
from .patterns import PatternLibrary

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""
    size: int = 50
    generations: int = 100
    pattern: Optional[str] = None
    offset_row: int = 0
    offset_col: int = 0
    clip: bool = False

    def validate(self) -> None:
        """Check the configuration before building a game.

        Raises:
            InvalidSizeError: If size is not a positive integer
            ValueError: If generations or an offset is negative
        """
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size <= 0:
            raise InvalidSizeError(self.size)
        if self.generations < 0:
            raise ValueError(f"generations must be non-negative, got {self.generations}")
        if self.offset_row < 0 or self.offset_col < 0:
            raise ValueError(f"Offsets must be non-negative, got ({self.offset_row}, {self.offset_col})")

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """Create a config from a dictionary, ignoring unknown keys."""
        known = {key: value for key, value in data.items() if key in cls.__dataclass_fields__}
        return cls(**known)


def build_game(config: SimulationConfig, library: Optional[PatternLibrary] = None) -> GameGrid:
    """Create a game seeded with the configured pattern.

    Raises:
        KeyError: If the pattern name is not in the library
    """
    config.validate()
    game = GameGrid(config.size)

    if config.pattern is not None:
        library = library or PatternLibrary()
        pattern = library.get_pattern(config.pattern)
        if pattern is None:
            raise KeyError(f"Unknown pattern: {config.pattern}")
        game.place_pattern(pattern, config.offset_row, config.offset_col, clip=config.clip)

    return game


def run_simulation(config: SimulationConfig, library: Optional[PatternLibrary] = None) -> GameGrid:
    """Build a game from config and advance it the configured number of generations."""
    game = build_game(config, library).run(config.generations)
    logger.info(
        "Ran %s on %dx%d grid for %d generations, final population %d",
        config.pattern or "empty grid", config.size, config.size, game.generation, game.population,
    )
    return game
