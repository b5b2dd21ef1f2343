"""Conway's Game of Life on a bounded square grid."""

from typing import Deque, Dict, Tuple
from collections import deque
import logging
import numpy as np

from . import placer, rules
from .grid import BooleanGrid
from .matrix import to_ascii

logger = logging.getLogger(__name__)


class GameGrid:
    """Game of Life simulation over a BooleanGrid.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    Cells outside the grid are always dead. ``initialize`` and ``step``
    return the game itself so calls can be chained::

        GameGrid(7).initialize(glider, 2, 2).step().get_grid()
    """

    def __init__(self, size: int, max_tracked_states: int = 1000) -> None:
        """Initialize an empty game.

        Args:
            size: Logical side length of the grid
            max_tracked_states: Most recent distinct states kept for cycle detection

        Raises:
            InvalidSizeError: If size is not a positive integer
            ValueError: If max_tracked_states is less than 1
        """
        if max_tracked_states < 1:
            raise ValueError(f"max_tracked_states must be at least 1, got {max_tracked_states}")

        self.grid = BooleanGrid(size)
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)
        self._state_history: Deque[bytes] = deque(maxlen=max_tracked_states)
        self._seen_states: Dict[bytes, int] = {}

        self._update_population_history()

    @property
    def size(self) -> int:
        """Logical side length."""
        return self.grid.size

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    def initialize(self, pattern, offset_row: int = 0, offset_col: int = 0, clip: bool = False) -> "GameGrid":
        """Union a shape into the grid.

        Args:
            pattern: Boolean matrix of the shape
            offset_row: Number of rows to shift the shape down
            offset_col: Number of columns to shift the shape right
            clip: Drop cells falling outside the grid instead of raising

        Returns:
            self
        """
        placer.place(self.grid, pattern, offset_row, offset_col, clip=clip)
        self._forget_states()
        if self._population_history:
            self._population_history.pop()
        self._update_population_history()
        logger.debug("Grid after initialize:\n%s", self)
        return self

    def place_pattern(self, pattern, offset_row: int = 0, offset_col: int = 0, clip: bool = False) -> "GameGrid":
        """Union a library Pattern into the grid."""
        return self.initialize(pattern.cells, offset_row, offset_col, clip=clip)

    def step(self) -> "GameGrid":
        """Advance the simulation by one generation."""
        self._remember_state()
        rules.step(self.grid)

        self._generation += 1
        self._update_population_history()
        logger.debug("Generation %d:\n%s", self._generation, self)
        return self

    def get_grid(self) -> np.ndarray:
        """Current logical state as a size x size bool array, True = alive."""
        return self.grid.to_external()

    def run(self, generations: int) -> "GameGrid":
        """Advance the given number of generations."""
        if generations < 0:
            raise ValueError(f"generations must be non-negative, got {generations}")
        for _ in range(generations):
            self.step()
        return self

    def run_until_stable(self, max_generations: int = 10000) -> Tuple[int, str]:
        """Run simulation until it becomes stable, cycles or dies out.

        Args:
            max_generations: Maximum generations to run

        Returns:
            Tuple of (final_generation, reason) where reason is one of:
            'extinction', 'still', 'cycle', 'max_generations'
        """
        reason = "max_generations"
        for _ in range(max_generations):
            if self.population == 0:
                reason = "extinction"
                break

            previous = self.grid.cells.tobytes()
            self.step()
            current = self.grid.cells.tobytes()

            if current == previous:
                reason = "still"
                break
            if current in self._seen_states:
                reason = "cycle"
                break
        else:
            if self.population == 0:
                reason = "extinction"

        logger.info("Stopped at generation %d: %s", self._generation, reason)
        return self._generation, reason

    def cycle_length(self) -> int:
        """Period of the current state if it has been seen before, else 0."""
        first = self._seen_states.get(self.grid.cells.tobytes())
        if first is None:
            return 0
        return self._generation - first

    def reset(self) -> None:
        """Clear the grid and all tracking state."""
        self.grid.clear()
        self._generation = 0
        self._population_history.clear()
        self._forget_states()
        self._update_population_history()

    def save_state(self) -> Dict:
        """Save complete game state for serialization."""
        return {
            "generation": self._generation,
            "size": self.size,
            "grid_data": self.grid.to_list(),
            "population_history": list(self._population_history),
        }

    def load_state(self, state: Dict) -> None:
        """Load game state saved by save_state.

        Raises:
            ValueError: If the saved grid size differs from this grid
        """
        if state["size"] != self.size:
            raise ValueError(f"Grid size mismatch: saved {state['size']} vs current {self.size}")

        self.grid.clear()
        placer.place(self.grid, state["grid_data"])
        self._generation = state["generation"]
        self._population_history = deque(state["population_history"], maxlen=100)
        self._forget_states()

    def _remember_state(self) -> None:
        state = self.grid.cells.tobytes()
        if state in self._seen_states:
            return

        # Evict the oldest state before the deque drops it
        if len(self._state_history) == self._state_history.maxlen:
            del self._seen_states[self._state_history[0]]

        self._seen_states[state] = self._generation
        self._state_history.append(state)

    def _forget_states(self) -> None:
        self._seen_states.clear()
        self._state_history.clear()

    def _update_population_history(self) -> None:
        self._population_history.append(self.population)

    def __str__(self) -> str:
        return to_ascii(self.get_grid())
