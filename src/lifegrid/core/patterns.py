"""Common Conway's Game of Life patterns and pattern management."""

from typing import Dict, List, Optional, Any, Tuple
import json
import logging
from pathlib import Path
import numpy as np

from .matrix import as_bool_matrix, to_ascii

logger = logging.getLogger(__name__)

ALIVE_CHARS = "1*O#"
DEAD_CHARS = "0.-_ "


class Pattern:
    """A named boolean glyph that can be placed into a grid."""

    def __init__(
        self,
        name: str,
        cells,
        description: str = "",
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: R x C boolean matrix, True = alive
            description: Optional description
            metadata: Optional metadata dictionary
        """
        self.name = name
        self.cells = as_bool_matrix(cells)
        self.description = description
        self.metadata = metadata or {}

    @property
    def shape(self) -> Tuple[int, int]:
        """Get pattern size as (rows, columns)."""
        return self.cells.shape

    @property
    def population(self) -> int:
        return int(np.count_nonzero(self.cells))

    def trimmed(self) -> "Pattern":
        """Return a new pattern with dead edge rows and columns removed."""
        rows = np.flatnonzero(self.cells.any(axis=1))
        cols = np.flatnonzero(self.cells.any(axis=0))
        if rows.size == 0:
            cells = np.zeros((0, 0), dtype=bool)
        else:
            cells = self.cells[rows[0]: rows[-1] + 1, cols[0]: cols[-1] + 1]

        return Pattern(self.name, cells, self.description, self.metadata.copy())

    def to_string(self) -> str:
        """Render as rows of '1' and '0'."""
        return to_ascii(self.cells)

    def to_dict(self) -> Dict[str, Any]:
        """Convert pattern to dictionary for serialization."""
        return {
            "name": self.name,
            "cells": self.cells.astype(int).tolist(),
            "description": self.description,
            "metadata": self.metadata,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pattern":
        """Create pattern from dictionary.

        Raises:
            KeyError: If name or cells are missing
            ValueError: If data is not a dictionary or cells is not a 2D matrix
        """
        if not isinstance(data, dict):
            raise ValueError(f"Pattern data must be an object, got {type(data).__name__}")

        return cls(
            name=data["name"],
            cells=data["cells"],
            description=data.get("description", ""),
            metadata=data.get("metadata", {}),
        )

    @classmethod
    def from_string(cls, name: str, text: str, description: str = "") -> "Pattern":
        """Parse a pattern from text, one row per line.

        Live cells are any of ``1 * O #``, dead cells any of ``0 . - _`` or a
        space. Short rows are padded with dead cells and blank leading or
        trailing lines are ignored.

        Raises:
            ValueError: On an unrecognised character
        """
        lines = text.strip("\n").splitlines()
        width = max((len(line) for line in lines), default=0)
        rows = []
        for lineno, line in enumerate(lines, 1):
            row = []
            for char in line.ljust(width):
                if char in ALIVE_CHARS:
                    row.append(True)
                elif char in DEAD_CHARS:
                    row.append(False)
                else:
                    raise ValueError(f"Invalid pattern character {char!r} on line {lineno}")
            rows.append(row)

        return cls(name, np.array(rows, dtype=bool).reshape(len(rows), width), description)


BUILTIN_PATTERNS = {
    "Still Life": {
        "Block": ("11\n11", "2x2 still life block"),
        "Beehive": (".11.\n1..1\n.11.", "Beehive still life"),
        "Loaf": (".11.\n1..1\n.1.1\n..1.", "Loaf still life"),
    },
    "Oscillators": {
        "Blinker": ("111", "Period-2 oscillator"),
        "Toad": (".111\n111.", "Period-2 oscillator"),
        "Beacon": ("11..\n11..\n..11\n..11", "Period-2 oscillator"),
        "Pulsar": (
            "..111...111..\n"
            ".............\n"
            "1....1.1....1\n"
            "1....1.1....1\n"
            "1....1.1....1\n"
            "..111...111..\n"
            ".............\n"
            "..111...111..\n"
            "1....1.1....1\n"
            "1....1.1....1\n"
            "1....1.1....1\n"
            ".............\n"
            "..111...111..",
            "Period-3 oscillator",
        ),
    },
    "Spaceships": {
        "Glider": (".1.\n..1\n111", "Smallest spaceship, period-4"),
        "Lightweight Spaceship": ("1..1.\n....1\n1...1\n.1111", "LWSS - Period-4 spaceship"),
    },
    "Methuselahs": {
        "R-pentomino": (".11\n11.\n.1.", "Famous methuselah that stabilizes after 1103 generations"),
        "Diehard": ("......1.\n11......\n.1...111", "Dies after exactly 130 generations"),
        "Acorn": (".1.....\n...1...\n11..111", "Takes 5206 generations to stabilize"),
    },
}


class PatternLibrary:
    """Manages a collection of patterns."""

    def __init__(self, storage_dir: Optional[str] = None) -> None:
        """Initialize pattern library.

        Args:
            storage_dir: Directory for storing patterns (defaults to 'patterns').
                It is only created when a pattern is saved.
        """
        self.storage_dir = Path(storage_dir or "patterns")
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        for category in BUILTIN_PATTERNS.values():
            for name, (text, description) in category.items():
                self.add_pattern(Pattern.from_string(name, text, description))

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library, replacing any with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name, or None if not found."""
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists, with
            user-added patterns under "Custom"
        """
        categories = {category: list(names) for category, names in BUILTIN_PATTERNS.items()}
        categories["Custom"] = []

        all_builtin = set()
        for names in categories.values():
            all_builtin.update(names)

        for name in self._patterns:
            if name not in all_builtin:
                categories["Custom"].append(name)

        return {cat: patterns for cat, patterns in categories.items() if patterns}

    def save_pattern(self, pattern: Pattern, filename: Optional[str] = None) -> Path:
        """Save a pattern to disk as JSON.

        Args:
            pattern: Pattern to save
            filename: Optional filename (defaults to pattern name)

        Returns:
            Path of the written file
        """
        if filename is None:
            filename = f"{pattern.name.replace(' ', '_').lower()}.json"

        self.storage_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.storage_dir / filename
        with open(filepath, "w") as f:
            json.dump(pattern.to_dict(), f, indent=2)
        return filepath

    def load_pattern(self, filename: str) -> Pattern:
        """Load a pattern from disk and add it to the library.

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file format is invalid
        """
        filepath = self.storage_dir / filename

        with open(filepath, "r") as f:
            data = json.load(f)

        pattern = Pattern.from_dict(data)
        self.add_pattern(pattern)
        return pattern

    def load_all_patterns(self) -> List[Pattern]:
        """Load every JSON pattern in the storage directory.

        Files that fail to parse are logged and skipped.
        """
        loaded = []
        if not self.storage_dir.is_dir():
            return loaded

        for filepath in sorted(self.storage_dir.glob("*.json")):
            try:
                loaded.append(self.load_pattern(filepath.name))
            except (OSError, ValueError, KeyError) as e:
                logger.warning("Failed to load pattern from %s: %s", filepath.name, e)
        return loaded
