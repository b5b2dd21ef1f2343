"""Exceptions raised by the lifegrid core."""


class LifeGridError(Exception):
    """Base class for all lifegrid errors."""


class InvalidSizeError(LifeGridError, ValueError):
    """Raised when a grid is constructed with a non-positive size."""

    def __init__(self, size: object) -> None:
        super().__init__(f"Grid size must be a positive integer, got {size!r}")
        self.size = size


class PatternTooLargeError(LifeGridError, ValueError):
    """Raised when a pattern at the given offset would leave the grid."""

    def __init__(self, pattern_shape, offset, grid_size: int) -> None:
        rows, cols = pattern_shape
        super().__init__(
            f"Pattern of shape {rows}x{cols} at offset {offset} "
            f"does not fit a {grid_size}x{grid_size} grid"
        )
        self.pattern_shape = pattern_shape
        self.offset = offset
        self.grid_size = grid_size


class DimensionMismatchError(LifeGridError, RuntimeError):
    """Raised when a matrix does not have the shape an operation requires."""

    def __init__(self, expected, actual, context: str = "") -> None:
        prefix = f"{context}: " if context else ""
        super().__init__(f"{prefix}expected shape {tuple(expected)}, got {tuple(actual)}")
        self.expected = tuple(expected)
        self.actual = tuple(actual)


class LiveBorderError(DimensionMismatchError):
    """Raised when a replacement state has live cells on the dead border."""

    def __init__(self, live_cells: int, context: str = "") -> None:
        prefix = f"{context}: " if context else ""
        LifeGridError.__init__(self, f"{prefix}{live_cells} live cell(s) on the border")
        self.live_cells = live_cells
