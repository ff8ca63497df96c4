"""
Board module for the mines game.

Holds the board configuration, the protected starting region and the
immutable Minefield value produced by the generator.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import CellType


# ============================================================================
# Constants
# ============================================================================

# Share of each dimension kept free of mines around the center.
PROTECTED_FRACTION = 0.3
MIN_PROTECTED_SIZE = 2


class ConfigurationError(ValueError):
    """Raised when a board configuration can never be generated."""


class Difficulty(Enum):
    """Difficulty levels with their mine density in percent of the area."""

    EASY = 10
    MEDIUM = 15
    HARD = 20

    @property
    def density(self) -> float:
        """Fraction of the board area covered by mines."""
        return self.value / 100

    def mine_count_for(self, width: int, height: int) -> int:
        """Mine count for a board of the given size."""
        return width * height * self.value // 100

    @classmethod
    def parse(cls, name: str) -> "Difficulty":
        """Look up a difficulty by name, ignoring case."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ConfigurationError(f"Unknown difficulty: {name!r}") from None


# ============================================================================
# Protected Region
# ============================================================================

def calc_protected_range(length: int) -> range:
    """
    Calculate the centered mine-free range along one dimension.

    The size is about 30% of the length (at least 2), bumped by one so
    that it shares the parity of the length and sits exactly centered.

    Args:
        length: Width or height of the board.

    Returns:
        Range of protected coordinates, clipped to the board.
    """
    target_size = max(int(length * PROTECTED_FRACTION), MIN_PROTECTED_SIZE)
    if target_size % 2 != length % 2:
        target_size += 1
    start = (length - target_size) // 2
    return range(max(start, 0), min(start + target_size, length))


def protected_area(width: int, height: int) -> int:
    """Number of cells in the protected rectangle of a board."""
    return len(calc_protected_range(width)) * len(calc_protected_range(height))


# ============================================================================
# Game Configuration
# ============================================================================

@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        difficulty: Difficulty level the mine count derives from.
        mine_count: Explicit mine count; derived from the area and the
            difficulty density when omitted.
    """

    width: int = 10
    height: int = 10
    difficulty: Difficulty = Difficulty.MEDIUM
    mine_count: Optional[int] = None

    def __post_init__(self) -> None:
        """Derive the mine count and validate the configuration."""
        if self.mine_count is None:
            derived = self.difficulty.mine_count_for(self.width, self.height)
            object.__setattr__(self, "mine_count", derived)
        self._validate()

    def _validate(self) -> None:
        """Ensure the mines fit outside the protected region."""
        if self.width < 1 or self.height < 1:
            raise ConfigurationError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise ConfigurationError("Number of mines cannot be negative")
        max_mines = self.max_mines
        if self.mine_count > max_mines:
            raise ConfigurationError(
                f"Too many mines (max {max_mines} outside the protected region)"
            )

    @property
    def area(self) -> int:
        """Total number of cells."""
        return self.width * self.height

    @property
    def protected_area(self) -> int:
        """Number of cells in the protected rectangle."""
        return protected_area(self.width, self.height)

    @property
    def max_mines(self) -> int:
        """Largest mine count that still leaves the protected region free."""
        return self.area - self.protected_area


# Preset configurations
EASY = GameConfig(8, 8, Difficulty.EASY)
MEDIUM = GameConfig(10, 10, Difficulty.MEDIUM)
HARD = GameConfig(16, 16, Difficulty.HARD)


# ============================================================================
# Minefield
# ============================================================================

@dataclass(frozen=True, eq=False)
class Minefield:
    """
    Immutable board: configuration, seed and cell classifications.

    The matrix is indexed [y, x] and is write-protected, so a Minefield
    can be shared freely between solver runs.
    """

    config: GameConfig
    seed: int
    matrix: np.ndarray = field(repr=False)

    def __post_init__(self) -> None:
        """Freeze a private copy of the matrix."""
        matrix = np.array(self.matrix, dtype=object)
        expected = (self.config.height, self.config.width)
        if matrix.shape != expected:
            raise ValueError(
                f"Matrix shape {matrix.shape} does not match board {expected}"
            )
        matrix.setflags(write=False)
        object.__setattr__(self, "matrix", matrix)

    # ========================================================================
    # Cell Access
    # ========================================================================

    @property
    def width(self) -> int:
        """Number of columns."""
        return self.config.width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self.config.height

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell_type(self, x: int, y: int) -> CellType:
        """
        Get the classification of a cell.

        Raises:
            IndexError: If the position is outside the board.
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside the board")
        return self.matrix[y, x]

    def is_mine(self, x: int, y: int) -> bool:
        """Check if the cell at (x, y) holds a mine."""
        return self.get_cell_type(x, y) is CellType.MINE

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Iterate over all (x, y) positions, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """Get the in-bounds positions of the up to 8 surrounding cells."""
        result = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self.in_bounds(new_x, new_y):
                    result.append((new_x, new_y))
        return result

    def protected_cells(self) -> List[Tuple[int, int]]:
        """Positions of the protected starting rectangle."""
        return [
            (x, y)
            for x in calc_protected_range(self.width)
            for y in calc_protected_range(self.height)
        ]

    # ========================================================================
    # Mine Counting
    # ========================================================================

    def mine_count(self) -> int:
        """Count the mines actually present in the matrix."""
        return sum(1 for x, y in self.cells() if self.is_mine(x, y))

    def count_adjacent_mines(self, x: int, y: int) -> int:
        """Recount the mines around a cell from the matrix."""
        return sum(1 for nx, ny in self.neighbors(x, y) if self.is_mine(nx, ny))

    def is_consistent_at(self, x: int, y: int) -> bool:
        """Check a non-mine cell's stored count against a live recount."""
        cell_type = self.get_cell_type(x, y)
        if cell_type.is_mine:
            return True
        return cell_type.adjacent_mine_count == self.count_adjacent_mines(x, y)

    def is_consistent(self) -> bool:
        """Check every non-mine cell's stored count."""
        return all(self.is_consistent_at(x, y) for x, y in self.cells())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Minefield):
            return NotImplemented
        return (
            self.config == other.config
            and self.seed == other.seed
            and bool(np.array_equal(self.matrix, other.matrix))
        )
