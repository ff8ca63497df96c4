"""
Cell module for the mines board.

Classifies each cell of a board as empty, a mine, or the number of
mines in its neighborhood (1-8).
"""
from enum import Enum


# ============================================================================
# Constants
# ============================================================================

MINE_SYMBOL = "*"
EMPTY_SYMBOL = "O"


# ============================================================================
# Cell Classification
# ============================================================================

class CellType(Enum):
    """
    Classification of a single board cell.

    The value of each member is its adjacent mine count; MINE uses -1
    so it never collides with a count.
    """

    EMPTY = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    MINE = -1

    @classmethod
    def of_mine_count(cls, count: int) -> "CellType":
        """
        Map an adjacent mine count to its classification.

        Args:
            count: Number of mines among the neighbors (0-8).

        Returns:
            EMPTY for 0, otherwise the numbered variant.

        Raises:
            ValueError: If count is outside 0-8.
        """
        if not 0 <= count <= 8:
            raise ValueError(f"Adjacent mine count out of range: {count}")
        return cls(count)

    @classmethod
    def from_symbol(cls, symbol: str) -> "CellType":
        """Parse a text-board character into a classification."""
        if symbol == MINE_SYMBOL:
            return cls.MINE
        if symbol == EMPTY_SYMBOL:
            return cls.EMPTY
        if len(symbol) == 1 and symbol in "12345678":
            return cls(int(symbol))
        raise ValueError(f"Unknown cell symbol: {symbol!r}")

    @property
    def adjacent_mine_count(self) -> int:
        """Adjacent mine count (0 for EMPTY and MINE)."""
        if self is CellType.MINE:
            return 0
        return self.value

    @property
    def is_mine(self) -> bool:
        """Check if this cell holds a mine."""
        return self is CellType.MINE

    @property
    def symbol(self) -> str:
        """Character used for this cell in the text board format."""
        if self is CellType.MINE:
            return MINE_SYMBOL
        if self is CellType.EMPTY:
            return EMPTY_SYMBOL
        return str(self.value)
