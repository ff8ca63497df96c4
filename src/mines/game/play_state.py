"""
Play-state module.

Tracks which cells of a board have been revealed or flagged. The board
itself never changes; this is the knowledge that evolves during play,
shared by the solver and by live game sessions.
"""
from enum import Enum, auto

import numpy as np

from .board import Minefield


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


HIDDEN_OBSERVATION = -1
FLAGGED_OBSERVATION = -2
MINE_OBSERVATION = 9


# ============================================================================
# Play State
# ============================================================================

class PlayState:
    """
    Revealed and flagged grids for one board.

    A cell is never revealed and flagged at the same time: revealing a
    flagged cell and flagging a revealed cell are both refused.
    """

    def __init__(self, minefield: Minefield) -> None:
        """
        Initialize an all-hidden play state.

        Args:
            minefield: Board being played.
        """
        self.minefield = minefield
        shape = (minefield.height, minefield.width)
        self._revealed = np.zeros(shape, dtype=bool)
        self._flagged = np.zeros(shape, dtype=bool)

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.minefield.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside the board")

    # ========================================================================
    # Mutations
    # ========================================================================

    def reveal(self, x: int, y: int) -> bool:
        """
        Reveal a hidden cell.

        Returns:
            True if the cell was revealed, False if it was already
            revealed or is flagged.
        """
        self._check_bounds(x, y)
        if self._revealed[y, x] or self._flagged[y, x]:
            return False
        self._revealed[y, x] = True
        return True

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle the flag on a hidden cell.

        Returns:
            True if the flag was toggled, False if the cell is revealed.
        """
        self._check_bounds(x, y)
        if self._revealed[y, x]:
            return False
        self._flagged[y, x] = not self._flagged[y, x]
        return True

    def reset(self) -> None:
        """Hide every cell again."""
        self._revealed[:] = False
        self._flagged[:] = False

    # ========================================================================
    # Queries
    # ========================================================================

    def is_revealed(self, x: int, y: int) -> bool:
        """Check if a cell is revealed."""
        self._check_bounds(x, y)
        return bool(self._revealed[y, x])

    def is_flagged(self, x: int, y: int) -> bool:
        """Check if a cell is flagged."""
        self._check_bounds(x, y)
        return bool(self._flagged[y, x])

    def is_hidden(self, x: int, y: int) -> bool:
        """Check if a cell is neither revealed nor flagged."""
        return self.state(x, y) is CellState.HIDDEN

    def state(self, x: int, y: int) -> CellState:
        """Get the visual state of a cell."""
        if self.is_revealed(x, y):
            return CellState.REVEALED
        if self.is_flagged(x, y):
            return CellState.FLAGGED
        return CellState.HIDDEN

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells."""
        return int(self._revealed.sum())

    @property
    def flagged_count(self) -> int:
        """Number of flagged cells."""
        return int(self._flagged.sum())

    def is_all_revealed(self) -> bool:
        """Check if every non-mine cell is revealed."""
        for x, y in self.minefield.cells():
            if not self.minefield.is_mine(x, y) and not self._revealed[y, x]:
                return False
        return True

    def observation(self) -> np.ndarray:
        """
        Get the play state as a numpy array.

        Returns:
            2D int8 array indexed [y, x] where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.full(
            (self.minefield.height, self.minefield.width),
            HIDDEN_OBSERVATION,
            dtype=np.int8,
        )
        for x, y in self.minefield.cells():
            if self._flagged[y, x]:
                obs[y, x] = FLAGGED_OBSERVATION
            elif self._revealed[y, x]:
                cell_type = self.minefield.get_cell_type(x, y)
                if cell_type.is_mine:
                    obs[y, x] = MINE_OBSERVATION
                else:
                    obs[y, x] = cell_type.adjacent_mine_count
        return obs
