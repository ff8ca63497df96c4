"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Iterable, Tuple

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mines.game import CellType, Difficulty, GameConfig, Minefield, PlayState


# ============================================================================
# Board Helpers
# ============================================================================

def build_minefield(
    width: int,
    height: int,
    mines: Iterable[Tuple[int, int]],
    difficulty: Difficulty = Difficulty.EASY,
    seed: int = 0,
) -> Minefield:
    """Build a consistent board with mines at the given (x, y) positions."""
    mines = set(mines)
    matrix = []
    for y in range(height):
        row = []
        for x in range(width):
            if (x, y) in mines:
                row.append(CellType.MINE)
                continue
            count = sum(
                1
                for dx in (-1, 0, 1)
                for dy in (-1, 0, 1)
                if (dx or dy) and (x + dx, y + dy) in mines
            )
            row.append(CellType.of_mine_count(count))
        matrix.append(row)
    config = GameConfig(width, height, difficulty, mine_count=len(mines))
    return Minefield(config=config, seed=seed, matrix=np.array(matrix, dtype=object))


# ============================================================================
# Text Board Fixtures
# ============================================================================

# Two mines sit inside the protected center and cell (2, 2) stores 2
# while three mines surround it.
AMBIGUOUS_EDGE_BOARD = """
    MEDIUM|6|6|2
    ------
    OO1*1O
    OO1111
    112*1O
    1**21O
    12211O
    OOOOOO
"""

CORNER_MINE_BOARD = """
    EASY|6|6|1
    ------
    *1OOOO
    11OOOO
    OOOOOO
    OOOOOO
    OOOOOO
    OOOOOO
"""


@pytest.fixture
def ambiguous_edge_text() -> str:
    """Regression fixture with an inconsistent numbered cell."""
    return AMBIGUOUS_EDGE_BOARD


@pytest.fixture
def corner_mine_text() -> str:
    """6x6 board with a single mine in the top-left corner."""
    return CORNER_MINE_BOARD


# ============================================================================
# Minefield Fixtures
# ============================================================================

@pytest.fixture
def empty_minefield() -> Minefield:
    """6x6 board without mines."""
    return build_minefield(6, 6, [])


@pytest.fixture
def corner_minefield() -> Minefield:
    """6x6 board with one mine at (0, 0)."""
    return build_minefield(6, 6, [(0, 0)])


@pytest.fixture
def ringed_minefield() -> Minefield:
    """6x6 board whose protected center is walled in by 12 mines."""
    ring = [
        (x, y)
        for x in range(1, 5)
        for y in range(1, 5)
        if not (2 <= x <= 3 and 2 <= y <= 3)
    ]
    return build_minefield(6, 6, ring, Difficulty.HARD)


@pytest.fixture
def pocket_minefield() -> Minefield:
    """8x8 board where safe cell (1, 0) is enclosed by mines."""
    return build_minefield(8, 8, [(0, 0), (2, 0), (0, 1), (1, 1), (2, 1)])


@pytest.fixture
def corner_play_state(corner_minefield: Minefield) -> PlayState:
    """Fresh play state over the corner-mine board."""
    return PlayState(corner_minefield)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def easy_config() -> GameConfig:
    """8x8 easy configuration (6 mines)."""
    return GameConfig(8, 8, Difficulty.EASY)


@pytest.fixture
def medium_config() -> GameConfig:
    """10x10 medium configuration (15 mines)."""
    return GameConfig(10, 10, Difficulty.MEDIUM)


@pytest.fixture
def hard_config() -> GameConfig:
    """10x10 hard configuration (20 mines)."""
    return GameConfig(10, 10, Difficulty.HARD)


@pytest.fixture
def make_minefield():
    """Factory building consistent boards from mine positions."""
    return build_minefield
