"""
Board generator.

Places mines pseudo-randomly from an integer seed, keeping the protected
center free, then classifies every other cell by its neighborhood.
"""
import random
from typing import List

import numpy as np

from .board import ConfigurationError, GameConfig, Minefield, calc_protected_range
from .cell import CellType


# ============================================================================
# Constants
# ============================================================================

# Upper bound on random draws per placed mine before giving up.
MAX_PLACEMENT_DRAWS = 10_000


# ============================================================================
# Generation
# ============================================================================

def generate(config: GameConfig, seed: int) -> Minefield:
    """
    Generate a board from a configuration and a seed.

    The same (config, seed) pair always yields the same board.

    Args:
        config: Board configuration.
        seed: Seed for mine placement.

    Returns:
        Minefield with exactly config.mine_count mines.

    Raises:
        ConfigurationError: If the mines cannot be placed.
    """
    if config.mine_count > config.max_mines:
        raise ConfigurationError(
            f"Cannot place {config.mine_count} mines outside the protected region"
        )

    matrix = _create_empty_matrix(config.width, config.height)
    _place_mines(matrix, config, seed)
    _place_counts(matrix, config)

    return Minefield(config=config, seed=seed, matrix=np.array(matrix, dtype=object))


def _create_empty_matrix(width: int, height: int) -> List[List[CellType]]:
    """Create a height x width grid of EMPTY cells."""
    return [[CellType.EMPTY for _ in range(width)] for _ in range(height)]


def _place_mines(
    matrix: List[List[CellType]], config: GameConfig, seed: int
) -> None:
    """
    Place config.mine_count mines outside the protected rectangle.

    Args:
        matrix: Grid to fill, indexed [y][x].
        config: Board configuration.
        seed: Seed for the random generator.
    """
    rng = random.Random(seed)
    protected_x = calc_protected_range(config.width)
    protected_y = calc_protected_range(config.height)

    max_draws = MAX_PLACEMENT_DRAWS * max(config.mine_count, 1)
    placed = 0
    draws = 0

    while placed < config.mine_count:
        if draws >= max_draws:
            raise ConfigurationError(
                f"Placed only {placed} of {config.mine_count} mines "
                f"after {draws} draws"
            )
        draws += 1

        x = rng.randrange(config.width)
        y = rng.randrange(config.height)

        # Keep the middle free as the starting point
        if x in protected_x and y in protected_y:
            continue

        # Drawing the same cell twice must not lower the mine count
        if matrix[y][x] is CellType.MINE:
            continue

        matrix[y][x] = CellType.MINE
        placed += 1


def _place_counts(matrix: List[List[CellType]], config: GameConfig) -> None:
    """Classify every non-mine cell by its adjacent mine count."""
    for y in range(config.height):
        for x in range(config.width):
            if matrix[y][x] is CellType.MINE:
                continue
            count = _count_adjacent_mines(matrix, x, y, config)
            matrix[y][x] = CellType.of_mine_count(count)


def _count_adjacent_mines(
    matrix: List[List[CellType]], x: int, y: int, config: GameConfig
) -> int:
    """Count mines around (x, y); out-of-bounds cells count as zero."""
    count = 0
    for delta_y in (-1, 0, 1):
        for delta_x in (-1, 0, 1):
            if delta_x == 0 and delta_y == 0:
                continue
            new_x = x + delta_x
            new_y = y + delta_y
            if 0 <= new_x < config.width and 0 <= new_y < config.height:
                if matrix[new_y][new_x] is CellType.MINE:
                    count += 1
    return count
