"""
Mines game module.

Provides the board model: cell classification, configuration,
generation, play state and the text board format.
"""
from .cell import CellType
from .board import (
    ConfigurationError,
    Difficulty,
    GameConfig,
    Minefield,
    calc_protected_range,
    EASY,
    MEDIUM,
    HARD,
)
from .generator import generate
from .play_state import CellState, PlayState
from .notation import BoardFormatError, format_board, parse_board

__all__ = [
    "CellType",
    "ConfigurationError",
    "Difficulty",
    "GameConfig",
    "Minefield",
    "calc_protected_range",
    "EASY",
    "MEDIUM",
    "HARD",
    "generate",
    "CellState",
    "PlayState",
    "BoardFormatError",
    "format_board",
    "parse_board",
]
