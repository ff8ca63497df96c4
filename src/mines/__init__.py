"""
Mines: solvable board generation.

Generates seed-reproducible boards with a mine-free center and checks
that they can be cleared by logic alone:
- generate: plain board from a configuration and a seed
- generate_solvable: rejection-sampled board that needs no guessing
- is_solvable: deduction solver verdict
- PlayState: revealed/flagged tracker shared with game sessions
"""
from .game import (
    CellState,
    CellType,
    ConfigurationError,
    Difficulty,
    GameConfig,
    Minefield,
    PlayState,
    calc_protected_range,
    format_board,
    generate,
    parse_board,
)
from .solver import (
    GenerationConfig,
    MinefieldSolver,
    SolverConfig,
    find_solvable,
    generate_solvable,
    is_solvable,
    survey_solvability,
)
from .environment import GameState, MinesEnv

__version__ = "1.0.0"

__all__ = [
    "CellState",
    "CellType",
    "ConfigurationError",
    "Difficulty",
    "GameConfig",
    "Minefield",
    "PlayState",
    "calc_protected_range",
    "format_board",
    "generate",
    "parse_board",
    "GenerationConfig",
    "MinefieldSolver",
    "SolverConfig",
    "find_solvable",
    "generate_solvable",
    "is_solvable",
    "survey_solvability",
    "GameState",
    "MinesEnv",
]
