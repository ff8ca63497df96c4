"""
Solvability module.

Provides the deduction solver and the generators built on it:
- MinefieldSolver: constraint propagation from the protected center
- generate_solvable: rejection sampling of solvable boards
- survey_solvability: acceptance-rate statistics
"""
from .logic_solver import (
    MAX_SOLVER_ITERATIONS,
    MinefieldSolver,
    SolveResult,
    SolverConfig,
    SolverRound,
    is_solvable,
)
from .generation import (
    MAX_GENERATION_ATTEMPTS,
    GenerationConfig,
    GenerationOutcome,
    find_solvable,
    generate_solvable,
)
from .survey import SurveyResult, survey_solvability

__all__ = [
    "MAX_SOLVER_ITERATIONS",
    "MinefieldSolver",
    "SolveResult",
    "SolverConfig",
    "SolverRound",
    "is_solvable",
    "MAX_GENERATION_ATTEMPTS",
    "GenerationConfig",
    "GenerationOutcome",
    "find_solvable",
    "generate_solvable",
    "SurveyResult",
    "survey_solvability",
]
