"""
Solvability survey.

Measures how many plain generated boards the solver accepts for a
configuration, which is the acceptance rate of solvable generation.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from ..game.board import GameConfig
from ..game.generator import generate
from .logic_solver import MinefieldSolver, SolverConfig


# ============================================================================
# Survey Statistics
# ============================================================================

@dataclass
class SurveyResult:
    """Accumulated survey statistics."""

    config: GameConfig
    total: int = 0
    solvable_seeds: List[int] = field(default_factory=list)
    rounds: List[int] = field(default_factory=list)

    @property
    def solvable(self) -> int:
        """Number of solvable boards."""
        return len(self.solvable_seeds)

    @property
    def rate(self) -> float:
        """Fraction of surveyed boards that were solvable."""
        if not self.total:
            return 0.0
        return self.solvable / self.total

    @property
    def avg_rounds(self) -> float:
        """Average number of deduction rounds per board."""
        if not self.rounds:
            return 0.0
        return sum(self.rounds) / len(self.rounds)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "width": self.config.width,
            "height": self.config.height,
            "difficulty": self.config.difficulty.name,
            "mine_count": self.config.mine_count,
            "total": self.total,
            "solvable": self.solvable,
            "rate": self.rate,
            "avg_rounds": self.avg_rounds,
            "solvable_seeds": list(self.solvable_seeds),
        }


# ============================================================================
# Survey
# ============================================================================

def survey_solvability(
    config: GameConfig,
    seeds: Iterable[int],
    solver_config: Optional[SolverConfig] = None,
) -> SurveyResult:
    """
    Generate one board per seed and record which are solvable.

    Args:
        config: Board configuration.
        seeds: Seeds to generate.
        solver_config: Solver settings.

    Returns:
        SurveyResult with per-seed verdicts.
    """
    result = SurveyResult(config=config)
    for seed in seeds:
        outcome = MinefieldSolver(generate(config, seed), solver_config).solve()
        result.total += 1
        result.rounds.append(outcome.rounds)
        if outcome.solvable:
            result.solvable_seeds.append(seed)
    return result
