"""
Solvable board generation.

Rejection-samples the board generator against the solver: boards are
generated with consecutive seeds until one can be cleared without
guessing, or the attempt ceiling is reached.
"""
import logging
from dataclasses import dataclass, field
from typing import Optional

from ..game.board import GameConfig, Minefield
from ..game.generator import generate
from .logic_solver import MinefieldSolver, SolverConfig


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MAX_GENERATION_ATTEMPTS = 1000
PROGRESS_LOG_INTERVAL = 100


# ============================================================================
# Generation Configuration
# ============================================================================

@dataclass(frozen=True)
class GenerationConfig:
    """
    Configuration for solvable board generation.

    Attributes:
        max_attempts: Boards to try before giving up.
        solver: Configuration for the solver run on each candidate.
    """

    max_attempts: int = MAX_GENERATION_ATTEMPTS
    solver: SolverConfig = field(default_factory=SolverConfig)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be positive")


@dataclass(frozen=True)
class GenerationOutcome:
    """
    Result of a rejection-sampling run.

    Attributes:
        minefield: Accepted board, or the last candidate if none passed.
        attempts: Number of boards generated.
        solvable: Whether the returned board passed the solver.
    """

    minefield: Minefield
    attempts: int
    solvable: bool

    @property
    def seed(self) -> int:
        """Seed that produced the returned board."""
        return self.minefield.seed


# ============================================================================
# Rejection Sampling
# ============================================================================

def find_solvable(
    config: GameConfig,
    seed: int = 1,
    generation_config: Optional[GenerationConfig] = None,
) -> GenerationOutcome:
    """
    Generate boards from consecutive seeds until one is solvable.

    Args:
        config: Board configuration.
        seed: First seed to try.
        generation_config: Attempt ceiling and solver settings.

    Returns:
        GenerationOutcome; solvable is False when the ceiling was hit,
        in which case the last candidate is returned.

    Raises:
        ConfigurationError: If the configuration cannot be generated.
    """
    generation_config = generation_config or GenerationConfig()

    minefield = None
    for attempt in range(generation_config.max_attempts):
        minefield = generate(config, seed + attempt)
        solver = MinefieldSolver(minefield, generation_config.solver)
        if solver.is_solvable():
            logger.debug(
                "Found solvable %s board after %d attempts (seed %d)",
                config.difficulty.name, attempt + 1, minefield.seed,
            )
            return GenerationOutcome(minefield, attempt + 1, True)

        if (attempt + 1) % PROGRESS_LOG_INTERVAL == 0:
            logger.debug(
                "Tried %d %s boards without a solvable one",
                attempt + 1, config.difficulty.name,
            )

    logger.warning(
        "No solvable %dx%d %s board in %d attempts from seed %d; "
        "returning last candidate",
        config.width, config.height, config.difficulty.name,
        generation_config.max_attempts, seed,
    )
    return GenerationOutcome(minefield, generation_config.max_attempts, False)


def generate_solvable(
    config: GameConfig,
    seed: int = 1,
    generation_config: Optional[GenerationConfig] = None,
) -> Minefield:
    """
    Generate a board that can be cleared without guessing.

    If the attempt ceiling is exhausted, the last generated board is
    returned without a guarantee; check is_solvable on it if needed.

    Args:
        config: Board configuration.
        seed: First seed to try.
        generation_config: Attempt ceiling and solver settings.

    Returns:
        The accepted board, whose seed is the one that produced it.
    """
    return find_solvable(config, seed, generation_config).minefield
