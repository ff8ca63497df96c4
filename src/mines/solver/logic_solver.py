"""
Solvability solver for generated boards.

Simulates a perfect logical player who starts from the protected center
and only ever acts on certain deductions. A board is solvable when this
player reveals every non-mine cell without guessing.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Set, Tuple

from ..game.board import Minefield
from ..game.cell import CellType
from ..game.play_state import PlayState


logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

# Termination guard, not part of the deduction rules.
MAX_SOLVER_ITERATIONS = 100


# ============================================================================
# Solver Configuration and Results
# ============================================================================

@dataclass(frozen=True)
class SolverConfig:
    """
    Configuration for the solver.

    Attributes:
        max_iterations: Maximum number of deduction rounds.
    """

    max_iterations: int = MAX_SOLVER_ITERATIONS

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be positive")


@dataclass(frozen=True)
class SolverRound:
    """
    Summary of one deduction round, passed to the round callback.

    play_state is the solver's live state after the round; callbacks
    must only read it.
    """

    number: int
    revealed: int
    flagged: int
    total_revealed: int
    total_flagged: int
    play_state: PlayState = field(repr=False, compare=False)

    @property
    def made_progress(self) -> bool:
        """Check if the round revealed or flagged anything."""
        return self.revealed > 0 or self.flagged > 0


@dataclass
class SolveResult:
    """
    Outcome of a solver run.

    Attributes:
        solvable: Whether every non-mine cell was revealed.
        rounds: Number of deduction rounds run.
        consistent: False if the board broke the adjacency invariant.
        play_state: Final revealed/flagged state of the run.
    """

    solvable: bool
    rounds: int
    consistent: bool
    play_state: PlayState

    @property
    def revealed_count(self) -> int:
        """Cells revealed by the end of the run."""
        return self.play_state.revealed_count

    @property
    def flagged_count(self) -> int:
        """Cells flagged by the end of the run."""
        return self.play_state.flagged_count


RoundCallback = Callable[[SolverRound], None]


# ============================================================================
# Minefield Solver
# ============================================================================

class MinefieldSolver:
    """
    Constraint-propagation solver.

    Rules applied to every revealed cell whose constraint is not yet
    exhausted:
        1. An empty cell makes all hidden neighbors safe.
        2. A number N with F flagged neighbors and U unknown neighbors:
           - if N - F == U, all unknown neighbors are mines
           - if F == N, all unknown neighbors are safe

    Deductions are collected during a round and applied at its end.
    The run stops when a round changes nothing or the iteration ceiling
    is reached. The minefield is never modified; every run uses its own
    PlayState, so one solver may be run repeatedly.
    """

    def __init__(
        self,
        minefield: Minefield,
        config: Optional[SolverConfig] = None,
        on_round: Optional[RoundCallback] = None,
    ) -> None:
        """
        Initialize the solver.

        Args:
            minefield: Board to analyze.
            config: Solver configuration (default: 100 rounds).
            on_round: Optional callback invoked after each round.
        """
        self.minefield = minefield
        self.config = config or SolverConfig()
        self.on_round = on_round

    def is_solvable(self) -> bool:
        """Check if the board can be cleared without guessing."""
        return self.solve().solvable

    def solve(self) -> SolveResult:
        """
        Run the deduction loop from the protected center.

        Returns:
            SolveResult with the verdict and the final play state.
        """
        state = PlayState(self.minefield)
        safe_cells: Set[Position] = set()
        mine_cells: Set[Position] = set()
        processed: Set[Position] = set()

        self._reveal_protected_center(state)

        rounds = 0
        consistent = True

        while rounds < self.config.max_iterations:
            rounds += 1
            candidates = self._find_cells_to_process(state, processed)

            if not self._check_consistency(candidates):
                consistent = False
                break

            for x, y in candidates:
                self._process_cell(x, y, state, safe_cells, mine_cells, processed)

            revealed = self._reveal_safe_cells(state, safe_cells)
            flagged = self._flag_mine_cells(state, mine_cells)
            self._report_round(rounds, revealed, flagged, state)

            if not revealed and not flagged:
                break
        else:
            logger.debug(
                "Solver stopped at %d rounds on board seed %d",
                rounds, self.minefield.seed,
            )

        solvable = consistent and state.is_all_revealed()
        return SolveResult(
            solvable=solvable,
            rounds=rounds,
            consistent=consistent,
            play_state=state,
        )

    # ========================================================================
    # Round Steps
    # ========================================================================

    def _reveal_protected_center(self, state: PlayState) -> None:
        """Reveal every cell of the protected rectangle."""
        for x, y in self.minefield.protected_cells():
            state.reveal(x, y)

    def _find_cells_to_process(
        self, state: PlayState, processed: Set[Position]
    ) -> List[Position]:
        """Find revealed cells whose constraint is not yet exhausted."""
        return [
            (x, y)
            for x, y in self.minefield.cells()
            if state.is_revealed(x, y) and (x, y) not in processed
        ]

    def _check_consistency(self, cells: List[Position]) -> bool:
        """
        Recount the mines around newly considered cells.

        A revealed mine or a stored count that disagrees with the board
        means the board was built wrong.
        """
        for x, y in cells:
            cell_type = self.minefield.get_cell_type(x, y)
            if cell_type.is_mine:
                logger.warning(
                    "Generator defect on board seed %d: revealed cell "
                    "(%d, %d) is a mine",
                    self.minefield.seed, x, y,
                )
                return False
            if not self.minefield.is_consistent_at(x, y):
                logger.warning(
                    "Generator defect on board seed %d: cell (%d, %d) stores "
                    "%d adjacent mines but has %d",
                    self.minefield.seed, x, y,
                    cell_type.adjacent_mine_count,
                    self.minefield.count_adjacent_mines(x, y),
                )
                return False
        return True

    def _process_cell(
        self,
        x: int,
        y: int,
        state: PlayState,
        safe_cells: Set[Position],
        mine_cells: Set[Position],
        processed: Set[Position],
    ) -> None:
        """Apply the deduction rules to one revealed cell."""
        cell_type = self.minefield.get_cell_type(x, y)
        neighbors = self.minefield.neighbors(x, y)
        unknown = [
            (nx, ny) for nx, ny in neighbors
            if not state.is_revealed(nx, ny) and not state.is_flagged(nx, ny)
        ]

        if cell_type is CellType.EMPTY:
            safe_cells.update(unknown)
            processed.add((x, y))
            return

        mine_count = cell_type.adjacent_mine_count
        flagged = sum(1 for nx, ny in neighbors if state.is_flagged(nx, ny))

        if unknown and mine_count - flagged == len(unknown):
            mine_cells.update(unknown)
        elif unknown and flagged == mine_count:
            safe_cells.update(unknown)

        # Exhausted once no neighbor is left undecided
        undecided = [
            cell for cell in unknown
            if cell not in safe_cells and cell not in mine_cells
        ]
        if not undecided:
            processed.add((x, y))

    def _reveal_safe_cells(
        self, state: PlayState, safe_cells: Set[Position]
    ) -> int:
        """Reveal all cells deduced safe and clear the set."""
        revealed = 0
        for x, y in sorted(safe_cells):
            if state.reveal(x, y):
                revealed += 1
        safe_cells.clear()
        return revealed

    def _flag_mine_cells(
        self, state: PlayState, mine_cells: Set[Position]
    ) -> int:
        """Flag all cells deduced to be mines and clear the set."""
        flagged = 0
        for x, y in sorted(mine_cells):
            if not state.is_flagged(x, y) and state.toggle_flag(x, y):
                flagged += 1
        mine_cells.clear()
        return flagged

    def _report_round(
        self, number: int, revealed: int, flagged: int, state: PlayState
    ) -> None:
        """Log the round and hand it to the callback."""
        summary = SolverRound(
            number=number,
            revealed=revealed,
            flagged=flagged,
            total_revealed=state.revealed_count,
            total_flagged=state.flagged_count,
            play_state=state,
        )
        logger.debug(
            "Round %d: revealed %d, flagged %d (totals %d/%d)",
            number, revealed, flagged,
            summary.total_revealed, summary.total_flagged,
        )
        if self.on_round:
            self.on_round(summary)


# ============================================================================
# Convenience Function
# ============================================================================

def is_solvable(
    minefield: Minefield,
    config: Optional[SolverConfig] = None,
    on_round: Optional[RoundCallback] = None,
) -> bool:
    """
    Check if a board can be cleared by pure deduction.

    Args:
        minefield: Board to analyze; not modified.
        config: Solver configuration.
        on_round: Optional callback invoked after each round.

    Returns:
        True if every non-mine cell gets revealed without guessing.
    """
    return MinefieldSolver(minefield, config, on_round).is_solvable()
