"""
Gymnasium environment for live game sessions.

Drives one session over an immutable Minefield and its PlayState using
only the public reveal/flag primitives, the same way a UI would.
"""
from collections import deque
from enum import Enum, auto
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .game.board import GameConfig, Minefield
from .game.cell import CellType
from .game.generator import generate
from .game.play_state import (
    FLAGGED_OBSERVATION,
    HIDDEN_OBSERVATION,
    MINE_OBSERVATION,
    PlayState,
)
from .solver.generation import GenerationConfig, generate_solvable


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


SEED_UPPER_BOUND = 2**31 - 1


# ============================================================================
# Mines Environment
# ============================================================================

class MinesEnv(gym.Env):
    """
    Gymnasium environment for a mines session.

    Observation:
        2D array indexed [y, x] where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i reveals the cell at (i % width, i // width).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)

    Every episode starts with the protected center revealed.
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        solvable: bool = True,
        generation_config: Optional[GenerationConfig] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 10x10 MEDIUM).
            render_mode: How to render the environment.
            solvable: Whether to generate boards that need no guessing.
            generation_config: Settings for solvable generation.
        """
        super().__init__()

        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.solvable = solvable
        self.generation_config = generation_config

        self.observation_space = spaces.Box(
            low=FLAGGED_OBSERVATION,
            high=MINE_OBSERVATION,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.height * self.config.width)

        self.minefield: Optional[Minefield] = None
        self.play_state: Optional[PlayState] = None
        self._game_state = GameState.PLAYING
        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new session on a fresh board.

        Args:
            seed: Board seed; drawn from the environment's RNG if omitted.
            options: Optional {"minefield": Minefield} to play a given board.

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)

        if options and options.get("minefield") is not None:
            self.minefield = options["minefield"]
        else:
            board_seed = seed
            if board_seed is None:
                board_seed = int(self.np_random.integers(0, SEED_UPPER_BOUND))
            self.minefield = self._create_minefield(board_seed)

        self.play_state = PlayState(self.minefield)
        self._game_state = GameState.PLAYING
        self._steps = 0

        for x, y in self.minefield.protected_cells():
            self._reveal_cascade(x, y)
        self._check_win_condition()

        return self.play_state.observation(), self._get_info()

    def _create_minefield(self, seed: int) -> Minefield:
        if self.solvable:
            return generate_solvable(self.config, seed, self.generation_config)
        return generate(self.config, seed)

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal one cell.

        Args:
            action: Cell index to reveal (y * width + x).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if self.play_state is None:
            raise RuntimeError("Call reset() before step()")

        x, y = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(x, y)
        observation = self.play_state.observation()
        terminated = self._game_state != GameState.PLAYING

        return observation, reward, terminated, False, self._get_info()

    def flag(self, x: int, y: int) -> bool:
        """Toggle a flag; False if the game is over or the cell is revealed."""
        if self.play_state is None or self._game_state != GameState.PLAYING:
            return False
        return self.play_state.toggle_flag(x, y)

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (x, y) position."""
        return action % self.config.width, action // self.config.width

    def _calculate_reward(self, x: int, y: int) -> float:
        """Reveal a cell and score the result."""
        if self._game_state != GameState.PLAYING:
            return -0.1
        if not self.play_state.is_hidden(x, y):
            return -0.1

        if self.minefield.is_mine(x, y):
            self.play_state.reveal(x, y)
            self._game_state = GameState.LOST
            return -10.0

        self._reveal_cascade(x, y)
        self._check_win_condition()

        if self._game_state == GameState.WON:
            return 10.0
        return 1.0

    def _reveal_cascade(self, x: int, y: int) -> int:
        """Reveal a safe cell, flooding outward through empty cells."""
        revealed = 0
        queue = deque([(x, y)])
        while queue:
            cx, cy = queue.popleft()
            if not self.play_state.reveal(cx, cy):
                continue
            revealed += 1
            if self.minefield.get_cell_type(cx, cy) is CellType.EMPTY:
                for nx, ny in self.minefield.neighbors(cx, cy):
                    if self.play_state.is_hidden(nx, ny):
                        queue.append((nx, ny))
        return revealed

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are revealed."""
        if self.play_state.is_all_revealed():
            self._game_state = GameState.WON

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "seed": self.minefield.seed,
            "revealed": self.play_state.revealed_count,
            "flagged": self.play_state.flagged_count,
            "total_safe": self.minefield.width * self.minefield.height
            - self.minefield.mine_count(),
            "game_state": self._game_state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as ASCII string."""
        return render_observation(self.play_state.observation())

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden cell.
        """
        return (self.play_state.observation() == HIDDEN_OBSERVATION).flatten()


def render_observation(observation: np.ndarray) -> str:
    """Render an observation grid as rows of space-separated symbols."""
    lines = []
    for row in observation:
        row_str = ""
        for val in row:
            if val == HIDDEN_OBSERVATION:
                row_str += "."
            elif val == FLAGGED_OBSERVATION:
                row_str += "F"
            elif val == MINE_OBSERVATION:
                row_str += "*"
            elif val == 0:
                row_str += " "
            else:
                row_str += str(val)
            row_str += " "
        lines.append(row_str)
    return "\n".join(lines)
