"""
Gymnasium environment wrapper for Minesweeper.

Exposes the board through the standard reset/step interface so games
can be scripted or played by agents.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Action, Board, BoardConfig
from .cell import FLAGGED_OBSERVATION, MINE_OBSERVATION
from .render import render_board


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 2 * rows * cols.
        Action i < rows * cols reveals cell (i // cols, i % cols);
        larger actions flag cell i - rows * cols.

    Rewards:
        - +1 for revealing a safe cell
        - 0 for toggling a flag
        - +10 for winning the game (all mines flagged)
        - -10 for hitting a mine
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 10x10 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self._num_cells = self.config.total_cells

        self.observation_space = spaces.Box(
            low=FLAGGED_OBSERVATION,
            high=MINE_OBSERVATION,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self.board = self._new_board()
        self._steps = 0

    def _new_board(self) -> Board:
        """Build a board whose mines follow the environment's seeded RNG."""
        seed = int(self.np_random.integers(0, 2**31 - 1))
        return Board(self.config, rng=random.Random(seed))

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board = self._new_board()
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Flat action index (see class docstring).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        kind, row, col = self.decode_action(action)
        self._steps += 1

        reward = self._calculate_reward(kind, row, col)

        observation = self.board.get_observation()
        terminated = self.board.game_over
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def decode_action(self, action: int) -> Tuple[Action, int, int]:
        """Convert flat action index to (action kind, row, col)."""
        action = int(action)
        kind = Action.REVEAL
        if action >= self._num_cells:
            kind = Action.FLAG
            action -= self._num_cells
        return kind, action // self.config.cols, action % self.config.cols

    def encode_action(self, kind: Action, row: int, col: int) -> int:
        """Convert (action kind, row, col) to a flat action index."""
        index = row * self.config.cols + col
        if kind == Action.FLAG:
            index += self._num_cells
        return index

    def _calculate_reward(self, kind: Action, row: int, col: int) -> float:
        """
        Apply the action and score its outcome.

        Args:
            kind: Reveal or flag.
            row: Row index.
            col: Column index.

        Returns:
            Reward value.
        """
        cell = self.board.get_cell(row, col)

        if self.board.game_over or cell is None or cell.is_revealed:
            return -0.1

        self.board.apply(kind, row, col)

        if self.board.is_won:
            return 10.0
        if self.board.is_lost:
            return -10.0
        if kind == Action.FLAG:
            return 0.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.revealed_count,
            "flags": self.board.flags_placed,
            "game_state": self.board.game_state.name,
            "elapsed": self.board.elapsed_seconds,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.board, reveal_mines=self.board.is_lost)
        if self.render_mode == "human":
            print(render_board(self.board, reveal_mines=self.board.is_lost))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that change the board.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.board.game_over:
            return mask
        for row, col in self.board.get_valid_actions():
            mask[self.encode_action(Action.REVEAL, row, col)] = True
            mask[self.encode_action(Action.FLAG, row, col)] = True
        return mask
