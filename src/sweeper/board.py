"""
Board module for the console Minesweeper engine.

Implements the game board with mine placement, adjacency counting,
flood-fill revealing, flagging and win/lose detection.
"""
import logging
import random
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState
from .grid import Coordinate, Grid


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class Action(Enum):
    """Player actions, keyed by the console letter."""

    REVEAL = "L"
    FLAG = "R"

    @classmethod
    def from_key(cls, key: str) -> "Action":
        """Parse a console key ("L" or "R", any case)."""
        try:
            return cls(key.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown action {key!r}, expected L or R") from None


class ConfigurationError(ValueError):
    """Raised when board parameters cannot describe a playable board."""


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 10
    cols: int = 10
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ConfigurationError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ConfigurationError("Number of mines cannot be negative")
        max_mines = self.total_cells - 1
        if self.num_mines > max_mines:
            raise ConfigurationError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols


# Preset difficulty levels
EASY = BoardConfig(10, 10, 10)
INTERMEDIATE = BoardConfig(20, 20, 40)
ADVANCED = BoardConfig(30, 30, 99)

DIFFICULTIES: Dict[int, BoardConfig] = {
    1: EASY,
    2: INTERMEDIATE,
    3: ADVANCED,
}


# ============================================================================
# Mine Placement
# ============================================================================

def place_mines(
    rows: int, cols: int, num_mines: int, rng: random.Random
) -> List[Coordinate]:
    """
    Choose distinct mine positions by rejection sampling.

    Draws uniformly random coordinates and keeps the ones not already
    chosen until ``num_mines`` are collected.

    Args:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: How many mines to place.
        rng: Random source providing ``randrange``.

    Returns:
        Mine positions in placement order.
    """
    if num_mines < 0 or num_mines >= rows * cols:
        raise ConfigurationError(
            f"Cannot place {num_mines} mines on a {rows}x{cols} board"
        )

    chosen = set()
    mines = []
    draws = 0
    while len(mines) < num_mines:
        position = (rng.randrange(rows), rng.randrange(cols))
        draws += 1
        if position not in chosen:
            chosen.add(position)
            mines.append(position)

    logger.debug("Placed %d mines in %d draws", num_mines, draws)
    return mines


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Mines are placed and numbers computed at construction. After that the
    board only changes through ``reveal``, ``toggle_flag`` and ``apply``.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config or BoardConfig()
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock
        self._grid = Grid(self.config.rows, self.config.cols)
        self._mines: Tuple[Coordinate, ...] = ()
        self._game_state = GameState.PLAYING
        self._start_time = clock()
        self._end_time: Optional[float] = None

        self._place_mines()
        self._calculate_numbers()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _place_mines(self) -> None:
        """Mark randomly chosen cells as mines."""
        self._mines = tuple(
            place_mines(
                self.config.rows,
                self.config.cols,
                self.config.num_mines,
                self._rng,
            )
        )
        for position in self._mines:
            self._grid[position].is_mine = True

    def _calculate_numbers(self) -> None:
        """Add one to every non-mine neighbor of every mine."""
        for row, col in self._mines:
            for position in self._grid.neighbors(row, col):
                cell = self._grid[position]
                if not cell.is_mine:
                    cell.adjacent_mines += 1

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> None:
        """
        Reveal a cell, flooding outward from cells with no adjacent mines.

        Whenever a revealed cell has a count of zero, every cell of the 3x3
        block around it (itself included) is queued; the already-revealed
        check stops the walk. Mine status is not checked here; callers
        use ``is_mine`` first.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.
        """
        stack = [(row, col)]
        revealed = 0
        while stack:
            current_row, current_col = stack.pop()
            cell = self._grid.get(current_row, current_col)
            if cell is None or not cell.reveal():
                continue
            revealed += 1
            if not cell.is_mine and cell.adjacent_mines == 0:
                stack.extend(self._grid.block(current_row, current_col))

        if revealed > 1:
            logger.debug("Flood fill from (%d, %d) revealed %d cells", row, col, revealed)

    def toggle_flag(self, row: int, col: int) -> None:
        """
        Toggle flag on a cell.

        Out of bounds and revealed cells are left alone.

        Args:
            row: Row index.
            col: Column index.
        """
        cell = self._grid.get(row, col)
        if cell is not None:
            cell.toggle_flag()

    def is_mine(self, row: int, col: int) -> bool:
        """Check whether an in-bounds cell holds a mine."""
        cell = self._grid.get(row, col)
        return cell is not None and cell.is_mine

    def is_game_won(self) -> bool:
        """
        Check whether every mine is flagged.

        Unrevealed safe cells and flags on safe cells do not matter.
        """
        return all(self._grid[position].is_flagged for position in self._mines)

    # ========================================================================
    # Turn Handling (High-level)
    # ========================================================================

    def apply(self, action: Action, row: int, col: int) -> GameState:
        """
        Play one turn and update the game state.

        Revealing a mine loses. Revealing a safe cell or toggling a flag
        wins once every mine is flagged. Nothing happens after the game
        has ended.

        Args:
            action: Reveal or flag.
            row: Row index.
            col: Column index.

        Returns:
            The game state after the turn.
        """
        if self.game_over:
            return self._game_state

        if action == Action.REVEAL:
            if self.is_mine(row, col):
                self.reveal(row, col)
                self._finish(GameState.LOST)
                return self._game_state
            self.reveal(row, col)
        else:
            self.toggle_flag(row, col)

        if self.is_game_won():
            self._finish(GameState.WON)
        return self._game_state

    def _finish(self, state: GameState) -> None:
        """Move to a terminal state and stop the clock."""
        self._game_state = state
        self._end_time = self._clock()
        logger.info(
            "Game %s after %d seconds", state.name.lower(), self.elapsed_seconds
        )

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    @property
    def mines(self) -> Tuple[Coordinate, ...]:
        """Mine positions in placement order."""
        return self._mines

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def game_over(self) -> bool:
        return self._game_state != GameState.PLAYING

    @property
    def elapsed_seconds(self) -> int:
        """Whole seconds since the board was built, frozen once the game ends."""
        now = self._end_time if self._end_time is not None else self._clock()
        return max(0, int(now - self._start_time))

    @property
    def flags_placed(self) -> int:
        return sum(1 for cell in self._grid if cell.is_flagged)

    @property
    def revealed_count(self) -> int:
        return sum(1 for cell in self._grid if cell.is_revealed)

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        return self._grid.get(row, col)

    def get_observation(self) -> np.ndarray:
        """
        Get the visible board as a numpy array.

        Returns:
            2D int8 array of shape (rows, cols) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        values = [cell.to_observation() for cell in self._grid]
        return np.array(values, dtype=np.int8).reshape(self.rows, self.cols)

    def get_valid_actions(self) -> List[Coordinate]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions that are hidden or flagged.
        """
        return [
            position for position in self._grid.positions()
            if self._grid[position].state != CellState.REVEALED
        ]
