"""
Cell module for the console Minesweeper engine.

A cell is one grid position: what it holds (mine or adjacency count) and
what the player has done to it (hidden, revealed or flagged).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """What the player has done to a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


class CellContent(Enum):
    """What a cell holds underneath."""

    MINE = auto()
    EMPTY = auto()
    NUMBER = auto()


MINE_OBSERVATION = 9
HIDDEN_OBSERVATION = -1
FLAGGED_OBSERVATION = -2


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current state (hidden, revealed, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Flagged cells are revealed too; only a cell that is already
        revealed is left alone.

        Returns:
            True if the cell changed state, False if already revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def content(self) -> CellContent:
        """Classify what the cell holds."""
        if self.is_mine:
            return CellContent.MINE
        if self.adjacent_mines == 0:
            return CellContent.EMPTY
        return CellContent.NUMBER

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Encode the visible part of the cell as an integer.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_OBSERVATION
        if self.state == CellState.FLAGGED:
            return FLAGGED_OBSERVATION
        if self.is_mine:
            return MINE_OBSERVATION
        return self.adjacent_mines
