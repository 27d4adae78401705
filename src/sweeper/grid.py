"""
Grid container for the board.

Cells live in a single row-major list indexed by ``row * cols + col``.
"""
from typing import Iterator, List, Optional, Tuple

from .cell import Cell


Coordinate = Tuple[int, int]


class Grid:
    """Fixed-size rectangular grid of cells with bounds-checked access."""

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self._cells: List[Cell] = [Cell() for _ in range(rows * cols)]

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __getitem__(self, position: Coordinate) -> Cell:
        row, col = position
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is outside a {self.rows}x{self.cols} grid")
        return self._cells[self._index(row, col)]

    def _index(self, row: int, col: int) -> int:
        return row * self.cols + col

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if out of bounds."""
        if not self.in_bounds(row, col):
            return None
        return self._cells[self._index(row, col)]

    def positions(self) -> Iterator[Coordinate]:
        """Yield every (row, col) in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    def neighbors(self, row: int, col: int) -> List[Coordinate]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of up to 8 in-bounds (row, col) tuples, center excluded.
        """
        return [
            position for position in self.block(row, col)
            if position != (row, col)
        ]

    def block(self, row: int, col: int) -> List[Coordinate]:
        """Get the in-bounds positions of the 3x3 block centered on a cell."""
        block = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    block.append((new_row, new_col))
        return block
