"""
Text rendering of a board for the console.
"""
from .board import Board
from .cell import Cell


GAME_OVER_MESSAGE = "Game Over! You have hit a mine."
WIN_MESSAGE = "Congratulations! You won!"

HIDDEN_GLYPH = "#"
FLAG_GLYPH = "F"
MINE_GLYPH = "*"
EMPTY_GLYPH = "."


def cell_glyph(cell: Cell, reveal_mines: bool = False) -> str:
    """Get the single-character glyph for a cell."""
    if cell.is_flagged:
        return FLAG_GLYPH
    if cell.is_hidden and not (reveal_mines and cell.is_mine):
        return HIDDEN_GLYPH
    if cell.is_mine:
        return MINE_GLYPH
    if cell.adjacent_mines == 0:
        return EMPTY_GLYPH
    return str(cell.adjacent_mines)


def render_board(board: Board, reveal_mines: bool = False) -> str:
    """
    Render board as text.

    Column indices head the grid and every row starts with its row index.
    The elapsed time follows after a blank line.

    Args:
        board: Board to draw.
        reveal_mines: Show hidden mines as well (used once the game is lost).

    Returns:
        Multi-line string without a trailing newline.
    """
    row_width = len(str(board.rows - 1))
    col_width = len(str(board.cols - 1))

    header = " " * row_width + " " + " ".join(
        str(col).rjust(col_width) for col in range(board.cols)
    )
    lines = [header]
    for row in range(board.rows):
        glyphs = (
            cell_glyph(board.get_cell(row, col), reveal_mines).rjust(col_width)
            for col in range(board.cols)
        )
        lines.append(str(row).rjust(row_width) + " " + " ".join(glyphs))

    lines.append("")
    lines.append(f"Time: {board.elapsed_seconds}s")
    return "\n".join(lines)
