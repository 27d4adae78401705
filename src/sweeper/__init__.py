"""
Console Minesweeper.

Provides the board engine, console rendering and session loop, and a
gymnasium environment over the same board.
"""
from .cell import Cell, CellContent, CellState
from .grid import Coordinate, Grid
from .board import (
    Action,
    Board,
    BoardConfig,
    ConfigurationError,
    GameState,
    place_mines,
    EASY,
    INTERMEDIATE,
    ADVANCED,
    DIFFICULTIES,
)
from .render import render_board, GAME_OVER_MESSAGE, WIN_MESSAGE
from .session import ConsoleSession, choose_difficulty
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellContent",
    "CellState",
    "Coordinate",
    "Grid",
    "Action",
    "Board",
    "BoardConfig",
    "ConfigurationError",
    "GameState",
    "place_mines",
    "EASY",
    "INTERMEDIATE",
    "ADVANCED",
    "DIFFICULTIES",
    "render_board",
    "GAME_OVER_MESSAGE",
    "WIN_MESSAGE",
    "ConsoleSession",
    "choose_difficulty",
    "MinesweeperEnv",
]
