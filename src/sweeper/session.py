"""
Console session loop.

Reads row, column and action from the player, drives the board and
prints the result. Input and output functions are injectable so the
loop can be scripted.
"""
from typing import Callable, Optional

from .board import Action, Board, BoardConfig, DIFFICULTIES, GameState
from .render import GAME_OVER_MESSAGE, WIN_MESSAGE, render_board


InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

WELCOME_MESSAGE = "Welcome to the Minesweeper Game!!"
DIFFICULTY_PROMPT = (
    "Enter the difficulty level ( 1 for easy , 2 for intermediate , 3 for advance ) "
)
ROW_PROMPT = "Enter row number"
COL_PROMPT = "Enter column number"
ACTION_PROMPT = "Enter L for exposing the cell and R for flagging it "


class SessionEnded(Exception):
    """Raised when the input stream runs out mid-game."""


def _read(input_fn: InputFn, output_fn: OutputFn, prompt: str) -> str:
    output_fn(prompt)
    try:
        return input_fn("")
    except EOFError:
        raise SessionEnded() from None


def choose_difficulty(
    input_fn: InputFn = input, output_fn: OutputFn = print
) -> Optional[BoardConfig]:
    """
    Ask for a difficulty level until a known one is entered.

    Returns:
        The preset configuration for the chosen level, or None if input
        ran out before a level was chosen.
    """
    output_fn(WELCOME_MESSAGE)
    while True:
        try:
            answer = _read(input_fn, output_fn, DIFFICULTY_PROMPT).strip()
        except SessionEnded:
            return None
        if answer.isdigit() and int(answer) in DIFFICULTIES:
            return DIFFICULTIES[int(answer)]
        output_fn(f"Unknown difficulty level {answer!r}")


class ConsoleSession:
    """Interactive game on a single board."""

    def __init__(
        self,
        board: Board,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        self.board = board
        self._input = input_fn
        self._output = output_fn

    def run(self) -> GameState:
        """
        Play turns until the game is won or lost, or input runs out.

        Returns:
            The final game state.
        """
        self._output(f"Total Mines: {self.board.num_mines}")
        try:
            while self.board.is_playing:
                self.display()
                self.play_turn()
        except SessionEnded:
            return self.board.game_state

        self._announce()
        return self.board.game_state

    def display(self, reveal_mines: bool = False) -> None:
        self._output(render_board(self.board, reveal_mines=reveal_mines))

    def play_turn(self) -> Optional[GameState]:
        """
        Read one move and apply it.

        Returns:
            The new game state, or None if the input was rejected.
        """
        row = self._read_int(ROW_PROMPT)
        if row is None:
            return None
        col = self._read_int(COL_PROMPT)
        if col is None:
            return None

        key = _read(self._input, self._output, ACTION_PROMPT)
        try:
            action = Action.from_key(key)
        except ValueError as exc:
            self._output(str(exc))
            return None

        return self.board.apply(action, row, col)

    def _read_int(self, prompt: str) -> Optional[int]:
        answer = _read(self._input, self._output, prompt).strip()
        try:
            return int(answer)
        except ValueError:
            self._output(f"Not a number: {answer!r}")
            return None

    def _announce(self) -> None:
        if self.board.is_lost:
            self.display(reveal_mines=True)
            self._output(GAME_OVER_MESSAGE)
        elif self.board.is_won:
            self.display()
            self._output(WIN_MESSAGE)
