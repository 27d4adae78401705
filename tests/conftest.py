"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Iterable, List, Tuple

# Add src (for the package) and the project root (for main.py) to path
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from sweeper import Board, BoardConfig, Cell


# ============================================================================
# Deterministic Collaborators
# ============================================================================

class ScriptedRng:
    """Random source that hands out a fixed sequence of coordinates."""

    def __init__(self, positions: Iterable[Tuple[int, int]]) -> None:
        self._values: List[int] = []
        for row, col in positions:
            self._values.extend((row, col))
        self.calls = 0

    def randrange(self, stop: int) -> int:
        value = self._values[self.calls]
        self.calls += 1
        assert 0 <= value < stop
        return value


class FakeClock:
    """Monotonic clock whose time is set by the test."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def make_board(
    rows: int, cols: int, mines: Iterable[Tuple[int, int]], clock=None
) -> Board:
    """Build a board with mines at exactly the given positions."""
    mines = list(mines)
    config = BoardConfig(rows, cols, len(mines))
    if clock is None:
        clock = FakeClock()
    return Board(config, rng=ScriptedRng(mines), clock=clock)


def scripted_input(answers: Iterable[str]):
    """Input function that replays answers, then signals end of input."""
    remaining = iter(answers)

    def read(prompt: str = "") -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError() from None

    return read


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    """Clock starting at zero."""
    return FakeClock()


@pytest.fixture
def board_factory():
    """Factory building boards with mines at given positions."""
    return make_board


@pytest.fixture
def input_factory():
    """Factory building scripted console input functions."""
    return scripted_input


@pytest.fixture
def scripted_rng():
    """Factory building random sources from fixed coordinates."""
    return ScriptedRng


@pytest.fixture
def default_board() -> Board:
    """Create a default 10x10 board with 10 mines."""
    return Board()


@pytest.fixture
def center_mine_board(clock: FakeClock) -> Board:
    """Create a 3x3 board with its only mine in the middle."""
    return make_board(3, 3, [(1, 1)], clock=clock)


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 5x5 board with one mine in the bottom-right corner."""
    return make_board(5, 5, [(4, 4)])


@pytest.fixture
def three_mine_board() -> Board:
    """Create a 5x5 board with mines on the diagonal."""
    return make_board(5, 5, [(0, 0), (2, 2), (4, 4)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(10, 10, 10)
