"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell, Game, create_empty_board
from minefield.grid import recompute_adjacency_counts


# ============================================================================
# Helpers
# ============================================================================

def board_with_mines(width: int, height: int, mines) -> Board:
    """Build a board with mines at the given (x, y) positions."""
    board = create_empty_board(width, height)
    for x, y in mines:
        board.cells[y][x].is_mine = True
    recompute_adjacency_counts(board)
    return board


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def make_board():
    """Factory building a board with mines at given (x, y) positions."""
    return board_with_mines


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible placement."""
    return random.Random(1234)


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return create_empty_board(5, 5)


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 5x5 board with a single mine in the bottom-right corner."""
    return board_with_mines(5, 5, [(4, 4)])


@pytest.fixture
def walled_board() -> Board:
    """
    Create a 7x5 board split by a wall of mines in column 3.

    Revealing the left side cascades up to the wall and stops.
    """
    return board_with_mines(7, 5, [(3, y) for y in range(5)])


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
def beginner_config() -> BoardConfig:
    """Beginner difficulty configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def intermediate_config() -> BoardConfig:
    """Intermediate difficulty configuration."""
    return BoardConfig(16, 16, 40)


@pytest.fixture
def expert_config() -> BoardConfig:
    """Expert difficulty configuration."""
    return BoardConfig(30, 16, 99)


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def fake_clock():
    """Clock returning a value tests can advance via ``fake_clock.now``."""

    class FakeClock:
        def __init__(self) -> None:
            self.now = 100.0

        def __call__(self) -> float:
            return self.now

    return FakeClock()


@pytest.fixture
def beginner_game(beginner_config: BoardConfig, rng: random.Random, fake_clock) -> Game:
    """Create a beginner game with seeded placement and a fake clock."""
    return Game(beginner_config, rng=rng, clock=fake_clock)
