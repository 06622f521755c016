"""
Deterministic puzzle generation for the shared daily board.

Boards are a pure function of (seed, width, height, mine count). No safe
zone is carved out around a first click: doing so would change which
board a seed produces, and every client must compute the same one.
"""
import logging

import numpy as np

from .config import DailyPuzzleConfig
from .grid import Board, count_adjacent_mines, recompute_adjacency_counts
from .rng import SeededRandom

logger = logging.getLogger(__name__)


def generate_mine_matrix(
    seed: str, width: int, height: int, mine_count: int
) -> np.ndarray:
    """
    Place exactly ``mine_count`` mines by rejection sampling.

    Draws a row then a column from the seeded generator and keeps the
    position unless it already holds a mine.

    Returns:
        Boolean matrix of shape (height, width).

    Raises:
        ValueError: If the dimensions or mine count are invalid.
    """
    config = DailyPuzzleConfig(seed, width, height, mine_count)
    rng = SeededRandom(config.seed)
    mines = np.zeros((config.height, config.width), dtype=bool)
    placed = 0
    while placed < config.num_mines:
        row = rng.next_int(0, config.height)
        col = rng.next_int(0, config.width)
        if not mines[row, col]:
            mines[row, col] = True
            placed += 1
    return mines


def compute_adjacency_counts(mines: np.ndarray, width: int, height: int) -> np.ndarray:
    """Adjacent-mine counts for a raw mine matrix; mines themselves get 0."""
    mines = np.asarray(mines, dtype=bool)
    if mines.shape != (height, width):
        raise ValueError(
            f"Mine matrix shape {mines.shape} does not match {height}x{width}"
        )
    return count_adjacent_mines(mines)


def generate_puzzle(seed: str, width: int, height: int, mine_count: int) -> Board:
    """
    Build the interactive board for a seed.

    Every cell is hidden; mines and adjacent counts are already set.
    """
    mines = generate_mine_matrix(seed, width, height, mine_count)
    board = Board(width, height)
    for cell in board:
        cell.is_mine = bool(mines[cell.y, cell.x])
    recompute_adjacency_counts(board)
    logger.debug("Generated puzzle %r (%dx%d, %d mines)", seed, width, height, mine_count)
    return board


def generate_daily(config: DailyPuzzleConfig) -> Board:
    """Build the board for a daily puzzle configuration."""
    return generate_puzzle(config.seed, config.width, config.height, config.num_mines)
