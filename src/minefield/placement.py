"""
Mine placement engine.

Populates a board on the first reveal: generates candidate layouts with a
strategy, scores them and keeps the best. The clicked cell and its
neighbors never receive a mine.
"""
import logging
import random
from typing import Optional

from .config import BoardConfig
from .grid import Board
from .layout import generate_single_layout
from .strategies import PlacementStrategy, UniformStrategy, select_strategy

logger = logging.getLogger(__name__)


def place_mines(
    board: Board,
    config: BoardConfig,
    first_x: int,
    first_y: int,
    strategy: Optional[PlacementStrategy] = None,
    rng: Optional[random.Random] = None,
) -> Board:
    """
    Place mines, keeping the best of several candidate layouts.

    Tries up to ``strategy.max_attempts(config)`` candidates and stops
    early once one reaches ``strategy.target_score(config)``. An
    out-of-bounds first click leaves the board unchanged.

    Args:
        board: Empty board to populate; not modified.
        config: Board configuration.
        first_x: Column of the first click.
        first_y: Row of the first click.
        strategy: Placement strategy (default: uniform + evaluator).
        rng: Random source, defaults to a fresh ``random.Random``.

    Returns:
        New board with mines and adjacent counts set.
    """
    if not board.in_bounds(first_x, first_y):
        return board.copy()

    strategy = strategy or UniformStrategy()
    rng = rng or random.Random()
    max_attempts = strategy.max_attempts(config)
    target = strategy.target_score(config)

    best_board: Optional[Board] = None
    best_score = float("-inf")
    attempts = 0

    for attempts in range(1, max_attempts + 1):
        candidate = strategy.generate_layout(board, config, first_x, first_y, rng)
        score = strategy.score_layout(candidate)

        if score > best_score:
            best_score = score
            best_board = candidate

        if score >= target:
            break

    if best_board is None:
        logger.debug("No candidate generated, falling back to a single layout")
        return generate_single_layout(board, config, first_x, first_y, rng)

    logger.debug(
        "Placed %d mines with %s after %d/%d attempts (score %.2f, target %.2f)",
        best_board.mine_count,
        strategy.name,
        attempts,
        max_attempts,
        best_score,
        target,
    )
    return best_board


def place_mines_advanced(
    board: Board,
    config: BoardConfig,
    first_x: int,
    first_y: int,
    rng: Optional[random.Random] = None,
) -> Board:
    """Place mines with the strategy chosen for the board's size and density."""
    strategy = select_strategy(board.width, board.height, config.density)
    return place_mines(board, config, first_x, first_y, strategy, rng)
