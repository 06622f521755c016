"""
Layout primitives shared by every placement strategy.

Safe-zone geometry, eligible mine positions and the baseline uniform
layout (Fisher-Yates shuffle of every eligible position).
"""
import random
from typing import Iterable, List, Optional, Set, Tuple

from .config import BoardConfig
from .grid import Board, recompute_adjacency_counts

Position = Tuple[int, int]


# ============================================================================
# Safe Zone Geometry (Low-level)
# ============================================================================

def safe_zone(first_x: int, first_y: int, width: int, height: int) -> Set[Position]:
    """
    Get the first-clicked cell and its in-bounds neighbors.

    Returns:
        Set of up to 9 (x, y) positions that must stay mine-free.
    """
    zone = set()
    for delta_y in (-1, 0, 1):
        for delta_x in (-1, 0, 1):
            x = first_x + delta_x
            y = first_y + delta_y
            if 0 <= x < width and 0 <= y < height:
                zone.add((x, y))
    return zone


def available_positions(
    first_x: int, first_y: int, width: int, height: int
) -> List[Position]:
    """Get every position outside the safe zone, in row-major order."""
    positions = []
    for y in range(height):
        for x in range(width):
            if abs(x - first_x) <= 1 and abs(y - first_y) <= 1:
                continue
            positions.append((x, y))
    return positions


def is_corner(x: int, y: int, width: int, height: int) -> bool:
    """Check if a position is one of the four board corners."""
    return x in (0, width - 1) and y in (0, height - 1)


def is_edge(x: int, y: int, width: int, height: int) -> bool:
    """Check if a position lies on the board border."""
    return x in (0, width - 1) or y in (0, height - 1)


# ============================================================================
# Layout Construction (Mid-level)
# ============================================================================

def shuffled(positions: Iterable[Position], rng: random.Random) -> List[Position]:
    """Return a Fisher-Yates shuffled copy of positions."""
    result = list(positions)
    for index in range(len(result) - 1, 0, -1):
        swap = rng.randint(0, index)
        result[index], result[swap] = result[swap], result[index]
    return result


def build_layout(board: Board, mine_positions: Iterable[Position]) -> Board:
    """
    Copy a board, set mines exactly at the given positions and recount.

    Any mines the source board had are cleared first.
    """
    layout = board.copy()
    for cell in layout:
        cell.is_mine = False
        cell.adjacent_mines = 0
    for x, y in mine_positions:
        layout.cells[y][x].is_mine = True
    recompute_adjacency_counts(layout)
    return layout


def generate_single_layout(
    board: Board,
    config: BoardConfig,
    first_x: int,
    first_y: int,
    rng: Optional[random.Random] = None,
) -> Board:
    """
    Place mines uniformly at random outside the safe zone.

    Places ``min(num_mines, available)`` mines, so a crowded config gets
    fewer mines rather than an error.

    Args:
        board: Board to copy the layout from.
        config: Board configuration (mine count).
        first_x: Column of the first click.
        first_y: Row of the first click.
        rng: Random source, defaults to a fresh ``random.Random``.

    Returns:
        New board with mines and adjacent counts set.
    """
    rng = rng or random.Random()
    positions = available_positions(first_x, first_y, board.width, board.height)
    mines_to_place = min(config.num_mines, len(positions))
    return build_layout(board, shuffled(positions, rng)[:mines_to_place])
