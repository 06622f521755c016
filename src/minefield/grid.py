"""
Grid module for the minefield engine.

Implements the board data structure and the pure accessors every other
component relies on: neighbor enumeration and adjacent-mine counting.
"""
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell


# ============================================================================
# Constants
# ============================================================================

NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (delta_x, delta_y)
    for delta_y in (-1, 0, 1)
    for delta_x in (-1, 0, 1)
    if (delta_x, delta_y) != (0, 0)
)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Rectangular matrix of cells, indexed ``cells[y][x]``.

    Engine operations never mutate a board they are handed; they work on
    ``copy()`` and return the new snapshot.
    """

    width: int
    height: int
    cells: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Fill the grid with empty cells when none were given."""
        if not self.cells:
            self.cells = [
                [Cell(x=x, y=y) for x in range(self.width)]
                for y in range(self.height)
            ]

    # ========================================================================
    # Cell Access (Low-level)
    # ========================================================================

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(x, y):
            return None
        return self.cells[y][x]

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """Get in-bounds neighbor positions of a cell."""
        return neighbors(x, y, self.width, self.height)

    def neighbor_cells(self, x: int, y: int) -> List[Cell]:
        """Get the neighboring cells themselves."""
        return [self.cells[ny][nx] for nx, ny in self.neighbors(x, y)]

    def copy(self) -> "Board":
        """Return a deep copy that shares no cell with this board."""
        return Board(
            self.width,
            self.height,
            [[cell.copy() for cell in row] for row in self.cells],
        )

    # ========================================================================
    # Counters (Mid-level)
    # ========================================================================

    @property
    def mine_count(self) -> int:
        """Number of cells holding a mine."""
        return sum(1 for cell in self if cell.is_mine)

    @property
    def flags_used(self) -> int:
        """Number of flagged cells."""
        return sum(1 for cell in self if cell.is_flagged)

    @property
    def cells_revealed(self) -> int:
        """Number of revealed cells, mines included."""
        return sum(1 for cell in self if cell.is_revealed)

    @property
    def mines_remaining(self) -> int:
        """Mines not yet accounted for by a flag (may go negative)."""
        return self.mine_count - self.flags_used

    # ========================================================================
    # Matrix Views (High-level)
    # ========================================================================

    def mine_matrix(self) -> np.ndarray:
        """Boolean ``(height, width)`` matrix of mine positions."""
        mines = np.zeros((self.height, self.width), dtype=bool)
        for cell in self:
            mines[cell.y, cell.x] = cell.is_mine
        return mines


# ============================================================================
# Grid Functions
# ============================================================================

def create_empty_board(width: int, height: int) -> Board:
    """Create a board with no mines and every cell hidden."""
    return Board(width, height)


def neighbors(x: int, y: int, width: int, height: int) -> List[Tuple[int, int]]:
    """
    Get valid neighboring cell positions.

    Order is fixed (row above left to right, same row, row below) so
    heuristics iterating it are deterministic.

    Args:
        x: Column index of center cell.
        y: Row index of center cell.
        width: Board width.
        height: Board height.

    Returns:
        List of (x, y) tuples for in-bounds neighbors.
    """
    result = []
    for delta_x, delta_y in NEIGHBOR_OFFSETS:
        new_x = x + delta_x
        new_y = y + delta_y
        if 0 <= new_x < width and 0 <= new_y < height:
            result.append((new_x, new_y))
    return result


def neighbor_sum(values: np.ndarray) -> np.ndarray:
    """
    Sum each position's in-bounds neighbors of a numeric matrix.

    Out-of-bounds neighbors contribute zero; the position itself is not
    included.
    """
    values = np.asarray(values)
    height, width = values.shape
    padded = np.pad(values, 1)
    total = np.zeros((height, width), dtype=padded.dtype)
    for delta_x, delta_y in NEIGHBOR_OFFSETS:
        total += padded[
            1 + delta_y:1 + delta_y + height,
            1 + delta_x:1 + delta_x + width,
        ]
    return total


def count_adjacent_mines(mines: np.ndarray) -> np.ndarray:
    """
    Count mined neighbors for every position of a boolean mine matrix.

    Mine positions themselves are reported as 0.

    Args:
        mines: Boolean matrix of shape (height, width).

    Returns:
        Integer matrix of the same shape.
    """
    mines = np.asarray(mines, dtype=bool)
    counts = neighbor_sum(mines.astype(np.int8))
    counts[mines] = 0
    return counts


def recompute_adjacency_counts(board: Board) -> None:
    """Set ``adjacent_mines`` on every non-mine cell, in place."""
    counts = count_adjacent_mines(board.mine_matrix())
    for cell in board:
        if not cell.is_mine:
            cell.adjacent_mines = int(counts[cell.y, cell.x])


def render_text(board: Board, show_mines: bool = False) -> str:
    """
    Render a board as plain text, one line per row.

    ``.`` hidden, ``F`` flagged, ``*`` mine, digits for revealed counts
    (blank for zero).
    """
    lines = []
    for row in board.cells:
        chars = []
        for cell in row:
            if cell.is_mine and (cell.is_revealed or show_mines):
                chars.append("*")
            elif cell.is_flagged:
                chars.append("F")
            elif cell.is_revealed or show_mines:
                chars.append(str(cell.adjacent_mines) if cell.adjacent_mines else " ")
            else:
                chars.append(".")
        lines.append("".join(chars))
    return "\n".join(lines)
