"""
Layout evaluation for the mine placement engine.

Heuristic scores estimating how far a layout can be solved by deduction
alone. This is not a solver: higher scores mean more informative numbers
and fewer shapes known to force a guess (50/50 pairs, corner traps,
long runs of identical numbers).

Each per-cell term is computed for the whole board at once as a
``(height, width)`` matrix indexed ``[y, x]``.
"""
import math
from dataclasses import dataclass

import numpy as np

from .grid import NEIGHBOR_OFFSETS, Board, neighbor_sum


# ============================================================================
# Constants
# ============================================================================

# Value of a revealed number as a constraint, indexed by adjacent count.
INFORMATION_VALUES = (0.25, 2.0, 2.0, 1.0, 1.0, 0.5, -0.5, -1.0, -1.5)

FIFTY_FIFTY_WEIGHT = 0.75
CORNER_PENALTY = 2.0
RUN_PENALTY = 4.0
MIN_RUN_LENGTH = 3
ASYMMETRY_WEIGHT = 0.5

# One direction per line orientation; runs are walked forward only.
RUN_DIRECTIONS = ((1, 0), (0, 1), (1, 1), (1, -1))

# For each neighbor offset, the offsets of the cells both neighbors touch.
SHARED_OFFSETS = {
    offset: tuple(
        other
        for other in NEIGHBOR_OFFSETS
        if other != offset
        and max(abs(other[0] - offset[0]), abs(other[1] - offset[1])) <= 1
    )
    for offset in NEIGHBOR_OFFSETS
}


# ============================================================================
# Board Matrices (Low-level)
# ============================================================================

@dataclass
class LayoutArrays:
    """
    Matrix views of a board, indexed ``[y, x]``.

    Attributes:
        counts: Adjacent-mine counts, 0 on mines.
        mines: Mine positions.
        revealed: Revealed cells.
    """

    counts: np.ndarray
    mines: np.ndarray
    revealed: np.ndarray

    @classmethod
    def from_board(cls, board: Board) -> "LayoutArrays":
        mines = board.mine_matrix()
        counts = np.array(
            [[cell.adjacent_mines for cell in row] for row in board.cells],
            dtype=np.int64,
        )
        revealed = np.array(
            [[cell.is_revealed for cell in row] for row in board.cells],
            dtype=bool,
        )
        return cls(counts=np.where(mines, 0, counts), mines=mines, revealed=revealed)

    @property
    def numbered(self) -> np.ndarray:
        """Safe cells showing a non-zero count."""
        return (self.counts > 0) & ~self.mines


def _shift(values: np.ndarray, delta_x: int, delta_y: int, fill=0) -> np.ndarray:
    """Return ``out[y, x] = values[y + delta_y, x + delta_x]``, ``fill`` off the board."""
    height, width = values.shape
    shifted = np.full_like(values, fill)
    if abs(delta_x) >= width or abs(delta_y) >= height:
        return shifted
    shifted[
        max(0, -delta_y):height - max(0, delta_y),
        max(0, -delta_x):width - max(0, delta_x),
    ] = values[
        max(0, delta_y):height - max(0, -delta_y),
        max(0, delta_x):width - max(0, -delta_x),
    ]
    return shifted


def _same_number_at(arrays: LayoutArrays, delta_x: int, delta_y: int) -> np.ndarray:
    """Cells whose cell at the offset is a safe cell showing the same count."""
    numbered = _shift(arrays.numbered, delta_x, delta_y, False)
    return numbered & (_shift(arrays.counts, delta_x, delta_y, -1) == arrays.counts)


# ============================================================================
# Per-Cell Terms (Mid-level)
# ============================================================================

def information_values(arrays: LayoutArrays) -> np.ndarray:
    """Score how useful each cell's number is as a constraint."""
    values = np.asarray(INFORMATION_VALUES)[np.clip(arrays.counts, 0, 8)]
    return np.where(arrays.mines, 0.0, values)


def fifty_fifty_penalties(arrays: LayoutArrays) -> np.ndarray:
    """
    Penalize adjacent cells showing the same number over shared unknowns.

    Two touching safe cells with the same non-zero count that share two
    or more unresolved neighbors, at least one of them a mine, give the
    player no way to tell those neighbors apart. A neighbor is unresolved
    when it is hidden and not a zero (a hidden zero would cascade open).
    The penalty grows with the number of shared unresolved cells and is
    charged once per matching neighbor.
    """
    unresolved = ~arrays.revealed & (arrays.mines | (arrays.counts > 0))
    unresolved_mines = unresolved & arrays.mines
    numbered = arrays.numbered

    penalty = np.zeros(arrays.counts.shape)
    for offset in NEIGHBOR_OFFSETS:
        partner = _same_number_at(arrays, *offset)
        shared = sum(
            _shift(unresolved, dx, dy, False).astype(np.int64)
            for dx, dy in SHARED_OFFSETS[offset]
        )
        shared_mines = sum(
            _shift(unresolved_mines, dx, dy, False).astype(np.int64)
            for dx, dy in SHARED_OFFSETS[offset]
        )
        trapped = numbered & partner & (shared >= 2) & (shared_mines > 0)
        penalty += np.where(trapped, FIFTY_FIFTY_WEIGHT * shared, 0.0)
    return penalty


def corner_penalties(arrays: LayoutArrays) -> np.ndarray:
    """Penalize 1s and 2s in corners, which are prone to forced guesses."""
    corners = np.zeros(arrays.counts.shape, dtype=bool)
    corners[[0, 0, -1, -1], [0, -1, 0, -1]] = True
    low = arrays.numbered & (arrays.counts <= 2)
    return np.where(corners & low, CORNER_PENALTY, 0.0)


def collinear_run_penalties(arrays: LayoutArrays) -> np.ndarray:
    """
    Penalize runs of 3+ collinear cells sharing the same non-zero number.

    Each run is charged once, at the cell where it starts.
    """
    penalty = np.zeros(arrays.counts.shape)
    for delta_x, delta_y in RUN_DIRECTIONS:
        start = arrays.numbered & ~_same_number_at(arrays, -delta_x, -delta_y)
        length = start.astype(np.int64)
        alive = start
        step = 1
        while alive.any():
            alive = alive & _same_number_at(arrays, delta_x * step, delta_y * step)
            length += alive
            step += 1
        penalty += np.where(
            length >= MIN_RUN_LENGTH,
            RUN_PENALTY * (length - MIN_RUN_LENGTH + 1),
            0.0,
        )
    return penalty


def asymmetry_bonuses(arrays: LayoutArrays) -> np.ndarray:
    """
    Reward mine neighbors whose centroid sits off the cell's center.

    Symmetric arrangements around a number tend toward forced guesses.
    """
    mines = arrays.mines.astype(np.int64)
    mine_neighbors = neighbor_sum(mines)
    offset_x = sum(dx * _shift(mines, dx, dy) for dx, dy in NEIGHBOR_OFFSETS)
    offset_y = sum(dy * _shift(mines, dx, dy) for dx, dy in NEIGHBOR_OFFSETS)
    divisor = np.maximum(mine_neighbors, 1)
    spread = np.hypot(offset_x / divisor, offset_y / divisor)
    return np.where(
        arrays.numbered & (mine_neighbors > 0), ASYMMETRY_WEIGHT * spread, 0.0
    )


def cell_scores(arrays: LayoutArrays) -> np.ndarray:
    """Combine every per-cell term; mines score 0."""
    scores = (
        information_values(arrays)
        - fifty_fifty_penalties(arrays)
        - corner_penalties(arrays)
        - collinear_run_penalties(arrays)
        + asymmetry_bonuses(arrays)
    )
    return np.where(arrays.mines, 0.0, scores)


# ============================================================================
# Layout Scores (Mid-level)
# ============================================================================

def evaluate_layout(board: Board) -> float:
    """Sum the per-cell score over every non-mine cell."""
    return float(cell_scores(LayoutArrays.from_board(board)).sum())


@dataclass
class LayoutAnalysis:
    """Summary of a layout's quality."""

    score: float
    fifty_fifty_count: int
    information_density: float


def analyze_layout(board: Board) -> LayoutAnalysis:
    """Score a layout and count the cells caught in a 50/50 shape."""
    arrays = LayoutArrays.from_board(board)
    caught = (fifty_fifty_penalties(arrays) > 0) & ~arrays.mines
    return LayoutAnalysis(
        score=float(cell_scores(arrays).sum()),
        fifty_fifty_count=int(caught.sum()),
        information_density=float(information_values(arrays).sum())
        / (board.width * board.height),
    )


# ============================================================================
# Whole-Board Analyzers (High-level)
# ============================================================================

def _mine_positions(board: Board) -> np.ndarray:
    """Mine coordinates as an (n, 2) array of (x, y)."""
    rows, cols = np.nonzero(board.mine_matrix())
    return np.stack([cols, rows], axis=1).astype(float)


def analyze_solvability(board: Board) -> float:
    """
    Evaluator score adjusted for dense mine clusters and isolated clues.

    A 3x3 block more than half mined, or a number with at most one
    numbered neighbor, both make local deduction harder.
    """
    arrays = LayoutArrays.from_board(board)
    mines = arrays.mines
    block_mines = neighbor_sum(mines.astype(np.int16)) + mines
    block_cells = neighbor_sum(np.ones(mines.shape, dtype=np.int16)) + 1
    dense = (block_mines * 2 > block_cells) & ~mines

    numbered = arrays.numbered
    numbered_neighbors = neighbor_sum(numbered.astype(np.int16))
    isolated = numbered & (numbered_neighbors <= 1)

    score = float(cell_scores(arrays).sum())
    score -= 2.0 * int(dense.sum())
    score -= 1.0 * int(isolated.sum())
    return score


def analyze_symmetry(board: Board) -> float:
    """Reward mines centered on the board and spread evenly by quadrant."""
    positions = _mine_positions(board)
    if len(positions) == 0:
        return 0.0
    center_x = (board.width - 1) / 2
    center_y = (board.height - 1) / 2
    mass_x, mass_y = positions.mean(axis=0)

    score = max(0.0, 5.0 - math.hypot(mass_x - center_x, mass_y - center_y))

    quadrants = np.zeros(4, dtype=int)
    for x, y in positions:
        quadrants[(0 if x < center_x else 1) + (0 if y < center_y else 2)] += 1
    score += max(0, 3 - int(quadrants.max() - quadrants.min()))
    return score


def analyze_distribution(board: Board) -> float:
    """Penalize touching mines and reward spacing close to the ideal."""
    positions = _mine_positions(board)
    count = len(positions)
    if count < 2:
        return 0.0

    deltas = positions[:, None, :] - positions[None, :, :]
    distances = np.sqrt((deltas ** 2).sum(axis=2))
    pairs = distances[np.triu_indices(count, k=1)]

    score = -2.0 * int((pairs < 1.5).sum())
    ideal = math.sqrt(board.width * board.height / count) * 0.8
    score += max(0.0, 5.0 - abs(float(pairs.mean()) - ideal))
    return score


def analyze_complexity(board: Board) -> float:
    """Reward a diverse spread of numbers (entropy), favoring 2s and 3s."""
    mines = board.mine_matrix()
    counts = np.array(
        [[cell.adjacent_mines for cell in row] for row in board.cells]
    )[~mines]
    if counts.size == 0:
        return 0.0
    histogram = np.bincount(counts, minlength=9)
    probabilities = histogram[histogram > 0] / counts.size
    score = float(-(probabilities * np.log2(probabilities)).sum())
    score += 0.1 * int(histogram[2] + histogram[3])
    score -= 0.05 * int(histogram[0])
    score -= 0.2 * int(histogram[6:].sum())
    return score
