"""
Unit tests for deterministic daily puzzle generation.

The golden board below was captured once and must never change: every
client computes the daily board from the seed alone.
"""
import numpy as np
import pytest
from minefield import DailyPuzzleConfig, compute_adjacency_counts, generate_daily, generate_puzzle
from minefield.daily import generate_mine_matrix
from minefield.grid import neighbors


# ============================================================================
# Golden Board
# ============================================================================

GOLDEN_SEED = "daily-2024-01-01"

# (row, col) of every mine for GOLDEN_SEED on 16x16 with 40 mines.
GOLDEN_MINES = [
    (0, 7), (0, 8), (0, 15), (1, 3), (1, 12), (2, 9), (3, 5), (4, 6),
    (4, 8), (4, 15), (6, 1), (6, 3), (6, 8), (6, 12), (7, 3), (7, 4),
    (7, 12), (7, 15), (8, 7), (9, 3), (10, 8), (10, 10), (11, 2), (11, 5),
    (11, 6), (11, 7), (11, 8), (11, 9), (12, 14), (13, 2), (13, 4), (13, 5),
    (13, 6), (13, 12), (13, 13), (13, 15), (14, 4), (15, 1), (15, 10),
    (15, 15),
]

GOLDEN_ROWS = [
    ".......**......*",
    "...*........*...",
    ".........*......",
    ".....*..........",
    "......*.*......*",
    "................",
    ".*.*....*...*...",
    "...**.......*..*",
    ".......*........",
    "...*............",
    "........*.*.....",
    "..*..*****......",
    "..............*.",
    "..*.***.....**.*",
    "....*...........",
    ".*........*....*",
]


class TestGoldenPuzzle:
    """Test the pinned daily board."""

    def test_mine_positions_are_pinned(self) -> None:
        """The golden seed always yields the same 40 mines."""
        mines = generate_mine_matrix(GOLDEN_SEED, 16, 16, 40)
        rows, cols = np.nonzero(mines)
        assert sorted(zip(rows.tolist(), cols.tolist())) == GOLDEN_MINES

    def test_board_layout_is_pinned(self) -> None:
        """The interactive board matches the golden picture."""
        board = generate_puzzle(GOLDEN_SEED, 16, 16, 40)
        picture = [
            "".join("*" if cell.is_mine else "." for cell in row)
            for row in board.cells
        ]
        assert picture == GOLDEN_ROWS

    def test_daily_config_for_date_matches_golden(self) -> None:
        """The published 2024-01-01 puzzle is the golden board."""
        board = generate_daily(DailyPuzzleConfig(GOLDEN_SEED))
        assert board.mine_matrix().tolist() == generate_mine_matrix(
            GOLDEN_SEED, 16, 16, 40
        ).tolist()


# ============================================================================
# Determinism Tests
# ============================================================================

class TestDeterminism:
    """Test seed reproducibility."""

    def test_repeated_calls_are_identical(self) -> None:
        """Same inputs give byte-identical mine matrices."""
        first = generate_mine_matrix("repeat", 30, 16, 99)
        second = generate_mine_matrix("repeat", 30, 16, 99)
        assert first.tobytes() == second.tobytes()

    @pytest.mark.parametrize("mine_count", [1, 10, 99])
    def test_exact_mine_count(self, mine_count: int) -> None:
        """Exactly mine_count mines are placed."""
        assert generate_mine_matrix("count", 30, 16, mine_count).sum() == mine_count

    def test_no_safe_zone_is_applied(self) -> None:
        """Daily boards may have mines anywhere, corners included."""
        mines = generate_mine_matrix(GOLDEN_SEED, 16, 16, 40)
        assert mines[0, 15]

    def test_overfull_board_raises(self) -> None:
        """Mine counts that cannot fit are rejected up front."""
        with pytest.raises(ValueError):
            generate_mine_matrix("full", 5, 5, 25)

    def test_puzzle_starts_hidden(self) -> None:
        """Generated boards have nothing revealed or flagged."""
        board = generate_puzzle("hidden", 9, 9, 10)
        assert all(cell.is_hidden for cell in board)
        assert board.mine_count == 10


# ============================================================================
# Adjacency Tests
# ============================================================================

class TestComputeAdjacencyCounts:
    """Test counting on raw mine matrices."""

    def test_counts_match_brute_force(self) -> None:
        """Counts equal a direct neighbor scan; mines report 0."""
        mines = generate_mine_matrix(GOLDEN_SEED, 16, 16, 40)
        counts = compute_adjacency_counts(mines, 16, 16)
        for row in range(16):
            for col in range(16):
                if mines[row, col]:
                    assert counts[row, col] == 0
                    continue
                expected = sum(mines[ny, nx] for nx, ny in neighbors(col, row, 16, 16))
                assert counts[row, col] == expected

    def test_agrees_with_board_counts(self) -> None:
        """Raw-matrix counts and board counts use one routine."""
        board = generate_puzzle(GOLDEN_SEED, 16, 16, 40)
        counts = compute_adjacency_counts(board.mine_matrix(), 16, 16)
        for cell in board:
            if not cell.is_mine:
                assert cell.adjacent_mines == counts[cell.y, cell.x]

    def test_shape_mismatch_raises(self) -> None:
        """Width and height must match the matrix."""
        with pytest.raises(ValueError, match="does not match"):
            compute_adjacency_counts(np.zeros((5, 6), dtype=bool), 5, 5)
