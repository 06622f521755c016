"""
Minefield engine.

Board model, quality-scored mine placement, cascade reveal with win/loss
evaluation, and seeded generation of the shared daily puzzle.
"""
from .cell import Cell, CellState
from .config import (
    BoardConfig,
    DailyPuzzleConfig,
    Difficulty,
    DIFFICULTY_CONFIGS,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    MASTER,
    INSANE,
    EXTREME,
)
from .grid import Board, create_empty_board, neighbors, recompute_adjacency_counts
from .rng import SeededRandom
from .layout import generate_single_layout
from .evaluation import evaluate_layout, analyze_layout, LayoutAnalysis
from .strategies import (
    PlacementStrategy,
    UniformStrategy,
    ConstraintSatisfactionStrategy,
    WeightedZoneStrategy,
    PatternAwareStrategy,
    select_strategy,
)
from .placement import place_mines, place_mines_advanced
from .reveal import reveal, toggle_flag, check_win, reveal_all_mines
from .daily import generate_puzzle, generate_daily, compute_adjacency_counts
from .game import Game, GameState, GameStatus, GameResult, new_game, apply_reveal, apply_flag
from .errors import MinefieldError, DuplicateSubmissionError

__all__ = [
    "Cell",
    "CellState",
    "BoardConfig",
    "DailyPuzzleConfig",
    "Difficulty",
    "DIFFICULTY_CONFIGS",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "MASTER",
    "INSANE",
    "EXTREME",
    "Board",
    "create_empty_board",
    "neighbors",
    "recompute_adjacency_counts",
    "SeededRandom",
    "generate_single_layout",
    "evaluate_layout",
    "analyze_layout",
    "LayoutAnalysis",
    "PlacementStrategy",
    "UniformStrategy",
    "ConstraintSatisfactionStrategy",
    "WeightedZoneStrategy",
    "PatternAwareStrategy",
    "select_strategy",
    "place_mines",
    "place_mines_advanced",
    "reveal",
    "toggle_flag",
    "check_win",
    "reveal_all_mines",
    "generate_puzzle",
    "generate_daily",
    "compute_adjacency_counts",
    "Game",
    "GameState",
    "GameStatus",
    "GameResult",
    "new_game",
    "apply_reveal",
    "apply_flag",
    "MinefieldError",
    "DuplicateSubmissionError",
]
