"""
Configuration for minefield boards.

Board dimensions, difficulty presets and the daily puzzle configuration.
"""
import datetime
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MIN_DIMENSION = 5
MAX_RECOMMENDED_DENSITY = 0.8

DAILY_WIDTH = 16
DAILY_HEIGHT = 16
DAILY_MINES = 40


# ============================================================================
# Validation
# ============================================================================

def validate_board(width: int, height: int, num_mines: int) -> None:
    """
    Check board dimensions and mine count.

    Raises:
        ValueError: If a side is below MIN_DIMENSION, there is no mine, or
            the mines would leave no safe cell.
    """
    if width < MIN_DIMENSION or height < MIN_DIMENSION:
        raise ValueError(f"Board dimensions must be at least {MIN_DIMENSION}")
    if num_mines < 1:
        raise ValueError("Board needs at least one mine")
    if num_mines >= width * height:
        raise ValueError(f"Too many mines (max {width * height - 1})")


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a minefield board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        validate_board(self.width, self.height, self.num_mines)
        if self.density > MAX_RECOMMENDED_DENSITY:
            logger.warning(
                "Mine density %.0f%% exceeds the recommended %.0f%%",
                self.density * 100,
                MAX_RECOMMENDED_DENSITY * 100,
            )

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height

    @property
    def density(self) -> float:
        """Fraction of cells holding a mine."""
        return self.num_mines / self.total_cells

    @property
    def safe_cells(self) -> int:
        """Number of cells without a mine."""
        return self.total_cells - self.num_mines


# ============================================================================
# Difficulty Presets
# ============================================================================

class Difficulty(Enum):
    """Named difficulty levels; CUSTOM boards are never scored."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"
    MASTER = "master"
    INSANE = "insane"
    EXTREME = "extreme"
    CUSTOM = "custom"


BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)
MASTER = BoardConfig(40, 20, 160)
INSANE = BoardConfig(50, 25, 250)
EXTREME = BoardConfig(60, 30, 360)

DIFFICULTY_CONFIGS: Dict[Difficulty, BoardConfig] = {
    Difficulty.BEGINNER: BEGINNER,
    Difficulty.INTERMEDIATE: INTERMEDIATE,
    Difficulty.EXPERT: EXPERT,
    Difficulty.MASTER: MASTER,
    Difficulty.INSANE: INSANE,
    Difficulty.EXTREME: EXTREME,
}


def config_for(difficulty: Difficulty) -> Optional[BoardConfig]:
    """Get the preset board for a difficulty, or None for CUSTOM."""
    return DIFFICULTY_CONFIGS.get(difficulty)


# ============================================================================
# Daily Puzzle Configuration
# ============================================================================

@dataclass(frozen=True)
class DailyPuzzleConfig:
    """
    Shared daily board, reproducible on every client from its seed.

    Attributes:
        seed: String fed to the seeded generator.
        width: Number of columns.
        height: Number of rows.
        num_mines: Exact number of mines to place.
    """

    seed: str
    width: int = DAILY_WIDTH
    height: int = DAILY_HEIGHT
    num_mines: int = DAILY_MINES

    def __post_init__(self) -> None:
        """Validate with the same rules as an interactive board."""
        validate_board(self.width, self.height, self.num_mines)

    @classmethod
    def for_date(cls, date: datetime.date) -> "DailyPuzzleConfig":
        """Build the puzzle published for a calendar date."""
        return cls(seed=daily_seed(date))

    @property
    def board_config(self) -> BoardConfig:
        """Interactive-engine view of this puzzle's dimensions."""
        return BoardConfig(self.width, self.height, self.num_mines)


def daily_seed(date: datetime.date) -> str:
    """Seed string for a date, e.g. ``daily-2024-01-01``."""
    return f"daily-{date.isoformat()}"
