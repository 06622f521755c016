"""
Game module for the minefield engine.

Implements the game state machine (ready -> playing -> won/lost) on top of
the pure board transitions, and a controller that keeps the current
snapshot, the clock and the placement settings.
"""
import logging
import random
import time
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Optional

from .cell import Cell
from .config import BoardConfig, DailyPuzzleConfig
from .daily import generate_daily
from .grid import Board, create_empty_board
from .placement import place_mines
from .reveal import check_win, reveal, reveal_all_mines, toggle_flag
from .strategies import PlacementStrategy

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    READY = "ready"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        """Won and lost games accept no further moves."""
        return self in (GameStatus.WON, GameStatus.LOST)


EXPLOSION_DELAY_MS = 150


# ============================================================================
# State Snapshots
# ============================================================================

@dataclass(frozen=True)
class GameStats:
    """Counters shown alongside the board."""

    flags_used: int = 0
    cells_revealed: int = 0


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of one game.

    Attributes:
        board: Current board.
        config: Board configuration.
        status: Where the game is in its lifecycle.
        first_click_taken: True once mines exist on the board.
        stats: Flag and reveal counters for ``board``.
    """

    board: Board
    config: BoardConfig
    status: GameStatus = GameStatus.READY
    first_click_taken: bool = False
    stats: GameStats = field(default_factory=GameStats)

    # Holds a mutable Board: equality only, no hashing.
    __hash__ = None


@dataclass(frozen=True)
class GameResult:
    """Outcome handed to statistics and score collaborators."""

    won: bool
    time_elapsed: int


# ============================================================================
# State Transitions
# ============================================================================

def new_game(config: BoardConfig) -> GameState:
    """Create a ready game on an empty board; mines come with the first reveal."""
    return GameState(
        board=create_empty_board(config.width, config.height),
        config=config,
    )


def new_daily_game(puzzle: DailyPuzzleConfig) -> GameState:
    """Create a ready game whose mines are already fixed by the seed."""
    return GameState(
        board=generate_daily(puzzle),
        config=puzzle.board_config,
        first_click_taken=True,
    )


def apply_reveal(
    state: GameState,
    x: int,
    y: int,
    strategy: Optional[PlacementStrategy] = None,
    rng: Optional[random.Random] = None,
) -> GameState:
    """
    Reveal a cell and advance the game status.

    The first reveal of a fresh game places mines around a safe zone at
    (x, y). Terminal games, out-of-bounds targets and revealed or flagged
    cells leave the state unchanged.
    """
    if state.status.is_terminal:
        return state
    target = state.board.get_cell(x, y)
    if target is None or not target.is_hidden:
        return state

    board = state.board
    first_click_taken = state.first_click_taken
    if not first_click_taken:
        board = place_mines(board, state.config, x, y, strategy, rng)
        first_click_taken = True

    board = reveal(board, x, y)
    status = GameStatus.PLAYING

    if board.cells[y][x].is_mine:
        board = reveal_all_mines(board, origin=(x, y), delay_step=EXPLOSION_DELAY_MS)
        status = GameStatus.LOST
    elif check_win(board):
        status = GameStatus.WON

    return replace(
        state,
        board=board,
        status=status,
        first_click_taken=first_click_taken,
        stats=_stats_for(board),
    )


def apply_flag(state: GameState, x: int, y: int) -> GameState:
    """Toggle a flag; terminal games and revealed cells are unchanged."""
    if state.status.is_terminal:
        return state
    target = state.board.get_cell(x, y)
    if target is None or target.is_revealed:
        return state
    board = toggle_flag(state.board, x, y)
    return replace(state, board=board, stats=_stats_for(board))


def _stats_for(board: Board) -> GameStats:
    return GameStats(
        flags_used=board.flags_used,
        cells_revealed=board.cells_revealed,
    )


# ============================================================================
# Game Controller
# ============================================================================

class Game:
    """
    Stateful controller around ``GameState`` snapshots.

    Times the game from the first reveal to the terminal transition with
    an injectable clock.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        strategy: Optional[PlacementStrategy] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize a new game.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            strategy: Placement strategy for the first reveal.
            rng: Random source for placement.
            clock: Returns the current time in seconds.
        """
        self.config = config or BoardConfig()
        self.strategy = strategy
        self.rng = rng
        self.clock = clock
        self._puzzle: Optional[DailyPuzzleConfig] = None
        self._state = new_game(self.config)
        self._started_at: Optional[float] = None
        self._finished_at: Optional[float] = None

    @classmethod
    def daily(
        cls,
        puzzle: DailyPuzzleConfig,
        clock: Callable[[], float] = time.monotonic,
    ) -> "Game":
        """Start a game on the deterministic board for a puzzle."""
        game = cls(puzzle.board_config, clock=clock)
        game._puzzle = puzzle
        game._state = new_daily_game(puzzle)
        return game

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, x: int, y: int) -> bool:
        """
        Reveal the cell at (x, y).

        Returns:
            True if the board changed, False otherwise.
        """
        previous = self._state
        self._state = apply_reveal(previous, x, y, self.strategy, self.rng)
        if self._state is previous:
            return False

        if previous.status == GameStatus.READY:
            self._started_at = self.clock()
        if self._state.status.is_terminal:
            self._finished_at = self.clock()
            logger.info(
                "Game %s after %ds on %dx%d",
                self._state.status.value,
                self.time_elapsed,
                self.config.width,
                self.config.height,
            )
        return True

    def flag(self, x: int, y: int) -> bool:
        """
        Toggle the flag at (x, y).

        Returns:
            True if the flag was toggled, False otherwise.
        """
        previous = self._state
        self._state = apply_flag(previous, x, y)
        return self._state is not previous

    def reset(self) -> None:
        """Discard the board and start over with the same configuration."""
        if self._puzzle is not None:
            self._state = new_daily_game(self._puzzle)
        else:
            self._state = new_game(self.config)
        self._started_at = None
        self._finished_at = None

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def state(self) -> GameState:
        """Get the current snapshot."""
        return self._state

    @property
    def board(self) -> Board:
        """Get the current board."""
        return self._state.board

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return self._state.status

    @property
    def is_playing(self) -> bool:
        """Check if the game accepts moves."""
        return not self._state.status.is_terminal

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._state.status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._state.status == GameStatus.LOST

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        return self._state.board.get_cell(x, y)

    @property
    def time_elapsed(self) -> int:
        """Whole seconds since the first reveal (frozen once finished)."""
        if self._started_at is None:
            return 0
        end = self._finished_at if self._finished_at is not None else self.clock()
        return int(end - self._started_at)

    def result(self) -> Optional[GameResult]:
        """Get the outcome once the game is over, else None."""
        if not self._state.status.is_terminal:
            return None
        return GameResult(won=self.is_won, time_elapsed=self.time_elapsed)
