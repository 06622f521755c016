"""
Score computation and the collaborator interfaces that consume results.

The engine reports a ``GameResult``; this module turns it into the
records the leaderboard and statistics stores expect. Submitting and
persisting them is left to implementations of ``ScoreSubmitter`` and to
whatever stores ``GameStatistics.to_dict()``.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .config import BoardConfig, Difficulty
from .game import GameResult


# ============================================================================
# Constants
# ============================================================================

MAX_TIME = 999

DIFFICULTY_MULTIPLIERS: Dict[Difficulty, int] = {
    Difficulty.BEGINNER: 1,
    Difficulty.INTERMEDIATE: 2,
    Difficulty.EXPERT: 3,
    Difficulty.MASTER: 4,
    Difficulty.INSANE: 5,
    Difficulty.EXTREME: 6,
}


# ============================================================================
# Score Functions
# ============================================================================

def compute_score(time_elapsed: int, difficulty: Difficulty) -> Optional[int]:
    """
    Leaderboard score for a won game: faster and harder scores higher.

    Returns:
        ``round(max(0, 999 - time_elapsed) * multiplier)``, or None for
        custom boards, which are never scored.
    """
    multiplier = DIFFICULTY_MULTIPLIERS.get(difficulty)
    if multiplier is None:
        return None
    return round(max(0, MAX_TIME - time_elapsed) * multiplier)


def daily_score(time_elapsed: int, completed: bool) -> int:
    """Daily puzzle score; an unfinished attempt scores 0."""
    if not completed:
        return 0
    return max(0, MAX_TIME - time_elapsed)


@dataclass(frozen=True)
class ScoreSubmission:
    """Record handed to a leaderboard collaborator."""

    time_elapsed: int
    score: int
    config: BoardConfig
    completed: bool
    difficulty: Difficulty
    session_id: str

    @classmethod
    def from_result(
        cls,
        result: GameResult,
        config: BoardConfig,
        difficulty: Difficulty,
        session_id: str,
    ) -> Optional["ScoreSubmission"]:
        """Build a submission for a won, scorable game, else None."""
        if not result.won:
            return None
        score = compute_score(result.time_elapsed, difficulty)
        if score is None:
            return None
        return cls(
            time_elapsed=result.time_elapsed,
            score=score,
            config=config,
            completed=True,
            difficulty=difficulty,
            session_id=session_id,
        )


class ScoreSubmitter(ABC):
    """
    Leaderboard collaborator interface.

    Implementations raise ``DuplicateSubmissionError`` when a session
    was already submitted.
    """

    @abstractmethod
    def submit(self, submission: ScoreSubmission) -> None:
        """Record a submission."""


# ============================================================================
# Statistics
# ============================================================================

@dataclass
class GameStatistics:
    """Lifetime counters and best time per difficulty."""

    games_played: int = 0
    games_won: int = 0
    games_lost: int = 0
    total_play_time: int = 0
    best_times: Dict[str, Optional[int]] = field(default_factory=dict)

    def record(self, difficulty: Difficulty, result: GameResult) -> None:
        """Fold one finished game in; custom games are not tracked."""
        if difficulty == Difficulty.CUSTOM:
            return
        self.games_played += 1
        self.total_play_time += result.time_elapsed
        if not result.won:
            self.games_lost += 1
            return
        self.games_won += 1
        best = self.best_times.get(difficulty.value)
        if best is None or result.time_elapsed < best:
            self.best_times[difficulty.value] = result.time_elapsed

    @property
    def win_rate(self) -> float:
        """Fraction of played games that were won."""
        if not self.games_played:
            return 0.0
        return self.games_won / self.games_played

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "games_played": self.games_played,
            "games_won": self.games_won,
            "games_lost": self.games_lost,
            "total_play_time": self.total_play_time,
            "best_times": dict(self.best_times),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameStatistics":
        """Restore from ``to_dict`` output; missing keys take defaults."""
        return cls(
            games_played=data.get("games_played", 0),
            games_won=data.get("games_won", 0),
            games_lost=data.get("games_lost", 0),
            total_play_time=data.get("total_play_time", 0),
            best_times=dict(data.get("best_times", {})),
        )
