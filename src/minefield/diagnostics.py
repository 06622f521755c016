"""
Diagnostics for comparing placement strategies.

Used from benchmarks and tests only; callers construct a comparer
explicitly and nothing here runs during normal play.
"""
import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from .config import BoardConfig
from .evaluation import LayoutAnalysis, analyze_layout
from .grid import create_empty_board
from .layout import generate_single_layout
from .placement import place_mines
from .strategies import PlacementStrategy

logger = logging.getLogger(__name__)


@dataclass
class StrategySummary:
    """Mean layout metrics for one way of placing mines."""

    name: str
    runs: int
    mean_score: float
    mean_fifty_fifty: float
    mean_information_density: float

    @classmethod
    def from_analyses(cls, name: str, analyses: List[LayoutAnalysis]) -> "StrategySummary":
        return cls(
            name=name,
            runs=len(analyses),
            mean_score=float(np.mean([a.score for a in analyses])),
            mean_fifty_fifty=float(np.mean([a.fifty_fifty_count for a in analyses])),
            mean_information_density=float(
                np.mean([a.information_density for a in analyses])
            ),
        )


@dataclass
class ComparisonReport:
    """Baseline vs. scored placement over the same first clicks."""

    baseline: StrategySummary
    candidates: Dict[str, StrategySummary]

    def improvement(self, name: str) -> float:
        """
        Fraction of baseline 50/50 cells avoided by a candidate.

        Positive means fewer 50/50 shapes than the baseline.
        """
        base = self.baseline.mean_fifty_fifty
        if base == 0:
            return 0.0
        return (base - self.candidates[name].mean_fifty_fifty) / base


class LayoutComparer:
    """
    Compare a single uniform layout against best-of-N placement.

    Example:
        >>> comparer = LayoutComparer(BoardConfig(9, 9, 10), runs=5)
        >>> report = comparer.compare()
        >>> report.baseline.runs
        5
    """

    def __init__(
        self,
        config: BoardConfig,
        runs: int = 10,
        first_click: Optional[Tuple[int, int]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize the comparer.

        Args:
            config: Board configuration to generate.
            runs: Layouts generated per strategy.
            first_click: (x, y) of the first click (default: board center).
            rng: Random source shared by every run.
        """
        self.config = config
        self.runs = runs
        self.first_click = first_click or (config.width // 2, config.height // 2)
        self.rng = rng or random.Random()

    def compare(
        self, strategies: Optional[Dict[str, Optional[PlacementStrategy]]] = None
    ) -> ComparisonReport:
        """
        Run the baseline and each candidate strategy ``runs`` times.

        Args:
            strategies: Name to strategy; None as a strategy means the
                default best-of-N placement.

        Returns:
            Report with per-strategy means.
        """
        strategies = strategies or {"scored": None}
        board = create_empty_board(self.config.width, self.config.height)
        first_x, first_y = self.first_click

        baseline = [
            analyze_layout(
                generate_single_layout(board, self.config, first_x, first_y, self.rng)
            )
            for _ in range(self.runs)
        ]

        candidates = {}
        for name, strategy in strategies.items():
            analyses = [
                analyze_layout(
                    place_mines(board, self.config, first_x, first_y, strategy, self.rng)
                )
                for _ in range(self.runs)
            ]
            candidates[name] = StrategySummary.from_analyses(name, analyses)

        report = ComparisonReport(
            baseline=StrategySummary.from_analyses("baseline", baseline),
            candidates=candidates,
        )
        for name in candidates:
            logger.debug(
                "%s: %.1f%% fewer 50/50 cells than baseline",
                name,
                report.improvement(name) * 100,
            )
        return report
