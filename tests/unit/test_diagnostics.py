"""
Unit tests for the strategy comparison diagnostics.
"""
import random

import pytest
from minefield import BoardConfig, LayoutAnalysis, PatternAwareStrategy, UniformStrategy
from minefield.diagnostics import ComparisonReport, LayoutComparer, StrategySummary


def summary(name: str, fifty_fifty: float) -> StrategySummary:
    return StrategySummary(
        name=name,
        runs=1,
        mean_score=0.0,
        mean_fifty_fifty=fifty_fifty,
        mean_information_density=0.0,
    )


class TestStrategySummary:
    """Test averaging of layout analyses."""

    def test_means(self) -> None:
        analyses = [
            LayoutAnalysis(score=10.0, fifty_fifty_count=2, information_density=0.5),
            LayoutAnalysis(score=20.0, fifty_fifty_count=4, information_density=0.7),
        ]
        result = StrategySummary.from_analyses("x", analyses)
        assert result.runs == 2
        assert result.mean_score == pytest.approx(15.0)
        assert result.mean_fifty_fifty == pytest.approx(3.0)
        assert result.mean_information_density == pytest.approx(0.6)


class TestComparisonReport:
    """Test improvement ratios."""

    def test_improvement_is_relative_to_baseline(self) -> None:
        report = ComparisonReport(summary("baseline", 4.0), {"scored": summary("scored", 1.0)})
        assert report.improvement("scored") == pytest.approx(0.75)

    def test_zero_baseline_means_no_improvement(self) -> None:
        report = ComparisonReport(summary("baseline", 0.0), {"scored": summary("scored", 0.0)})
        assert report.improvement("scored") == 0.0


class TestLayoutComparer:
    """Test end-to-end comparisons."""

    def test_default_comparison(self) -> None:
        """Baseline and scored placement each run the requested times."""
        comparer = LayoutComparer(BoardConfig(9, 9, 10), runs=3, rng=random.Random(7))
        report = comparer.compare()
        assert report.baseline.runs == 3
        assert list(report.candidates) == ["scored"]
        assert report.candidates["scored"].runs == 3

    def test_named_strategies(self) -> None:
        """Explicit strategies are reported under their keys."""
        comparer = LayoutComparer(
            BoardConfig(9, 9, 10), runs=2, first_click=(0, 0), rng=random.Random(7)
        )
        report = comparer.compare(
            {"uniform": UniformStrategy(), "pattern": PatternAwareStrategy()}
        )
        assert set(report.candidates) == {"uniform", "pattern"}
        assert comparer.first_click == (0, 0)

    def test_first_click_defaults_to_center(self) -> None:
        comparer = LayoutComparer(BoardConfig(9, 7, 10))
        assert comparer.first_click == (4, 3)

    def test_scored_placement_beats_single_layouts(self) -> None:
        """Best-of-N placement raises the mean layout score over one-shot layouts."""
        comparer = LayoutComparer(BoardConfig(9, 9, 10), runs=30, rng=random.Random(3))
        report = comparer.compare()
        assert report.candidates["scored"].mean_score > report.baseline.mean_score
