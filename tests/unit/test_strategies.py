"""
Unit tests for placement strategies and strategy selection.
"""
import random

import pytest
from minefield import (
    BoardConfig,
    ConstraintSatisfactionStrategy,
    PatternAwareStrategy,
    UniformStrategy,
    WeightedZoneStrategy,
    create_empty_board,
    select_strategy,
)
from minefield.config import EXPERT, EXTREME, INSANE, MASTER
from minefield.layout import safe_zone
from minefield.strategies import STRATEGIES

ALL_STRATEGIES = [
    UniformStrategy,
    ConstraintSatisfactionStrategy,
    WeightedZoneStrategy,
    PatternAwareStrategy,
]


# ============================================================================
# Selection Tests
# ============================================================================

class TestSelectStrategy:
    """Test strategy choice by size and density."""

    def test_small_sparse_board_is_pattern_aware(self) -> None:
        """Beginner boards get pattern-aware placement."""
        assert isinstance(select_strategy(9, 9, 10 / 81), PatternAwareStrategy)

    def test_dense_board_is_constraint_satisfaction(self) -> None:
        """Anything above 20% density gets constraint satisfaction."""
        strategy = select_strategy(EXPERT.width, EXPERT.height, EXPERT.density)
        assert isinstance(strategy, ConstraintSatisfactionStrategy)

    @pytest.mark.parametrize("config", [MASTER, INSANE, EXTREME])
    def test_large_boards_use_weighted_zones(self, config: BoardConfig) -> None:
        """Large boards at exactly 20% fall through to weighted zones."""
        strategy = select_strategy(config.width, config.height, config.density)
        assert isinstance(strategy, WeightedZoneStrategy)

    def test_256_cells_is_not_large(self) -> None:
        """The large-board rule needs strictly more than 256 cells."""
        assert isinstance(select_strategy(16, 16, 0.18), PatternAwareStrategy)

    def test_registry_is_keyed_by_name(self) -> None:
        """Every strategy is reachable by its name."""
        assert {cls.name for cls in ALL_STRATEGIES} == set(STRATEGIES)


# ============================================================================
# Layout Guarantee Tests
# ============================================================================

class TestStrategyLayouts:
    """Test guarantees every strategy must keep."""

    @pytest.mark.parametrize("strategy_cls", ALL_STRATEGIES)
    @pytest.mark.parametrize(
        "config, first_click",
        [
            (BoardConfig(9, 9, 10), (4, 4)),
            (BoardConfig(16, 16, 40), (0, 0)),
            (BoardConfig(5, 5, 16), (2, 2)),
            (BoardConfig(8, 8, 30), (7, 3)),
        ],
    )
    def test_safe_zone_and_mine_count(self, strategy_cls, config, first_click) -> None:
        """Layouts keep the safe zone clear and place every mine that fits."""
        first_x, first_y = first_click
        board = create_empty_board(config.width, config.height)
        layout = strategy_cls().generate_layout(
            board, config, first_x, first_y, random.Random(99)
        )
        zone = safe_zone(first_x, first_y, config.width, config.height)
        expected = min(config.num_mines, config.total_cells - len(zone))

        assert layout.mine_count == expected
        assert not any(layout.cells[y][x].is_mine for x, y in zone)
        assert board.mine_count == 0

    @pytest.mark.parametrize("strategy_cls", ALL_STRATEGIES)
    def test_same_rng_same_layout(self, strategy_cls) -> None:
        """Layouts depend only on the random source."""
        config = BoardConfig(9, 9, 10)
        board = create_empty_board(9, 9)
        first = strategy_cls().generate_layout(board, config, 4, 4, random.Random(5))
        second = strategy_cls().generate_layout(board, config, 4, 4, random.Random(5))
        assert first.mine_matrix().tolist() == second.mine_matrix().tolist()


class TestAttemptBudgets:
    """Test attempt budgets and targets."""

    def test_uniform_budget_scales_with_mines(self) -> None:
        """Uniform tries twice the mine count, capped at 50."""
        assert UniformStrategy().max_attempts(BoardConfig(9, 9, 10)) == 20
        assert UniformStrategy().max_attempts(BoardConfig(16, 16, 40)) == 50

    def test_weighted_budgets(self) -> None:
        """Weighted strategies use fixed budgets and cell-based targets."""
        config = BoardConfig(9, 9, 10)
        assert WeightedZoneStrategy().max_attempts(config) == 75
        assert PatternAwareStrategy().max_attempts(config) == 50
        assert ConstraintSatisfactionStrategy().max_attempts(config) == 81
        assert WeightedZoneStrategy().target_score(config) == pytest.approx(81 * 0.8)
