"""
Mine placement strategies.

Every strategy pairs a way of generating a candidate layout with a way of
scoring it, plus an attempt budget and a "good enough" target. The
placement engine runs any strategy through the same best-of-N loop.
"""
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Tuple

import numpy as np

from .config import BoardConfig
from .evaluation import (
    analyze_complexity,
    analyze_distribution,
    analyze_solvability,
    analyze_symmetry,
    evaluate_layout,
)
from .grid import Board, count_adjacent_mines, neighbor_sum
from .layout import (
    Position,
    available_positions,
    build_layout,
    generate_single_layout,
    is_corner,
    is_edge,
    shuffled,
)


# ============================================================================
# Strategy Interface
# ============================================================================

class PlacementStrategy(ABC):
    """
    Abstract base class for placement strategies.

    Subclasses implement ``generate_layout``; the default scoring is the
    layout evaluator.
    """

    name = "base"

    @abstractmethod
    def generate_layout(
        self,
        board: Board,
        config: BoardConfig,
        first_x: int,
        first_y: int,
        rng: random.Random,
    ) -> Board:
        """
        Produce one candidate layout.

        Must keep the safe zone around (first_x, first_y) mine-free and
        place ``min(config.num_mines, available)`` mines.
        """

    def score_layout(self, board: Board) -> float:
        """Score a candidate; higher is better."""
        return evaluate_layout(board)

    def max_attempts(self, config: BoardConfig) -> int:
        """Number of candidates to try."""
        return min(50, 2 * config.num_mines)

    def target_score(self, config: BoardConfig) -> float:
        """Score at which the search stops early."""
        return 0.8 * config.num_mines

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# ============================================================================
# Baseline Strategy
# ============================================================================

class UniformStrategy(PlacementStrategy):
    """Uniform shuffle of eligible positions, ranked by the evaluator."""

    name = "uniform"

    def generate_layout(
        self,
        board: Board,
        config: BoardConfig,
        first_x: int,
        first_y: int,
        rng: random.Random,
    ) -> Board:
        return generate_single_layout(board, config, first_x, first_y, rng)


# ============================================================================
# Weighted Strategies
# ============================================================================

@dataclass(frozen=True)
class ScoreWeights:
    """Weights for combining the whole-board analyzers."""

    solvability: float
    symmetry: float
    distribution: float
    complexity: float = 0.1


class WeightedScoreStrategy(PlacementStrategy):
    """Base for strategies scored by a weighted mix of analyzers."""

    weights = ScoreWeights(solvability=1.0, symmetry=0.0, distribution=0.0)
    attempt_limit = 50
    target_ratio = 0.7

    def score_layout(self, board: Board) -> float:
        weights = self.weights
        return (
            analyze_solvability(board) * weights.solvability
            + analyze_symmetry(board) * weights.symmetry
            + analyze_distribution(board) * weights.distribution
            + analyze_complexity(board) * weights.complexity
        )

    def max_attempts(self, config: BoardConfig) -> int:
        return self.attempt_limit

    def target_score(self, config: BoardConfig) -> float:
        return config.total_cells * self.target_ratio


class ConstraintSatisfactionStrategy(WeightedScoreStrategy):
    """
    Weighted random picks that discourage clustering and borders.

    Each placed mine halves the weight of its orthogonal neighbors and
    sometimes drops them from the pool altogether. Meant for dense boards.
    """

    name = "constraint-satisfaction"
    weights = ScoreWeights(solvability=0.6, symmetry=0.2, distribution=0.2)
    target_ratio = 0.9
    drop_chance = 0.3

    def max_attempts(self, config: BoardConfig) -> int:
        return min(100, config.total_cells)

    def generate_layout(
        self,
        board: Board,
        config: BoardConfig,
        first_x: int,
        first_y: int,
        rng: random.Random,
    ) -> Board:
        width, height = board.width, board.height
        positions = available_positions(first_x, first_y, width, height)
        mines_to_place = min(config.num_mines, len(positions))

        pool = list(positions)
        weights = np.array(
            [self._zone_weight(x, y, width, height) for x, y in pool]
        )
        placed: List[Position] = []

        while len(placed) < mines_to_place:
            if not pool:
                # Dropped positions are eligible again once the pool runs dry.
                taken = set(placed)
                pool = [p for p in positions if p not in taken]
                weights = np.array(
                    [self._zone_weight(x, y, width, height) for x, y in pool]
                )
            index = _weighted_index(weights, rng)
            chosen = pool.pop(index)
            weights = np.delete(weights, index)
            placed.append(chosen)
            pool, weights = self._update_constraints(chosen, pool, weights, rng)

        return build_layout(board, placed)

    @staticmethod
    def _zone_weight(x: int, y: int, width: int, height: int) -> float:
        if is_corner(x, y, width, height):
            return 0.7
        if is_edge(x, y, width, height):
            return 0.9
        return 1.2

    def _update_constraints(
        self,
        chosen: Position,
        pool: List[Position],
        weights: np.ndarray,
        rng: random.Random,
    ) -> Tuple[List[Position], np.ndarray]:
        keep = []
        for index, (x, y) in enumerate(pool):
            if abs(x - chosen[0]) + abs(y - chosen[1]) == 1:
                weights[index] *= 0.5
                if rng.random() < self.drop_chance:
                    continue
            keep.append(index)
        return [pool[i] for i in keep], weights[keep]


class WeightedZoneStrategy(WeightedScoreStrategy):
    """
    Fixed quotas per zone: 50% center, 35% edges, 15% corners.

    A zone too small for its quota spills the remainder onto any free
    eligible position. Meant for large, moderately dense boards.
    """

    name = "weighted-zones"
    weights = ScoreWeights(solvability=0.5, symmetry=0.25, distribution=0.25)
    attempt_limit = 75
    target_ratio = 0.8
    center_ratio = 0.5
    edge_ratio = 0.35

    def generate_layout(
        self,
        board: Board,
        config: BoardConfig,
        first_x: int,
        first_y: int,
        rng: random.Random,
    ) -> Board:
        width, height = board.width, board.height
        positions = available_positions(first_x, first_y, width, height)
        mines_to_place = min(config.num_mines, len(positions))

        zones: Dict[str, List[Position]] = {"corners": [], "edges": [], "center": []}
        for x, y in positions:
            if is_corner(x, y, width, height):
                zones["corners"].append((x, y))
            elif is_edge(x, y, width, height):
                zones["edges"].append((x, y))
            else:
                zones["center"].append((x, y))

        center = int(mines_to_place * self.center_ratio)
        edges = int(mines_to_place * self.edge_ratio)
        quotas = {
            "center": center,
            "edges": edges,
            "corners": mines_to_place - center - edges,
        }

        placed: List[Position] = []
        for zone, quota in quotas.items():
            placed.extend(shuffled(zones[zone], rng)[:quota])

        if len(placed) < mines_to_place:
            taken = set(placed)
            spare = [p for p in positions if p not in taken]
            placed.extend(shuffled(spare, rng)[:mines_to_place - len(placed)])

        return build_layout(board, placed)


class PatternAwareStrategy(WeightedScoreStrategy):
    """
    Greedy placement picking among the five best-scoring positions.

    A position scores well when it keeps away from other mines, pushes
    neighboring numbers into the 2-4 range and avoids the border. Meant
    for small and sparse boards.
    """

    name = "pattern-aware"
    weights = ScoreWeights(solvability=0.7, symmetry=0.15, distribution=0.15)
    top_candidates = 5

    # Preference for the count a neighbor would show, indexed by count.
    number_preference = np.array([0, 1, 2, 2, 2, 1, -3, -3, -3])

    def generate_layout(
        self,
        board: Board,
        config: BoardConfig,
        first_x: int,
        first_y: int,
        rng: random.Random,
    ) -> Board:
        width, height = board.width, board.height
        positions = available_positions(first_x, first_y, width, height)
        mines_to_place = min(config.num_mines, len(positions))

        border = np.zeros((height, width))
        border[[0, -1], :] = 0.5
        border[:, [0, -1]] = 0.5
        for x, y in ((0, 0), (width - 1, 0), (0, height - 1), (width - 1, height - 1)):
            border[y, x] = 1.0

        mines = np.zeros((height, width), dtype=bool)
        candidates = np.array(positions)
        placed: List[Position] = []

        for _ in range(mines_to_place):
            scores = self._position_scores(mines, border, candidates, placed)
            order = np.argsort(-scores, kind="stable")[:self.top_candidates]
            pick = int(order[rng.randrange(len(order))])
            x, y = (int(v) for v in candidates[pick])
            mines[y, x] = True
            placed.append((x, y))
            candidates = np.delete(candidates, pick, axis=0)

        return build_layout(board, placed)

    def _position_scores(
        self,
        mines: np.ndarray,
        border: np.ndarray,
        candidates: np.ndarray,
        placed: List[Position],
    ) -> np.ndarray:
        counts = count_adjacent_mines(mines)
        preference = self.number_preference[np.minimum(counts + 1, 8)]
        preference[mines] = 0
        local = neighbor_sum(preference)

        xs, ys = candidates[:, 0], candidates[:, 1]
        scores = local[ys, xs].astype(float) - border[ys, xs]

        if placed:
            placed_arr = np.array(placed)
            gaps = np.abs(candidates[:, None, :] - placed_arr[None, :, :]).sum(axis=2)
            nearest = gaps.min(axis=1)
            scores += np.select(
                [nearest >= 3, nearest == 2, nearest == 1],
                [3.0, 1.0, -2.0],
                default=0.0,
            )
        return scores


def _weighted_index(weights: np.ndarray, rng: random.Random) -> int:
    """Pick an index with probability proportional to its weight."""
    cumulative = np.cumsum(weights)
    target = rng.random() * cumulative[-1]
    index = int(np.searchsorted(cumulative, target, side="right"))
    return min(index, len(weights) - 1)


# ============================================================================
# Strategy Selection
# ============================================================================

def select_strategy(width: int, height: int, density: float) -> PlacementStrategy:
    """
    Pick a strategy from board size and mine density.

    Dense boards (> 20%) get constraint satisfaction, large boards
    (> 256 cells) above 15% get weighted zones, everything else gets
    pattern-aware placement.
    """
    total_cells = width * height
    if density > 0.2:
        return ConstraintSatisfactionStrategy()
    if total_cells > 256 and density > 0.15:
        return WeightedZoneStrategy()
    return PatternAwareStrategy()


STRATEGIES: Dict[str, type] = {
    strategy.name: strategy
    for strategy in (
        UniformStrategy,
        ConstraintSatisfactionStrategy,
        WeightedZoneStrategy,
        PatternAwareStrategy,
    )
}
