"""
Priority Search Strategy - Move-count-ordered search with a metric beam.

Nodes are expanded in ascending move count, and within one move count in
descending sortedness metric. A node is only admitted while its metric is
within a tolerance of the best metric seen so far for its move count.

The pruning makes this a beam-style heuristic: it usually finds the
shortest solution or one close to it, but it is not guaranteed to.
"""

import heapq
import itertools
from typing import Dict, List, Optional, Tuple

from ..base import Frontier, SearchNode, SolverStrategy
from ..factory import register_strategy
from ..layout import Layout
from ..metric import sortedness_metric
from ..move import Transfusion


class PriorityFrontier(Frontier):
    """
    Heap frontier ordered by (move count, -metric, insertion order).

    Attributes:
        tolerance: Allowed metric shortfall against the best metric
                   known for the same move count
    """

    def __init__(self, tolerance: int):
        self.tolerance = tolerance
        self._heap: List[Tuple[int, int, int, SearchNode]] = []
        self._counter = itertools.count()
        # Best metric seen per move count
        self._best_metric: Dict[int, int] = {}

    def push(self, node: SearchNode) -> None:
        heapq.heappush(
            self._heap, (node.depth, -node.metric, next(self._counter), node)
        )

    def pop(self) -> SearchNode:
        return heapq.heappop(self._heap)[-1]

    def __len__(self) -> int:
        return len(self._heap)

    def admit(self, node: SearchNode) -> bool:
        """
        Keep a node only if its metric is close to the best for its depth.

        Admitting a node with a new best metric raises the bar for every
        later node of the same depth, including ones already queued.
        """
        best = self._best_metric.get(node.depth)
        if best is None:
            self._best_metric[node.depth] = node.metric
            return True
        if best > node.metric + self.tolerance:
            return False
        if node.metric > best:
            self._best_metric[node.depth] = node.metric
        return True


class PrioritySearchStrategy(SolverStrategy):
    """
    Priority search with a configurable metric tolerance.

    Parameters:
        tolerance: Non-negative metric slack per move count. 0 keeps only
                   metric-maximal nodes, larger values widen the beam.
    """
    name = "priority"
    description = "Priority search - Move count first, sortedness second"
    log_prefix = "Priority"
    default_tolerance = 0

    def __init__(self, tolerance: Optional[int] = None):
        """
        Initialize priority search strategy.

        Args:
            tolerance: Metric slack (defaults to the class default_tolerance)

        Raises:
            ValueError: If tolerance is negative
        """
        if tolerance is None:
            tolerance = self.default_tolerance
        if tolerance < 0:
            raise ValueError(f"Tolerance must be non-negative, got {tolerance}")
        self.tolerance = tolerance

    def _create_frontier(self) -> Frontier:
        return PriorityFrontier(self.tolerance)

    def _create_node(self, layout: Layout, path: Tuple[Transfusion, ...]) -> SearchNode:
        return SearchNode(layout=layout, path=path, metric=sortedness_metric(layout))


@register_strategy
class ShortestStrategy(PrioritySearchStrategy):
    """Priority search keeping only the best-sorted nodes at every move count."""
    name = "shortest"
    description = "Shortest - Priority search, strict pruning"
    log_prefix = "Shortest"
    default_tolerance = 0


@register_strategy
class BalancedStrategy(PrioritySearchStrategy):
    """Priority search with a slightly wider beam than shortest."""
    name = "balanced"
    description = "Balanced - Priority search, relaxed pruning"
    log_prefix = "Balanced"
    default_tolerance = 1
