"""
Depth-First Strategy - Stack-based search returning the first solution found.
"""

from typing import List

from ..base import Frontier, SearchNode, SolverStrategy
from ..factory import register_strategy


class StackFrontier(Frontier):
    """LIFO frontier: the most recently pushed node is expanded first."""

    def __init__(self):
        self._stack: List[SearchNode] = []

    def push(self, node: SearchNode) -> None:
        self._stack.append(node)

    def pop(self) -> SearchNode:
        return self._stack.pop()

    def __len__(self) -> int:
        return len(self._stack)


@register_strategy
class DepthFirstStrategy(SolverStrategy):
    """
    Depth-first search over transfusions.

    Finds some solution quickly but puts no bound on its length. Children
    are pushed in (source, destination) order, so the last legal pair of a
    layout is explored first.
    """
    name = "fastest"
    description = "Fastest - Depth-first search, no bound on move count"
    log_prefix = "DepthFirst"

    def _create_frontier(self) -> Frontier:
        return StackFrontier()
