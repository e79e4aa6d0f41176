"""
Base Strategy Module - Abstract base class for search strategies.

All strategies share one search loop over the graph of layouts reachable
by legal transfusions. They differ only in the frontier: the order nodes
are taken out, and which nodes are admitted for expansion.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple

from .context import SolutionContext
from .fingerprint import fingerprint
from .layout import Layout
from .move import Transfusion
from .solution import Solution, SolutionMetrics

logger = logging.getLogger(__name__)


@dataclass
class SearchNode:
    """
    Node in the search graph.

    Attributes:
        layout: Layout reached by the path
        path: Transfusions taken from the start layout
        metric: Sortedness metric (only used by priority search)
    """
    layout: Layout
    path: Tuple[Transfusion, ...]
    metric: int = 0

    @property
    def depth(self) -> int:
        """Number of moves taken to reach this node."""
        return len(self.path)


class Frontier(ABC):
    """
    Not-yet-expanded search nodes of a single search run.

    Subclasses decide the order in which nodes are popped and which nodes
    pass the admission filter.
    """

    @abstractmethod
    def push(self, node: SearchNode) -> None:
        pass

    @abstractmethod
    def pop(self) -> SearchNode:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def admit(self, node: SearchNode) -> bool:
        """
        Decide whether a node may be expanded.

        Called both before a node is pushed and after it is popped.

        Args:
            node: Candidate node

        Returns:
            True if the node should be kept
        """
        return True


class SolverStrategy(ABC):
    """
    Abstract base class for all search strategies.

    Subclasses must implement _create_frontier() and define name and
    description class attributes.

    Attributes:
        name: Short identifier for the strategy (the solving method)
        description: Human-readable description
        log_prefix: Tag used in log messages
    """
    name: str = "base"
    description: str = "Base strategy"
    log_prefix: str = "Search"

    # Expanded nodes between debug progress messages
    LOG_INTERVAL = 10000

    @abstractmethod
    def _create_frontier(self) -> Frontier:
        """Create an empty frontier for one search run."""
        pass

    def _create_node(self, layout: Layout, path: Tuple[Transfusion, ...]) -> SearchNode:
        """
        Build a search node for a layout.

        Args:
            layout: Layout reached
            path: Transfusions taken to reach it

        Returns:
            SearchNode instance
        """
        return SearchNode(layout=layout, path=path)

    def solve(self, context: SolutionContext) -> Solution:
        """
        Search for a sequence of transfusions that solves the context layout.

        The first solved layout discovered ends the search. Every layout is
        expanded at most once: children whose fingerprint has been seen
        before are skipped.

        Args:
            context: Solution context with the start layout

        Returns:
            Solution with moves, or with is_solved False if the frontier
            was exhausted
        """
        start = context.layout

        frontier = self._create_frontier()
        visited = {fingerprint(start)}
        frontier.push(self._create_node(start, ()))

        states_explored = 0
        pruned = 0

        logger.debug(
            f"[{self.log_prefix}] Searching {len(start)} containers, "
            f"{start.total_layers} layers"
        )

        while len(frontier) > 0:
            node = frontier.pop()

            if not frontier.admit(node):
                pruned += 1
                continue

            states_explored += 1
            if states_explored % self.LOG_INTERVAL == 0:
                logger.debug(
                    f"[{self.log_prefix}] {states_explored} states explored, "
                    f"{len(frontier)} in frontier, {len(visited)} visited"
                )

            for source, destination in node.layout.valid_transfusions():
                layout = node.layout.copy()
                layout.transfuse(source, destination)

                key = fingerprint(layout)
                if key in visited:
                    continue
                visited.add(key)

                child = self._create_node(
                    layout, node.path + (Transfusion(source, destination),)
                )

                if layout.is_solved:
                    logger.info(
                        f"[{self.log_prefix}] Solution found: {child.depth} moves, "
                        f"{states_explored} states explored"
                    )
                    return self._build_solution(
                        context, child.path, True, states_explored, pruned
                    )

                if frontier.admit(child):
                    frontier.push(child)
                else:
                    pruned += 1

        logger.info(
            f"[{self.log_prefix}] No solution with {context.empty_containers} "
            f"empty containers, {states_explored} states explored"
        )
        return self._build_solution(
            context, (), False, states_explored, pruned
        )

    def _build_solution(
        self,
        context: SolutionContext,
        path: Tuple[Transfusion, ...],
        is_solved: bool,
        states_explored: int,
        pruned: int
    ) -> Solution:
        """Build Solution object from search results."""
        elapsed_ms = context.elapsed_time() * 1000

        return Solution(
            moves=list(path),
            is_solved=is_solved,
            empty_containers=context.empty_containers,
            initial_layout=context.layout.copy(),
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                states_explored=states_explored,
                pruned_branches=pruned,
                attempts=1,
                strategy_name=self.name
            )
        )
