"""
Solution Module - Result of a solve and replay of its moves.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .layout import Layout
from .move import Transfusion


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of search nodes expanded
        pruned_branches: Number of nodes rejected by the admission filter
        attempts: Number of empty-container counts tried by the driver
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    pruned_branches: int = 0
    attempts: int = 0
    strategy_name: str = ""

    def merge(self, other: "SolutionMetrics") -> None:
        """Accumulate another attempt's counters into this one."""
        self.computation_time_ms += other.computation_time_ms
        self.states_explored += other.states_explored
        self.pruned_branches += other.pruned_branches
        self.attempts += other.attempts


@dataclass
class Solution:
    """
    Result of a solve.

    Move indices refer to the extended layout: the puzzle's containers
    followed by empty_containers empty ones.

    Attributes:
        moves: Ordered transfusions that solve the layout
        is_solved: False if no solution was found
        empty_containers: Empty containers appended to the puzzle
        initial_layout: Extended layout the moves apply to
        metrics: Performance statistics
    """
    moves: List[Transfusion] = field(default_factory=list)
    is_solved: bool = False
    empty_containers: int = 0
    initial_layout: Optional[Layout] = None
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    @property
    def pairs(self) -> List[Tuple[int, int]]:
        """Moves as (source, destination) index pairs."""
        return [move.as_pair() for move in self.moves]

    def replay(self) -> Iterator[Layout]:
        """
        Apply the moves one by one to a copy of the initial layout.

        Yields:
            Layout after each move (the initial layout is not yielded)

        Raises:
            ValueError: If the solution carries no initial layout
        """
        if self.initial_layout is None:
            raise ValueError("Solution has no initial layout to replay")

        layout = self.initial_layout.copy()
        for move in self.moves:
            layout.transfuse(move.source, move.destination)
            yield layout.copy()

    def final_layout(self) -> Optional[Layout]:
        """Get the layout after all moves, or None without an initial layout."""
        if self.initial_layout is None:
            return None
        layout = self.initial_layout.copy()
        for move in self.moves:
            layout.transfuse(move.source, move.destination)
        return layout

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a JSON-friendly dictionary.

        Returns:
            Dict with solved flag, moves as pairs, empty container count
            and metrics
        """
        return {
            "solved": self.is_solved,
            "moves": [list(pair) for pair in self.pairs],
            "empty_containers": self.empty_containers,
            "metrics": {
                "computation_time_ms": round(self.metrics.computation_time_ms, 3),
                "states_explored": self.metrics.states_explored,
                "pruned_branches": self.metrics.pruned_branches,
                "attempts": self.metrics.attempts,
                "strategy_name": self.metrics.strategy_name,
            },
        }
