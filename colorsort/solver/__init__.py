"""
Solver Package - Search engine for color-sort puzzles.

A puzzle is a set of containers, each holding a stack of colored layers
up to a shared capacity. The engine finds pours that leave every container
either empty or full with a single color.

Public API:
    - Container: One stack of colored layers
    - Layout: Collection of containers forming a puzzle state
    - Transfusion: Pour from one container index to another
    - Solution: Result of a solve
    - SolutionMetrics: Performance statistics
    - SolutionContext: Shared context for strategies
    - SolverStrategy: Abstract base for strategies
    - SolvingMethod: Enumeration of solving methods
    - solve(): Driver retrying with more empty containers
    - fingerprint(): Order-independent layout digest
    - sortedness_metric(): Adjacent same-color pair count
    - create_strategy(): Factory function

Usage:
    from colorsort.solver import solve, SolvingMethod

    solution = solve([[1, 2, 1, 2], [2, 1, 2, 1]], SolvingMethod.SHORTEST)

    if solution.is_solved:
        for source, destination in solution.pairs:
            print(f"Pour {source} into {destination}")
"""

# Core data structures
from .constants import (
    DEFAULT_CAPACITY,
    DEFAULT_EMPTY_CONTAINERS,
    MAX_EMPTY_CONTAINERS,
    SolvingMethod,
)
from .container import Container, CapacityError, InvalidTransfusionError
from .layout import Layout
from .move import Transfusion
from .fingerprint import canonical_form, fingerprint
from .metric import sortedness_metric
from .solution import Solution, SolutionMetrics
from .context import SolutionContext

# Strategy framework
from .base import Frontier, SearchNode, SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

from .driver import solve

__all__ = [
    # Constants
    "DEFAULT_CAPACITY",
    "DEFAULT_EMPTY_CONTAINERS",
    "MAX_EMPTY_CONTAINERS",
    "SolvingMethod",
    # Data structures
    "Container",
    "CapacityError",
    "InvalidTransfusionError",
    "Layout",
    "Transfusion",
    "canonical_form",
    "fingerprint",
    "sortedness_metric",
    "Solution",
    "SolutionMetrics",
    "SolutionContext",
    # Strategy framework
    "Frontier",
    "SearchNode",
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    "solve",
]
