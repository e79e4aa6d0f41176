"""
Tests for the search strategies and the strategy registry.

Usage:
    pytest tests/test_search.py
"""

import sys
import time
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from colorsort.solver import (
    Layout,
    SearchNode,
    SolutionContext,
    create_strategy,
    fingerprint,
    get_default_strategy_name,
    get_strategy_info,
    get_strategy_names,
)
from colorsort.solver.strategies import DepthFirstStrategy, PrioritySearchStrategy
from colorsort.solver.strategies.depth_first import StackFrontier
from colorsort.solver.strategies.priority import PriorityFrontier


CROSSED = [[1, 2, 1, 2], [2, 1, 2, 1]]


def replay(layout, moves):
    state = layout.copy()
    for move in moves:
        state.transfuse(move.source, move.destination)
    return state


def node(depth, metric):
    return SearchNode(layout=Layout(), path=tuple(range(depth)), metric=metric)


class RecordingFrontier(StackFrontier):
    """Stack frontier that remembers the fingerprint of every node handed out."""

    def __init__(self):
        super().__init__()
        self.expanded = []

    def pop(self):
        popped = super().pop()
        self.expanded.append(fingerprint(popped.layout))
        return popped


class RecordingDepthFirst(DepthFirstStrategy):
    name = "recording"

    def __init__(self):
        self.frontier = None

    def _create_frontier(self):
        self.frontier = RecordingFrontier()
        return self.frontier


def test_registry_lists_all_methods():
    assert {"fastest", "balanced", "shortest"} <= set(get_strategy_names())
    assert get_default_strategy_name() == "fastest"

    info = {entry["name"]: entry["description"] for entry in get_strategy_info()}
    assert info["shortest"]


def test_unknown_strategy_raises():
    with pytest.raises(ValueError):
        create_strategy("slowest")


def test_methods_map_to_disciplines():
    assert isinstance(create_strategy("fastest"), DepthFirstStrategy)

    shortest = create_strategy("shortest")
    balanced = create_strategy("balanced")
    assert isinstance(shortest, PrioritySearchStrategy)
    assert shortest.tolerance == 0
    assert balanced.tolerance == 1


def test_negative_tolerance_is_rejected():
    with pytest.raises(ValueError):
        PrioritySearchStrategy(tolerance=-1)


@pytest.mark.parametrize("method", ["fastest", "balanced", "shortest"])
def test_strategy_solves_crossed_layout(method):
    layout = Layout.from_matrix(CROSSED, empty_containers=1)
    solution = create_strategy(method).solve(SolutionContext(layout=layout, empty_containers=1))

    assert solution.is_solved
    assert solution.empty_containers == 1
    assert replay(layout, solution.moves).is_solved
    assert solution.metrics.strategy_name == method
    assert solution.metrics.states_explored > 0


def test_shortest_finds_seven_move_solution():
    layout = Layout.from_matrix(CROSSED, empty_containers=1)
    solution = create_strategy("shortest").solve(SolutionContext(layout=layout))

    assert solution.move_count == 7


def test_exhausted_frontier_reports_no_solution():
    """Two full crossed containers without scratch space have no legal move."""
    layout = Layout.from_matrix(CROSSED)

    for method in ["fastest", "balanced", "shortest"]:
        solution = create_strategy(method).solve(SolutionContext(layout=layout))
        assert not solution.is_solved
        assert solution.moves == []


def test_search_never_expands_a_state_twice():
    layout = Layout.from_matrix([[1, 2, 3], [3, 2, 1], [2]], empty_containers=1)
    strategy = RecordingDepthFirst()

    solution = strategy.solve(SolutionContext(layout=layout, empty_containers=1))

    expanded = strategy.frontier.expanded
    assert not solution.is_solved  # three colors of three layers never fill a container
    assert len(expanded) == len(set(expanded))
    assert len(expanded) == solution.metrics.states_explored


def test_depth_first_explores_last_pair_first():
    frontier = StackFrontier()
    first, second = node(1, 0), node(1, 0)
    frontier.push(first)
    frontier.push(second)

    assert frontier.pop() is second
    assert frontier.pop() is first
    assert len(frontier) == 0


def test_priority_frontier_orders_by_depth_then_metric():
    frontier = PriorityFrontier(tolerance=0)
    deep = node(2, 5)
    shallow_low = node(1, 0)
    shallow_high = node(1, 3)
    shallow_tie = node(1, 3)

    for n in (deep, shallow_low, shallow_high, shallow_tie):
        frontier.push(n)

    assert frontier.pop() is shallow_high
    assert frontier.pop() is shallow_tie
    assert frontier.pop() is shallow_low
    assert frontier.pop() is deep


def test_priority_admission_with_zero_tolerance():
    frontier = PriorityFrontier(tolerance=0)

    assert frontier.admit(node(1, 3))
    assert not frontier.admit(node(1, 2))
    assert frontier.admit(node(1, 3))
    assert frontier.admit(node(1, 5))
    assert not frontier.admit(node(1, 4))
    # Other depths keep their own best metric
    assert frontier.admit(node(2, 0))


def test_priority_admission_with_tolerance_one():
    frontier = PriorityFrontier(tolerance=1)

    assert frontier.admit(node(3, 5))
    assert frontier.admit(node(3, 4))
    assert not frontier.admit(node(3, 3))


def test_computation_time_is_measured_from_context_start():
    layout = Layout.from_matrix(CROSSED, empty_containers=1)
    context = SolutionContext(layout=layout, start_time=time.perf_counter() - 1.0)

    solution = create_strategy("fastest").solve(context)

    assert solution.metrics.computation_time_ms >= 1000
