"""
Solve Driver Module - Runs a search strategy with a growing number of empty containers.

Some puzzles cannot be solved with the containers they come with but become
solvable with extra scratch space. The driver retries the search, appending
one more empty container each time, until a solution is found or the upper
bound is reached.
"""

import logging
import time
from typing import Callable, Optional, Sequence, Union

from .constants import (
    DEFAULT_CAPACITY,
    DEFAULT_EMPTY_CONTAINERS,
    MAX_EMPTY_CONTAINERS,
    SolvingMethod,
)
from .container import Color
from .context import SolutionContext
from .factory import create_strategy
from .layout import Layout
from .solution import Solution, SolutionMetrics

logger = logging.getLogger(__name__)


def solve(
    matrix: Sequence[Sequence[Color]],
    method: Union[SolvingMethod, str] = SolvingMethod.FASTEST,
    capacity: int = DEFAULT_CAPACITY,
    min_empty_containers: int = DEFAULT_EMPTY_CONTAINERS,
    max_empty_containers: int = MAX_EMPTY_CONTAINERS,
    progress_callback: Optional[Callable[[float, str], None]] = None
) -> Solution:
    """
    Find transfusions that bring every container to a final state.

    Args:
        matrix: One row of colors per container, bottom to top
        method: Solving method ("fastest", "balanced" or "shortest")
        capacity: Layer capacity of every container
        min_empty_containers: First number of empty containers to try
        max_empty_containers: Last number of empty containers to try
        progress_callback: Optional callback receiving (percent, message)
                           before every attempt

    Returns:
        Solution whose moves index the matrix rows followed by
        empty_containers empty ones. If no attempt succeeds, is_solved
        is False and empty_containers is max_empty_containers.

    Raises:
        CapacityError: If a row holds more layers than capacity
        ValueError: If the method is unknown or the bounds are invalid
    """
    if min_empty_containers < 0 or max_empty_containers < min_empty_containers:
        raise ValueError(
            f"Invalid empty container bounds: "
            f"{min_empty_containers}..{max_empty_containers}"
        )

    # Malformed input must fail before any search starts
    Layout.from_matrix(matrix, capacity)
    strategy = create_strategy(method)

    start_time = time.perf_counter()
    metrics = SolutionMetrics(strategy_name=strategy.name)
    attempts_total = max_empty_containers - min_empty_containers + 1

    logger.info(
        f"[Solver] Solving {len(matrix)} containers with '{strategy.name}', "
        f"empty containers {min_empty_containers}..{max_empty_containers}"
    )

    for empty_containers in range(min_empty_containers, max_empty_containers + 1):
        layout = Layout.from_matrix(matrix, capacity, empty_containers)
        context = SolutionContext(
            layout=layout,
            empty_containers=empty_containers,
            progress_callback=progress_callback
        )
        context.report_progress(
            (empty_containers - min_empty_containers) / attempts_total,
            f"Trying {empty_containers} empty containers"
        )

        if layout.is_solved:
            logger.info("[Solver] Layout is already solved")
            metrics.attempts += 1
            metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
            return Solution(
                moves=[],
                is_solved=True,
                empty_containers=empty_containers,
                initial_layout=layout,
                metrics=metrics
            )

        solution = strategy.solve(context)
        metrics.merge(solution.metrics)

        if solution.is_solved:
            logger.info(
                f"[Solver] Solved with {empty_containers} empty containers: "
                f"{solution.move_count} moves in {metrics.computation_time_ms:.1f}ms"
            )
            solution.metrics = metrics
            return solution

        logger.debug(f"[Solver] No solution with {empty_containers} empty containers")

    logger.info(
        f"[Solver] No solution up to {max_empty_containers} empty containers"
    )
    return Solution(
        moves=[],
        is_solved=False,
        empty_containers=max_empty_containers,
        initial_layout=Layout.from_matrix(matrix, capacity, max_empty_containers),
        metrics=metrics
    )
