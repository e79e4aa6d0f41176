"""
Solver Worker Module for Color Sort Solver

Provides a background QThread worker that runs one solve request.
The puzzle is handed over by value and the result travels back via
Qt signals, so the caller only waits when it needs the answer.

The search has no cooperative cancellation point. A host that must abort
a long solve calls terminate() on the worker.
"""

import copy
import logging
from typing import List, Optional, Sequence, Union

from PyQt5.QtCore import QThread, pyqtSignal

from colorsort.solver import (
    DEFAULT_CAPACITY,
    DEFAULT_EMPTY_CONTAINERS,
    MAX_EMPTY_CONTAINERS,
    Solution,
    SolvingMethod,
    solve,
)


# Configure module logger
logger = logging.getLogger(__name__)


class SolveWorker(QThread):
    """
    Background worker thread for a single solve request.

    Signals:
        status_changed(str): Emitted when worker status changes
        progress(float, str): Emitted before every empty-container attempt
        solution_ready(object): Emitted with the Solution when the search ends
        error_occurred(str): Emitted when the input is rejected or the search fails

    Example:
        worker = SolveWorker(matrix, "shortest")
        worker.solution_ready.connect(on_solution)
        worker.error_occurred.connect(on_error)
        worker.start()
        # ...
        worker.wait()
    """

    # Signals for caller updates (thread-safe)
    status_changed = pyqtSignal(str)
    progress = pyqtSignal(float, str)
    solution_ready = pyqtSignal(object)
    error_occurred = pyqtSignal(str)

    def __init__(
        self,
        matrix: Sequence[Sequence],
        method: Union[SolvingMethod, str] = SolvingMethod.FASTEST,
        capacity: int = DEFAULT_CAPACITY,
        min_empty_containers: int = DEFAULT_EMPTY_CONTAINERS,
        max_empty_containers: int = MAX_EMPTY_CONTAINERS,
        parent=None
    ):
        """
        Initialize the solve worker.

        Args:
            matrix: One row of colors per container (copied)
            method: Solving method name
            capacity: Layer capacity of every container
            min_empty_containers: First number of empty containers to try
            max_empty_containers: Last number of empty containers to try
            parent: Optional Qt parent object
        """
        super().__init__(parent)
        self.matrix: List[List] = copy.deepcopy([list(row) for row in matrix])
        self.method = method
        self.capacity = capacity
        self.min_empty_containers = min_empty_containers
        self.max_empty_containers = max_empty_containers

        self._result: Optional[Solution] = None
        self._error: Optional[str] = None

    @property
    def result(self) -> Optional[Solution]:
        """Solution of the last run, or None if it has not finished or failed."""
        return self._result

    @property
    def error(self) -> Optional[str]:
        """Error message of the last run, or None."""
        return self._error

    def run(self):
        """
        Worker body. Called when thread starts.

        Runs the solve driver and emits either solution_ready or
        error_occurred exactly once.
        """
        self._result = None
        self._error = None

        method = getattr(self.method, "value", self.method)
        logger.info(f"Solve worker started: {len(self.matrix)} containers, method '{method}'")
        self.status_changed.emit("Solving")

        try:
            solution = solve(
                self.matrix,
                self.method,
                capacity=self.capacity,
                min_empty_containers=self.min_empty_containers,
                max_empty_containers=self.max_empty_containers,
                progress_callback=self._report_progress
            )
        except Exception as e:
            logger.exception("Error in solve worker")
            self._error = str(e)
            self.status_changed.emit("Failed")
            self.error_occurred.emit(self._error)
            return

        self._result = solution
        if solution.is_solved:
            self.status_changed.emit(f"Solved ({solution.move_count} moves)")
        else:
            self.status_changed.emit("No solution")
        logger.info("Solve worker finished")
        self.solution_ready.emit(solution)

    def _report_progress(self, percent: float, message: str) -> None:
        """Forward driver progress to the progress signal."""
        logger.debug(f"Progress {percent:.0%}: {message}")
        self.progress.emit(percent, message)
