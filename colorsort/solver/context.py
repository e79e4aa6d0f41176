"""
Solution Context Module - Shared context for strategy execution.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .layout import Layout


@dataclass
class SolutionContext:
    """
    Context passed to strategies containing the start layout and
    progress reporting.

    The search itself has no cooperative cancellation point; a host that
    needs to abort a solve terminates the thread running it.

    Attributes:
        layout: Start layout, already extended with empty containers
        empty_containers: Number of empty containers appended to the puzzle
        start_time: When computation started
        progress_callback: Optional callback for progress updates
    """
    layout: Layout
    empty_containers: int = 0
    start_time: float = field(default_factory=time.perf_counter)
    progress_callback: Optional[Callable[[float, str], None]] = None

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

    def elapsed_time(self) -> float:
        """
        Get seconds elapsed since computation started.

        Returns:
            Elapsed time in seconds
        """
        return time.perf_counter() - self.start_time
