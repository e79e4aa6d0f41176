"""
Color Sort Solver - Entry Point

Reads a puzzle matrix, runs the solver on a worker thread and prints
the pours that solve it.

The puzzle file is JSON: a list of containers, each a list of colors
from bottom to top.

Example:
    python main.py puzzle.json
    python main.py puzzle.json --method shortest --max-empty 2
    echo '[[1,2,1,2],[2,1,2,1]]' | python main.py - --json
"""

import sys
import json
import logging
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

from PyQt5.QtCore import QCoreApplication

from colorsort.solver import Solution, SolvingMethod
from colorsort.solver_worker import SolveWorker
from colorsort.settings import load_settings, save_settings


logger = logging.getLogger(__name__)

# Exit codes
EXIT_SOLVED = 0
EXIT_ERROR = 1
EXIT_NO_SOLUTION = 2


def configure_logging(debug: bool = False) -> None:
    """Configure logging - output to both console and file."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stderr),  # Console output
            logging.FileHandler("solver.log", mode='w', encoding='utf-8')  # File output
        ]
    )


def load_puzzle(source: str) -> List[List[Any]]:
    """
    Load a puzzle matrix from a JSON file or stdin.

    Args:
        source: File path, or "-" for stdin

    Returns:
        List of rows

    Raises:
        ValueError: If the content is not a list of lists
    """
    if source == "-":
        data = json.load(sys.stdin)
    else:
        with open(Path(source), 'r', encoding='utf-8') as f:
            data = json.load(f)

    if not isinstance(data, list) or not all(isinstance(row, list) for row in data):
        raise ValueError("Puzzle must be a JSON list of containers (lists of colors)")
    return data


class Application:
    """
    Command-line application controller.

    Owns the Qt event loop and the worker thread, connecting the worker
    signals to output handlers.
    """

    def __init__(self, matrix: List[List[Any]], settings: Dict[str, Any],
                 as_json: bool = False):
        """
        Initialize the application.

        Args:
            matrix: Puzzle rows
            settings: Effective solver settings
            as_json: Print the result as JSON instead of text
        """
        self.matrix = matrix
        self.settings = settings
        self.as_json = as_json
        self.exit_code = EXIT_ERROR
        self.worker: Optional[SolveWorker] = None

    def setup(self, app: QCoreApplication):
        """Create the worker and connect signals."""
        self.worker = SolveWorker(
            self.matrix,
            self.settings["solving_method"],
            capacity=self.settings["capacity"],
            min_empty_containers=self.settings["min_empty_containers"],
            max_empty_containers=self.settings["max_empty_containers"],
        )

        self.worker.status_changed.connect(self._on_status)
        self.worker.progress.connect(self._on_progress)
        self.worker.solution_ready.connect(self._on_solution)
        self.worker.error_occurred.connect(self._on_error)
        self.worker.finished.connect(app.quit)

        logger.info(
            f"Application initialized: {len(self.matrix)} containers, "
            f"method '{self.settings['solving_method']}'"
        )

    def _on_status(self, status: str):
        logger.debug(f"Worker status: {status}")

    def _on_progress(self, percent: float, message: str):
        logger.info(f"{message} ({percent:.0%})")

    def _on_solution(self, solution: Solution):
        """Handle solution from worker."""
        self.exit_code = EXIT_SOLVED if solution.is_solved else EXIT_NO_SOLUTION
        print(format_solution(solution, self.as_json))

    def _on_error(self, error_msg: str):
        """Handle worker error."""
        logger.error(f"Worker error: {error_msg}")
        self.exit_code = EXIT_ERROR

    def run(self):
        """Start the worker thread."""
        self.worker.start()


def format_solution(solution: Solution, as_json: bool = False) -> str:
    """
    Render a solution for the terminal.

    Args:
        solution: Solve result
        as_json: Produce JSON instead of text

    Returns:
        Printable string
    """
    if as_json:
        return json.dumps(solution.to_dict(), indent=2)

    if not solution.is_solved:
        return (
            f"No solution found with up to {solution.empty_containers} "
            f"empty containers"
        )

    lines = [
        f"Solved in {solution.move_count} moves "
        f"using {solution.empty_containers} empty containers"
    ]
    for i, move in enumerate(solution.moves, start=1):
        lines.append(f"{i:3d}. {move}")
    return "\n".join(lines)


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Color Sort Solver - Finds pours that sort every container"
    )
    parser.add_argument(
        "puzzle",
        help="JSON file with the container matrix, or - for stdin"
    )
    parser.add_argument(
        "--method", "-m",
        choices=[method.value for method in SolvingMethod],
        help="Solving method (default: from config.json, else fastest)"
    )
    parser.add_argument(
        "--capacity", "-c",
        type=int,
        help="Layers per container (default: from config.json, else 4)"
    )
    parser.add_argument(
        "--min-empty",
        type=int,
        help="First number of empty containers to try"
    )
    parser.add_argument(
        "--max-empty",
        type=int,
        help="Last number of empty containers to try"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON"
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Persist the effective method and bounds to config.json"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def build_settings(args) -> Dict[str, Any]:
    """Merge saved settings with command line overrides."""
    settings = load_settings()

    overrides = {
        "solving_method": args.method,
        "capacity": args.capacity,
        "min_empty_containers": args.min_empty,
        "max_empty_containers": args.max_empty,
    }
    for key, value in overrides.items():
        if value is not None:
            settings[key] = value

    if args.save:
        save_settings(settings)

    return settings


def main(argv: Optional[List[str]] = None) -> int:
    """Initialize and run the Color Sort Solver."""
    args = parse_args(argv)
    configure_logging(args.debug)

    try:
        matrix = load_puzzle(args.puzzle)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot read puzzle: {e}")
        return EXIT_ERROR

    settings = build_settings(args)

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])

    application = Application(matrix, settings, as_json=args.json)
    application.setup(app)
    application.run()

    app.exec_()
    application.worker.wait()
    return application.exit_code


if __name__ == "__main__":
    sys.exit(main())
