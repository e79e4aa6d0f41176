"""
Puzzle generator for tests.

Builds puzzles that are known to be solvable by starting from a solved
layout and applying random reverse pours: every step undoes a pour the
real rule would allow, so replaying the steps backwards solves the puzzle.

Uses ShuffleContainer, a variant whose final state is "empty or full"
regardless of colors. It never reaches the solving engine.
"""

import random
from typing import List, Optional, Tuple

from colorsort.solver import Container, Layout


# Random walks restarted before giving up
MAX_RESTARTS = 100

# Extra steps allowed while waiting for every container to be empty or full
MAX_EXTRA_STEPS = 500


class ShuffleContainer(Container):
    """Container whose final state only requires being empty or full."""

    __slots__ = ()

    def copy(self) -> "ShuffleContainer":
        return ShuffleContainer(self._layers, self.capacity)

    @property
    def is_in_final_state(self) -> bool:
        return self.is_empty or self.is_full

    @staticmethod
    def is_unpour_valid(donor: "ShuffleContainer", receiver: "ShuffleContainer",
                        count: int) -> bool:
        """
        Check that moving count layers from donor to receiver undoes a legal pour.

        The forward pour (receiver into donor) must move exactly count
        layers and land on an empty container or the same color.
        """
        if donor is receiver or donor.is_empty:
            return False
        run = donor.top_run_length
        if count < 1 or count > run or count > receiver.free_capacity:
            return False
        # Block below the moved layers must be the same color or nothing
        if count == run and count != len(donor):
            return False
        # Forward pour would move the whole receiver run unless donor was limited by space
        if not receiver.is_empty and receiver.top == donor.top and not donor.is_full:
            return False
        return True

    @staticmethod
    def unpour(donor: "ShuffleContainer", receiver: "ShuffleContainer", count: int) -> None:
        if not ShuffleContainer.is_unpour_valid(donor, receiver, count):
            raise ValueError(f"Cannot move {count} layers from [{donor}] to [{receiver}]")
        for _ in range(count):
            receiver._layers.append(donor._layers.pop())


def _valid_unpours(containers: List[ShuffleContainer]) -> List[Tuple[int, int, int]]:
    moves = []
    for i, donor in enumerate(containers):
        for j, receiver in enumerate(containers):
            if i == j:
                continue
            for count in range(1, donor.capacity + 1):
                if ShuffleContainer.is_unpour_valid(donor, receiver, count):
                    moves.append((i, j, count))
    return moves


def generate_puzzle(colors: int, empty_containers: int, capacity: int = 4,
                    steps: int = 40, rng: Optional[random.Random] = None) -> List[List[int]]:
    """
    Generate a scrambled, solvable puzzle.

    Every returned container is full; the puzzle is solvable with
    empty_containers extra empty containers.

    Args:
        colors: Number of colors (one full container each)
        empty_containers: Empty containers available while scrambling
        capacity: Layers per container
        steps: Minimum number of reverse pours
        rng: Random source (seed it for reproducible puzzles)

    Returns:
        Color matrix without the empty containers

    Raises:
        RuntimeError: If no scrambled layout could be produced
    """
    rng = rng or random.Random()

    for _ in range(MAX_RESTARTS):
        containers = [ShuffleContainer([color] * capacity, capacity) for color in range(colors)]
        containers += [ShuffleContainer(capacity=capacity) for _ in range(empty_containers)]
        rng.shuffle(containers)

        for step in range(steps + MAX_EXTRA_STEPS):
            if step >= steps and all(c.is_in_final_state for c in containers):
                break
            moves = _valid_unpours(containers)
            if not moves:
                break
            donor, receiver, count = rng.choice(moves)
            ShuffleContainer.unpour(containers[donor], containers[receiver], count)

        if not all(c.is_in_final_state for c in containers):
            continue

        matrix = [c.layers for c in containers if not c.is_empty]
        if not Layout.from_matrix(matrix, capacity).is_solved:
            return matrix

    raise RuntimeError(f"Could not scramble a puzzle with {colors} colors")
