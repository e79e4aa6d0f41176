"""
Constants Module - Puzzle-wide defaults and the enumeration of solving methods.
"""

from enum import Enum


# Layers a single container can hold
DEFAULT_CAPACITY = 4

# Range of auxiliary empty containers the driver appends to a puzzle
DEFAULT_EMPTY_CONTAINERS = 0
MAX_EMPTY_CONTAINERS = 4


class SolvingMethod(str, Enum):
    """
    Solving methods selectable by the caller.

    Values:
        FASTEST: Depth-first search, returns the first solution found
        BALANCED: Priority search with a relaxed metric beam (tolerance 1)
        SHORTEST: Priority search keeping only metric-maximal nodes per depth
    """
    FASTEST = "fastest"
    BALANCED = "balanced"
    SHORTEST = "shortest"
