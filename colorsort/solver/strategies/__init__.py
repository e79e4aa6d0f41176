"""
Strategies Package - Concrete search strategy implementations.

Import this module to register all built-in strategies.
"""

from .depth_first import DepthFirstStrategy
from .priority import PrioritySearchStrategy, ShortestStrategy, BalancedStrategy

__all__ = [
    "DepthFirstStrategy",
    "PrioritySearchStrategy",
    "ShortestStrategy",
    "BalancedStrategy",
]
