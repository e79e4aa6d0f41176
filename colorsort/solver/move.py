"""
Move Module - Represents a single pour between two containers of a layout.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Transfusion:
    """
    Directed pour from one container index to another.

    The number of layers moved is not part of the move: it is fully
    determined by the layout it is applied to.

    Attributes:
        source: Index of the container poured from
        destination: Index of the container poured into
    """
    source: int
    destination: int

    def as_pair(self) -> Tuple[int, int]:
        """Get the move as a (source, destination) tuple."""
        return (self.source, self.destination)

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination}"
