"""
Layout Module - Index-addressable collection of containers forming one puzzle state.
"""

from typing import Iterable, List, Sequence, Tuple

from .constants import DEFAULT_CAPACITY
from .container import Color, Container
from .fingerprint import canonical_form


class Layout:
    """
    Ordered collection of containers that share one capacity.

    Containers are interchangeable slots: two layouts differing only in
    container order describe the same puzzle state for deduplication
    purposes (see fingerprint.canonical_form).

    Attributes:
        capacity: Layer capacity shared by every container
    """

    __slots__ = ("_containers", "capacity")

    def __init__(self, containers: Iterable[Container] = (),
                 capacity: int = DEFAULT_CAPACITY):
        """
        Create a layout from existing containers.

        Containers are copied, so the caller keeps ownership of its own.

        Args:
            containers: Containers in index order
            capacity: Capacity every container must share

        Raises:
            ValueError: If any container has a different capacity
        """
        self._containers: List[Container] = []
        for container in containers:
            if container.capacity != capacity:
                raise ValueError(
                    f"Container capacity {container.capacity} does not match "
                    f"layout capacity {capacity}"
                )
            self._containers.append(container.copy())
        self.capacity = capacity

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[Color]],
                    capacity: int = DEFAULT_CAPACITY,
                    empty_containers: int = 0) -> "Layout":
        """
        Create a layout from a color matrix.

        Args:
            matrix: One row of colors per container, bottom to top.
                    Rows may be shorter than capacity.
            capacity: Layer capacity of every container
            empty_containers: Number of empty containers appended after the rows

        Returns:
            Layout instance

        Raises:
            CapacityError: If a row holds more layers than capacity
        """
        layout = cls(capacity=capacity)
        layout._containers = [Container(row, capacity) for row in matrix]
        layout._containers.extend(
            Container(capacity=capacity) for _ in range(empty_containers)
        )
        return layout

    def copy(self) -> "Layout":
        """Create a deep copy of this layout."""
        layout = Layout(capacity=self.capacity)
        layout._containers = [container.copy() for container in self._containers]
        return layout

    @property
    def containers(self) -> List[Container]:
        """Get copies of all containers."""
        return [container.copy() for container in self._containers]

    @property
    def is_solved(self) -> bool:
        """True if every container is empty or full with a single color."""
        return all(container.is_in_final_state for container in self._containers)

    @property
    def total_layers(self) -> int:
        """Total number of layers across all containers."""
        return sum(len(container) for container in self._containers)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._containers):
            raise IndexError(
                f"Container index {index} is out of bounds "
                f"(layout has {len(self._containers)} containers)"
            )

    def is_transfusion_valid(self, source: int, destination: int) -> bool:
        """
        Check whether container source can be poured into container destination.

        Args:
            source: Index of the container poured from
            destination: Index of the container poured into

        Returns:
            False for a self-pour, otherwise the container pour rule

        Raises:
            IndexError: If either index is out of range
        """
        self._check_index(source)
        self._check_index(destination)

        if source == destination:
            return False

        return Container.is_transfusion_valid(
            self._containers[source], self._containers[destination]
        )

    def transfuse(self, source: int, destination: int) -> int:
        """
        Pour container source into container destination.

        A self-pour is a silent no-op.

        Args:
            source: Index of the container poured from
            destination: Index of the container poured into

        Returns:
            Number of layers moved

        Raises:
            IndexError: If either index is out of range
            InvalidTransfusionError: If the pour rule forbids the transfusion
        """
        self._check_index(source)
        self._check_index(destination)

        if source == destination:
            return 0

        return Container.transfuse(
            self._containers[source], self._containers[destination]
        )

    def valid_transfusions(self) -> List[Tuple[int, int]]:
        """
        Find all legal (source, destination) pairs.

        Pairs are ordered with source as the outer loop and destination
        as the inner loop, both ascending.

        Returns:
            List of index pairs
        """
        count = len(self._containers)
        return [
            (i, j)
            for i in range(count)
            for j in range(count)
            if i != j and Container.is_transfusion_valid(
                self._containers[i], self._containers[j]
            )
        ]

    def canonical_form(self) -> str:
        """Container strings sorted and joined by newlines."""
        return canonical_form(self._containers)

    def to_matrix(self) -> List[List[Color]]:
        """Convert to a color matrix, one row per container."""
        return [container.layers for container in self._containers]

    def __len__(self) -> int:
        return len(self._containers)

    def __getitem__(self, index: int) -> Container:
        """Get a copy of the container at index."""
        return self._containers[index].copy()

    def __eq__(self, other):
        if not isinstance(other, Layout):
            return False
        return self.capacity == other.capacity and self._containers == other._containers

    def __str__(self) -> str:
        return "\n".join(f"{i}: [{container}]" for i, container in enumerate(self._containers))

    def __repr__(self) -> str:
        return f"Layout({self.to_matrix()!r}, capacity={self.capacity})"
