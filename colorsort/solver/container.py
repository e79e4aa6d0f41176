"""
Container Module - A single pour-able stack of colored layers.
"""

from typing import Hashable, Iterable, List, Optional

from .constants import DEFAULT_CAPACITY


Color = Hashable


class CapacityError(ValueError):
    """Raised when a container is built with more layers than it can hold."""


class InvalidTransfusionError(ValueError):
    """Raised when a transfusion is executed that the pour rule forbids."""


class Container:
    """
    Ordered stack of colored layers with a fixed capacity.

    Layers are stored bottom-to-top, so the top layer is the last element.
    The stack is only changed through transfuse(); everything handed out
    is a copy.

    Attributes:
        capacity: Maximum number of layers the container holds
    """

    __slots__ = ("_layers", "capacity")

    def __init__(self, layers: Optional[Iterable[Color]] = None,
                 capacity: int = DEFAULT_CAPACITY):
        """
        Create a container.

        Args:
            layers: Colors from bottom to top (default empty)
            capacity: Maximum number of layers

        Raises:
            CapacityError: If more layers are given than capacity allows
        """
        layers = list(layers) if layers is not None else []
        if len(layers) > capacity:
            raise CapacityError(
                f"Cannot fill container over its capacity: "
                f"{len(layers)} layers > {capacity}"
            )
        self._layers: List[Color] = layers
        self.capacity = capacity

    def copy(self) -> "Container":
        """Create an independent copy of this container."""
        return Container(self._layers, self.capacity)

    @property
    def layers(self) -> List[Color]:
        """Get a copy of the layers, bottom to top."""
        return list(self._layers)

    @property
    def top(self) -> Optional[Color]:
        """Get the top color, or None if empty."""
        return self._layers[-1] if self._layers else None

    @property
    def is_empty(self) -> bool:
        return not self._layers

    @property
    def is_full(self) -> bool:
        return len(self._layers) == self.capacity

    @property
    def free_capacity(self) -> int:
        """Number of layers that still fit."""
        return self.capacity - len(self._layers)

    @property
    def top_run_length(self) -> int:
        """Length of the contiguous block of equal colors at the top."""
        if not self._layers:
            return 0
        top = self._layers[-1]
        run = 0
        for layer in reversed(self._layers):
            if layer != top:
                break
            run += 1
        return run

    @property
    def is_in_final_state(self) -> bool:
        """
        Check if the container is done.

        A container is final when it is empty, or full with every
        layer the same color.
        """
        if self.is_empty:
            return True
        first = self._layers[0]
        return self.is_full and all(layer == first for layer in self._layers)

    @staticmethod
    def is_transfusion_valid(source: "Container", destination: "Container") -> bool:
        """
        Check whether source can be poured into destination.

        Args:
            source: Container poured from
            destination: Container poured into

        Returns:
            True if source is non-empty, destination is not full, and
            destination is empty or shares the top color of source
        """
        if source.is_empty:
            return False
        if destination.is_full:
            return False
        if not destination.is_empty and source.top != destination.top:
            return False
        return True

    @staticmethod
    def transfuse(source: "Container", destination: "Container") -> int:
        """
        Pour the top run of source into destination.

        Moves min(top run of source, free capacity of destination) layers.

        Args:
            source: Container poured from
            destination: Container poured into

        Returns:
            Number of layers moved

        Raises:
            InvalidTransfusionError: If the pour rule forbids the transfusion
        """
        if not Container.is_transfusion_valid(source, destination):
            raise InvalidTransfusionError(
                f"Transfusion from [{source}] to [{destination}] is invalid"
            )

        count = min(source.top_run_length, destination.free_capacity)
        for _ in range(count):
            destination._layers.append(source._layers.pop())
        return count

    def __len__(self) -> int:
        return len(self._layers)

    def __eq__(self, other):
        if not isinstance(other, Container):
            return False
        return self.capacity == other.capacity and self._layers == other._layers

    def __str__(self) -> str:
        return ",".join(str(layer) for layer in self._layers)

    def __repr__(self) -> str:
        return f"Container({self._layers!r}, capacity={self.capacity})"
