"""
Edge and weight model for the adjacency-list graph.

An undirected connection is stored as two directed Edge records, one in the
adjacency list of each endpoint. Both records hold the same WeightCell, so a
weight change made through either side (or by the owner of the connection)
is seen by both.
"""

from typing import Any, Callable, List, Optional

WeightListener = Callable[[float, float], None]


class WeightCell:
    """
    A single mutable, observable edge weight.

    Attributes:
        value (float): Current weight. Negative values are accepted.
    """

    def __init__(self, value: float = 0.0):
        self._value = float(value)
        self._listeners: List[WeightListener] = []

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, new_value: float) -> None:
        old_value = self._value
        self._value = float(new_value)
        for listener in list(self._listeners):
            listener(old_value, self._value)

    def subscribe(self, listener: WeightListener) -> None:
        """
        Register a callback invoked as ``listener(old, new)`` on every change.

        Args:
            listener: Callable taking the previous and the new weight
        """
        self._listeners.append(listener)

    def unsubscribe(self, listener: WeightListener) -> None:
        """Remove a previously registered callback."""
        self._listeners.remove(listener)

    def __repr__(self) -> str:
        return f"WeightCell({self._value})"


class Edge:
    """
    Directed adjacency entry pointing at ``ending``.

    Attributes:
        ending: Node the edge leads to
        weight_cell (WeightCell): Weight shared with the reverse entry
        connection: Caller-owned object representing the connection
                    (e.g. a drawn line), carried for event consumers
    """

    def __init__(self, ending, weight_cell: WeightCell, connection: Optional[Any] = None):
        self.ending = ending
        self.weight_cell = weight_cell
        self.connection = connection

    @property
    def weight(self) -> float:
        """Current weight read from the shared cell."""
        return self.weight_cell.value

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight == other.weight and self.ending is other.ending

    # Weights are mutable, so edges must not be used as dict keys.
    __hash__ = None

    def __repr__(self) -> str:
        return f"Edge(ending={self.ending!r}, weight={self.weight})"
