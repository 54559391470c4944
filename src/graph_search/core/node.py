"""
Node class for graph-based search algorithms.

Nodes are opaque identities: two nodes are the same vertex only if they are
the same object, regardless of position or label.
"""

from typing import Tuple

from ..utils.geometry import euclidean_distance


class Node:
    """
    Represents a vertex placed on the plane.

    The position is only used to estimate the remaining distance to a goal;
    graph membership and traversal equality rely on object identity.

    Attributes:
        x (float): X-coordinate
        y (float): Y-coordinate
        label (str): Display label (not used by the search itself)
    """

    def __init__(self, x: float, y: float, label: str = ""):
        """
        Initialize a node at given coordinates.

        Args:
            x: X-coordinate
            y: Y-coordinate
            label: Display label
        """
        self.x = float(x)
        self.y = float(y)
        self.label = label

    @property
    def position(self) -> Tuple[float, float]:
        """Current (x, y) position."""
        return (self.x, self.y)

    def distance(self, other: "Node") -> float:
        """
        Straight-line distance to another node.

        Args:
            other: Node to measure to

        Returns:
            Euclidean distance between the two positions
        """
        return euclidean_distance(self.position, other.position)

    def __repr__(self) -> str:
        """String representation of the node."""
        return f"Node({self.label!r}, {self.x:.2f}, {self.y:.2f})"
