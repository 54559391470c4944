"""
Undirected weighted graph stored as an adjacency list.

This module defines the Graph class which maps every vertex to the ordered
list of its outgoing edges. Each undirected connection is represented by two
directed Edge records that share a single WeightCell.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from .edge import Edge, WeightCell
from .exceptions import VertexNotFoundError

logger = logging.getLogger(__name__)


class Graph:
    """
    Adjacency-list graph over opaque node identities.

    Vertices are looked up by identity, so any hashable object that keeps
    the default identity hash (such as Node) can be used. Adjacency lists
    keep insertion order, which keeps search traces reproducible.

    Attributes:
        adjacency (Dict[Any, List[Edge]]): Outgoing edges per vertex
    """

    def __init__(self):
        self.adjacency: Dict[Any, List[Edge]] = {}

    # -----------------
    # VERTEX OPERATIONS
    # -----------------

    def add_vertex(self, node):
        """
        Add a vertex to the graph.

        Adding a vertex that is already present does nothing.

        Args:
            node: Vertex to add

        Returns:
            The vertex that was passed in
        """
        if node not in self.adjacency:
            self.adjacency[node] = []
            logger.debug("Added vertex %r", node)
        return node

    def remove_vertex(self, node) -> None:
        """
        Remove a vertex and every edge that touches it.

        Args:
            node: Vertex to remove

        Raises:
            VertexNotFoundError: If the vertex is not in the graph
        """
        if node not in self.adjacency:
            raise VertexNotFoundError(f"Vertex not in graph: {node!r}")

        edges = self.adjacency.pop(node)
        for edge in edges:
            neighbor_edges = self.adjacency.get(edge.ending)
            if neighbor_edges is None:
                continue  # self-loop, already popped
            neighbor_edges[:] = [e for e in neighbor_edges if e.ending is not node]
        logger.debug("Removed vertex %r with %d edges", node, len(edges))

    @property
    def vertices(self) -> List[Any]:
        """All vertices in insertion order."""
        return list(self.adjacency)

    def clear(self) -> None:
        """Remove all vertices and edges."""
        self.adjacency.clear()

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def connect_vertices(self, a, b,
                         weight: Union[WeightCell, float],
                         connection: Optional[Any] = None) -> WeightCell:
        """
        Connect two vertices with an undirected weighted edge.

        Missing vertices are added first. The same connection can be added
        twice, producing duplicate edges; callers that want a single
        connection should check are_connected() beforehand.

        Args:
            a: First vertex
            b: Second vertex
            weight: Shared WeightCell, or a number to wrap in a new cell
            connection: Caller-owned object representing the connection

        Returns:
            The WeightCell shared by both directed edges

        Example:
            >>> graph = Graph()
            >>> cell = graph.connect_vertices(a, b, 100)
            >>> cell.value = 1
            >>> graph.get_edge(b, a).weight
            1.0
        """
        cell = weight if isinstance(weight, WeightCell) else WeightCell(weight)

        self.add_vertex(a)
        self.add_vertex(b)
        self.adjacency[a].append(Edge(b, cell, connection))
        self.adjacency[b].append(Edge(a, cell, connection))
        logger.debug("Connected %r <-> %r (weight=%s)", a, b, cell.value)
        return cell

    def get_edges(self, node) -> List[Edge]:
        """
        Outgoing edges of a vertex.

        Args:
            node: Vertex to look up

        Returns:
            List of edges, empty if the vertex is unknown
        """
        return self.adjacency.get(node, [])

    def get_edge(self, from_node, to_node) -> Optional[Edge]:
        """
        First directed edge from one vertex to another.

        Args:
            from_node: Start vertex
            to_node: End vertex

        Returns:
            The matching Edge, or None if either vertex is None or the
            vertices are not connected in that direction
        """
        if from_node is None or to_node is None:
            return None
        for edge in self.get_edges(from_node):
            if edge.ending is to_node:
                return edge
        return None

    def are_connected(self, a, b) -> bool:
        """Check whether an edge leads from a to b."""
        return self.get_edge(a, b) is not None

    # -----------------
    # SEARCH
    # -----------------

    def search(self, source, goal, method, sink=None, config=None):
        """
        Run a best-first search on this graph.

        Shortcut for BestFirstPlanner(self, config).search(...).

        Args:
            source: Start vertex
            goal: Goal vertex
            method: "Uniform Cost Search", "Greedy Search" or "A* Search"
            sink: Optional callable receiving each event as it is emitted
            config: Optional algorithm configuration dictionary

        Returns:
            Tuple of (SearchResult, list of events)
        """
        from ..algorithms.best_first import BestFirstPlanner

        planner = BestFirstPlanner(self, config or {})
        return planner.search(source, goal, method, sink=sink)

    def dump(self) -> str:
        """Adjacency listing, one vertex per line."""
        return "\n".join(f"{node!r}: {edges!r}" for node, edges in self.adjacency.items())

    def __contains__(self, node) -> bool:
        return node in self.adjacency

    def __len__(self) -> int:
        return len(self.adjacency)

    def __repr__(self) -> str:
        """String representation of the graph."""
        num_edges = sum(len(edges) for edges in self.adjacency.values()) // 2
        return f"Graph(vertices={len(self.adjacency)}, connections={num_edges})"
