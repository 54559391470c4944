"""
Abstract base class for graph search planners.

This module defines the common interface that search planners over a Graph
must implement, along with the result and status types they share.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .events import Event, EventSink
from .exceptions import InvalidArgumentError


class SearchMethod(str, Enum):
    """
    Recognized search methods.

    The values are the exact strings shown to users when picking a method.
    """

    UCS = "Uniform Cost Search"
    GREEDY = "Greedy Search"
    A_STAR = "A* Search"

    @classmethod
    def parse(cls, method) -> "SearchMethod":
        """
        Resolve a method from a member, its display string or a config key.

        Args:
            method: SearchMethod, display string, or one of 'ucs', 'greedy', 'astar'

        Returns:
            Matching SearchMethod

        Raises:
            InvalidArgumentError: If the method is not recognized
        """
        if isinstance(method, cls):
            return method
        if isinstance(method, str):
            for member in cls:
                if member.value == method:
                    return member
            if method in METHOD_KEYS:
                return METHOD_KEYS[method]
        raise InvalidArgumentError(f"Invalid search method {method!r}")


METHOD_KEYS = {
    'ucs': SearchMethod.UCS,
    'greedy': SearchMethod.GREEDY,
    'astar': SearchMethod.A_STAR,
}


class SearchStatus(str, Enum):
    """Lifecycle of a single search call."""

    INIT = "init"
    RUNNING = "running"
    GOAL_FOUND = "goal_found"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a search.

    Attributes:
        cost (float): Total path cost, math.inf if the goal is unreachable
        path (Tuple): Nodes from source to goal inclusive, empty if unreachable
        method (SearchMethod): Method that produced the result
        nodes_explored (int): Number of nodes expanded
        planning_time (float): Wall time spent searching (seconds)
    """

    cost: float
    path: Tuple[Any, ...]
    method: Optional[SearchMethod] = None
    nodes_explored: int = 0
    planning_time: float = field(default=0.0, compare=False)

    @property
    def path_exists(self) -> bool:
        return len(self.path) > 0

    @property
    def is_unreachable(self) -> bool:
        return math.isinf(self.cost)


class PathPlanner(ABC):
    """
    Abstract base class for graph search planners.

    Planners read the graph and never modify it. All bookkeeping for a
    search lives inside the search call; the planner only keeps the last
    result so metrics can be queried afterwards.

    Attributes:
        graph: The Graph to search
        config (Dict[str, Any]): Algorithm configuration loaded from YAML
        result (Optional[SearchResult]): Result of the last search
        events (List[Event]): Events emitted by the last search
        status (SearchStatus): State of the last search
    """

    def __init__(self, graph, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the planner.

        Args:
            graph: Graph to search
            config: The 'algorithm' section of a search config file
        """
        self.graph = graph
        self.config = config or {}
        self.result: Optional[SearchResult] = None
        self.events: List[Event] = []
        self.status = SearchStatus.INIT
        self._initialize_algorithm()

    @abstractmethod
    def _initialize_algorithm(self) -> None:
        """
        Initialize algorithm-specific parameters from the configuration.

        Subclasses must override this method.
        """
        pass

    @abstractmethod
    def search(self, source, goal, method,
               sink: Optional[EventSink] = None) -> Tuple[SearchResult, List[Event]]:
        """
        Search for a path from source to goal.

        Args:
            source: Start vertex
            goal: Goal vertex
            method: A SearchMethod or its display string
            sink: Optional callable receiving each event as it is emitted

        Returns:
            Tuple of (SearchResult, ordered list of events)

        Raises:
            InvalidArgumentError: If source or goal is None, or method is unknown

        Example:
            >>> planner = BestFirstPlanner(graph)
            >>> result, events = planner.search(a, c, "A* Search")
            >>> print(result.cost, [n.label for n in result.path])
        """
        pass

    @abstractmethod
    def get_metrics(self) -> Dict[str, Any]:
        """
        Get performance metrics from the last search.

        Returns:
            Dictionary containing metrics such as:
            - cost (float): Total path cost
            - planning_time (float): Time taken to search (seconds)
            - nodes_explored (int): Number of nodes expanded
        """
        pass

    @staticmethod
    def _check_arguments(source, goal, method) -> SearchMethod:
        """Validate search arguments and resolve the method."""
        if source is None or goal is None:
            raise InvalidArgumentError(
                f"Invalid arguments for search. Source: {source} | Goal: {goal}")
        return SearchMethod.parse(method)

    def validate_path(self) -> bool:
        """
        Validate that the last path is still connected in the graph.

        Returns:
            True if a path exists and every consecutive pair is connected
            False otherwise
        """
        if self.result is None or not self.result.path:
            return False

        path = self.result.path
        for i in range(len(path) - 1):
            if not self.graph.are_connected(path[i], path[i + 1]):
                return False

        return True

    def get_path_cost(self) -> float:
        """
        Sum the current edge weights along the last path.

        Uses the cheapest edge between each consecutive pair, so duplicate
        connections do not inflate the total.

        Returns:
            Path cost, 0.0 for a single-node path, math.inf if no path exists
        """
        if self.result is None or not self.result.path:
            return math.inf

        total = 0.0
        path = self.result.path
        for i in range(len(path) - 1):
            weights = [e.weight for e in self.graph.get_edges(path[i]) if e.ending is path[i + 1]]
            if not weights:
                return math.inf
            total += min(weights)

        return total

    def __repr__(self) -> str:
        """String representation of the planner."""
        return f"{self.__class__.__name__}(config={self.config})"

    def __str__(self) -> str:
        """Human-readable string representation."""
        status = "with path" if self.result and self.result.path else "no path"
        return f"{self.__class__.__name__} ({status})"
