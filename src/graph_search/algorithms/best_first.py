"""
Best-first search over an adjacency-list graph.

One algorithm covers Uniform Cost Search, Greedy Search and A* Search. They
differ only in the priority used to order the frontier:

- Uniform Cost Search: g(n), the cost of the best known path to n
- Greedy Search: h(n), the estimated distance from n to the goal
- A* Search: g(n) + h(n)

Expanded nodes go into a closed set and are never expanded again, so UCS and
A* return optimal paths as long as weights are non-negative and the
heuristic is consistent.
"""

import heapq
import itertools
import logging
import math
import time
from typing import Any, Dict, List, Optional, Tuple

from ..core.edge import Edge
from ..core.events import (Event, EventSink, NodeCurrent, NodeFringe, NodeGoal,
                           EdgeHighlighted, PathHighlighted, event_subject)
from ..core.path_planner import PathPlanner, SearchMethod, SearchResult, SearchStatus
from ..utils.config_loader import get_search_params
from ..utils.geometry import HEURISTICS

logger = logging.getLogger(__name__)


class BestFirstPlanner(PathPlanner):
    """
    Unified best-first search planner.

    The frontier is a binary heap of (priority, sequence, node) entries. The
    sequence number increases with every push, so nodes with equal priority
    are expanded in the order they were pushed. A node can sit in the heap
    more than once; entries popped after the node was expanded are dropped.

    Attributes:
        method (SearchMethod): Method used by run()
        heuristic_type (str): 'euclidean' or 'manhattan'
        log_events (bool): Log every emitted event at DEBUG level
        came_from (Dict): Parent mapping for path reconstruction
        nodes_explored (int): Number of nodes expanded during the last search
        planning_time (float): Duration of the last search (seconds)
    """

    def _initialize_algorithm(self) -> None:
        """Read search parameters from the configuration."""
        params = get_search_params(self.config)

        self.method = SearchMethod.parse(params['method'])

        heuristic_type = params['heuristic_type']
        if heuristic_type not in HEURISTICS:
            logger.warning("Unknown heuristic_type %r, falling back to euclidean", heuristic_type)
            heuristic_type = 'euclidean'
        self.heuristic_type = heuristic_type
        self.log_events = params['log_events']

        self.came_from: Dict[Any, Any] = {}
        self.nodes_explored = 0
        self.planning_time = 0.0

    def _heuristic(self, node, goal) -> float:
        """
        Estimate the remaining cost from node to goal.

        Args:
            node: Node being scored
            goal: Goal node

        Returns:
            Distance between the two positions
        """
        return HEURISTICS[self.heuristic_type]((node.x, node.y), (goal.x, goal.y))

    @staticmethod
    def _priority(method: SearchMethod, g: float, h: float) -> float:
        if method is SearchMethod.UCS:
            return g
        if method is SearchMethod.GREEDY:
            return h
        return g + h

    def _reconstruct_path(self, goal) -> Tuple[List[Any], List[Edge]]:
        """
        Reconstruct the path from the source to goal using parent pointers.

        The connecting edge of each step is looked up from the parent towards
        the child. A step without such an edge contributes no edge.

        Args:
            goal: Goal node

        Returns:
            (nodes, edges), both ordered from source to goal
        """
        nodes = [goal]
        edges = []
        current = goal
        while current in self.came_from:
            parent = self.came_from[current]
            edge = self.graph.get_edge(parent, current)
            if edge is not None:
                edges.append(edge)
            nodes.append(parent)
            current = parent
        return nodes[::-1], edges[::-1]

    def search(self, source, goal, method,
               sink: Optional[EventSink] = None) -> Tuple[SearchResult, List[Event]]:
        """
        Search for a path from source to goal.

        Events are appended to the returned list in the order they happen
        and, when sink is given, passed to it at the same moment.

        Args:
            source: Start node
            goal: Goal node
            method: A SearchMethod or its display string
            sink: Optional callable receiving each event as it is emitted

        Returns:
            Tuple of (SearchResult, ordered list of events)

        Raises:
            InvalidArgumentError: If source or goal is None, or method is unknown
        """
        method = self._check_arguments(source, goal, method)

        start_time = time.time()
        self.status = SearchStatus.RUNNING
        self.events = []
        self.nodes_explored = 0
        events = self.events

        def emit(event: Event) -> None:
            events.append(event)
            if self.log_events:
                logger.debug("%s %r", event.kind, event_subject(event))
            if sink is not None:
                sink(event)

        g_score = {source: 0.0}
        h_score = {}
        self.came_from = {}
        explored = set()
        sequence = itertools.count()

        # The source is alone in the heap, so its priority is never compared
        open_set = [(0.0, next(sequence), source)]
        terminal = None

        while open_set:
            _, _, current = heapq.heappop(open_set)
            if current in explored:
                continue

            self.nodes_explored += 1
            emit(NodeCurrent(current))

            # Goal reached (lowest priority in the frontier)
            if current is goal:
                if g_score.get(current, math.inf) < math.inf:
                    terminal = current
                    emit(NodeGoal(current))
                break

            explored.add(current)

            for edge in self.graph.get_edges(current):
                emit(EdgeHighlighted(edge))
                neighbor = edge.ending
                if neighbor in explored:
                    continue

                emit(NodeFringe(neighbor))
                tentative_g_score = g_score[current] + edge.weight

                if tentative_g_score < g_score.get(neighbor, math.inf):
                    g_score[neighbor] = tentative_g_score
                    h_score[neighbor] = self._heuristic(neighbor, goal)
                    self.came_from[neighbor] = current
                    priority = self._priority(method, tentative_g_score, h_score[neighbor])
                    heapq.heappush(open_set, (priority, next(sequence), neighbor))

        if terminal is not None:
            path_nodes, path_edges = self._reconstruct_path(terminal)
            cost = g_score[terminal]
            self.status = SearchStatus.GOAL_FOUND
        else:
            path_nodes, path_edges = [], []
            cost = math.inf
            self.status = SearchStatus.UNREACHABLE

        emit(PathHighlighted(tuple(path_nodes), tuple(path_edges)))

        self.planning_time = time.time() - start_time
        self.result = SearchResult(
            cost=cost,
            path=tuple(path_nodes),
            method=method,
            nodes_explored=self.nodes_explored,
            planning_time=self.planning_time,
        )

        logger.info("%s: cost=%s path=%s (%d nodes explored, %.4fs)",
                    method.value, cost, [getattr(n, 'label', n) for n in path_nodes],
                    self.nodes_explored, self.planning_time)
        return self.result, list(events)

    def run(self, source, goal,
            sink: Optional[EventSink] = None) -> Tuple[SearchResult, List[Event]]:
        """Search using the method named in the configuration."""
        return self.search(source, goal, self.method, sink=sink)

    def get_metrics(self) -> Dict[str, Any]:
        """
        Get search metrics from the last run.

        Returns:
            Dictionary with:
            - algorithm: Display name of the method used
            - cost: Total path cost (inf if unreachable)
            - path_length: Number of nodes on the path
            - planning_time: Time to compute the path
            - nodes_explored: Number of nodes expanded
            - path_exists: Whether the goal was reached
        """
        result = self.result
        return {
            'algorithm': result.method.value if result else self.method.value,
            'cost': result.cost if result else math.inf,
            'path_length': len(result.path) if result else 0,
            'planning_time': self.planning_time,
            'nodes_explored': self.nodes_explored,
            'path_exists': bool(result and result.path_exists),
        }


def search(graph, source, goal, method,
           sink: Optional[EventSink] = None,
           config: Optional[Dict[str, Any]] = None) -> Tuple[SearchResult, List[Event]]:
    """
    Run a best-first search with a fresh planner.

    Args:
        graph: Graph to search
        source: Start node
        goal: Goal node
        method: "Uniform Cost Search", "Greedy Search" or "A* Search"
        sink: Optional callable receiving each event as it is emitted
        config: Optional algorithm configuration dictionary

    Returns:
        Tuple of (SearchResult, ordered list of events)

    Example:
        >>> result, events = search(graph, a, c, SearchMethod.UCS)
        >>> result.cost
        2.0
    """
    return BestFirstPlanner(graph, config).search(source, goal, method, sink=sink)
