"""
graph_search - Best-First Graph Search

Uniform Cost Search, Greedy Search and A* Search over an undirected weighted
graph, unified behind one algorithm. Each search returns its result together
with an ordered trace of visualization events that a presentation layer can
play back at its own pace.

Modules:
    core.node: Positioned vertex with an identity-based equality
    core.edge: Shared weight cells and directed adjacency entries
    core.graph: Adjacency-list graph
    core.events: Visualization events emitted during a search
    core.path_planner: Planner base class, methods and results
    algorithms.best_first: The best-first search planner
    utils.config_loader: YAML configuration management
"""

from .core.node import Node
from .core.edge import Edge, WeightCell
from .core.graph import Graph
from .core.events import (Event, NodeCurrent, NodeFringe, NodeGoal,
                          EdgeHighlighted, PathHighlighted)
from .core.exceptions import GraphSearchError, InvalidArgumentError, VertexNotFoundError
from .core.path_planner import PathPlanner, SearchMethod, SearchResult, SearchStatus
from .algorithms.best_first import BestFirstPlanner, search

__version__ = "1.0.0"

__all__ = [
    "Node", "Edge", "WeightCell", "Graph",
    "Event", "NodeCurrent", "NodeFringe", "NodeGoal", "EdgeHighlighted", "PathHighlighted",
    "GraphSearchError", "InvalidArgumentError", "VertexNotFoundError",
    "PathPlanner", "SearchMethod", "SearchResult", "SearchStatus",
    "BestFirstPlanner", "search",
]
