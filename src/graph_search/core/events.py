"""
Visualization events emitted by the search engine.

The engine never draws anything. It records what happened to each node and
edge, in order, and leaves colors, timing and animation to whoever consumes
the events.

Event kinds:
    NodeCurrent: node popped from the frontier and being expanded
    NodeFringe: neighbor discovered while expanding a node
    NodeGoal: the goal was popped with a finite cost
    EdgeHighlighted: an outgoing edge of the current node is examined
    PathHighlighted: final path (nodes and connecting edges)
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Tuple, Union

from .edge import Edge


@dataclass(frozen=True)
class NodeCurrent:
    node: Any
    kind: str = field(default='node-current', init=False)


@dataclass(frozen=True)
class NodeFringe:
    node: Any
    kind: str = field(default='node-fringe', init=False)


@dataclass(frozen=True)
class NodeGoal:
    node: Any
    kind: str = field(default='node-goal', init=False)


@dataclass(frozen=True)
class EdgeHighlighted:
    edge: Edge
    kind: str = field(default='edge-highlighted', init=False)

    @property
    def connection(self) -> Any:
        """Caller-owned connection object behind the highlighted edge."""
        return self.edge.connection


@dataclass(frozen=True)
class PathHighlighted:
    nodes: Tuple[Any, ...]
    edges: Tuple[Edge, ...]
    kind: str = field(default='path-highlighted', init=False)


Event = Union[NodeCurrent, NodeFringe, NodeGoal, EdgeHighlighted, PathHighlighted]
EventSink = Callable[[Event], None]


def event_subject(event: Event) -> Any:
    """Return the node, edge or path tuple an event is about."""
    if isinstance(event, EdgeHighlighted):
        return event.edge
    if isinstance(event, PathHighlighted):
        return event.nodes
    return event.node
