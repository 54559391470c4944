"""Exceptions raised by the graph search package."""


class GraphSearchError(Exception):
    """Base class for all graph search errors."""


class InvalidArgumentError(GraphSearchError, ValueError):
    """Raised when a search is started with an unset node or unknown method."""


class VertexNotFoundError(GraphSearchError, KeyError):
    """Raised when removing a vertex that is not part of the graph."""
