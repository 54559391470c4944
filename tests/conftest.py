"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path
from types import SimpleNamespace

import pytest

from graph_search import Graph, Node


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_dir(project_root: Path) -> Path:
    """Return the bundled configs directory."""
    return project_root / "configs"


@pytest.fixture
def line_graph() -> SimpleNamespace:
    """
    Three collinear nodes A(0,0), B(1,0), C(2,0).

    Edges: A-B weight 1, B-C weight 1, A-C weight 5.
    """
    a = Node(0, 0, "A")
    b = Node(1, 0, "B")
    c = Node(2, 0, "C")

    graph = Graph()
    for node in (a, b, c):
        graph.add_vertex(node)
    ab = graph.connect_vertices(a, b, 1)
    bc = graph.connect_vertices(b, c, 1)
    ac = graph.connect_vertices(a, c, 5)

    return SimpleNamespace(graph=graph, a=a, b=b, c=c, ab=ab, bc=bc, ac=ac)


@pytest.fixture
def disconnected_graph() -> SimpleNamespace:
    """Two components: A-B and C-D."""
    a, b = Node(0, 0, "A"), Node(1, 0, "B")
    c, d = Node(5, 5, "C"), Node(6, 5, "D")

    graph = Graph()
    graph.connect_vertices(a, b, 1)
    graph.connect_vertices(c, d, 1)

    return SimpleNamespace(graph=graph, a=a, b=b, c=c, d=d)
