"""
Property-based tests for the best-first planner.

Graphs are random planar graphs on distinct integer positions. Every edge
weight is at least the straight-line distance between its endpoints, which
makes the euclidean heuristic admissible and consistent.
"""

import math

import hypothesis
from hypothesis import strategies as st

from graph_search import Graph, Node, search

UCS = "Uniform Cost Search"
GREEDY = "Greedy Search"
A_STAR = "A* Search"


@st.composite
def planar_graphs(draw):
    positions = draw(st.lists(
        st.tuples(st.integers(0, 20), st.integers(0, 20)),
        min_size=2, max_size=8, unique=True,
    ))
    n = len(positions)
    connections = draw(st.lists(
        st.tuples(st.integers(0, n - 1), st.integers(0, n - 1), st.integers(0, 5)),
        max_size=20,
    ))

    nodes = [Node(x, y, str(i)) for i, (x, y) in enumerate(positions)]
    graph = Graph()
    for node in nodes:
        graph.add_vertex(node)
    for i, j, extra in connections:
        if i == j:
            continue
        weight = math.ceil(nodes[i].distance(nodes[j])) + extra
        graph.connect_vertices(nodes[i], nodes[j], weight)

    return graph, nodes


def shortest_cost(graph, source, goal):
    """Bellman-Ford reference cost."""
    dist = {node: math.inf for node in graph.vertices}
    dist[source] = 0.0
    for _ in range(len(dist)):
        for node, edges in graph.adjacency.items():
            for edge in edges:
                if dist[node] + edge.weight < dist[edge.ending]:
                    dist[edge.ending] = dist[node] + edge.weight
    return dist[goal]


def path_weight(graph, path):
    total = 0.0
    for a, b in zip(path, path[1:]):
        total += min(e.weight for e in graph.get_edges(a) if e.ending is b)
    return total


class TestOptimality:
    """UCS and A* on consistent heuristics."""

    @hypothesis.given(planar_graphs())
    @hypothesis.settings(max_examples=100)
    def test_ucs_and_astar_are_optimal(self, data):
        graph, nodes = data
        source, goal = nodes[0], nodes[-1]
        expected = shortest_cost(graph, source, goal)

        ucs, _ = search(graph, source, goal, UCS)
        astar, _ = search(graph, source, goal, A_STAR)

        assert ucs.cost == expected
        assert astar.cost == expected

    @hypothesis.given(planar_graphs())
    @hypothesis.settings(max_examples=100)
    def test_astar_expands_no_more_than_ucs(self, data):
        graph, nodes = data
        source, goal = nodes[0], nodes[-1]

        ucs, _ = search(graph, source, goal, UCS)
        astar, _ = search(graph, source, goal, A_STAR)
        hypothesis.assume(ucs.path_exists)

        assert astar.nodes_explored <= ucs.nodes_explored

    @hypothesis.given(planar_graphs())
    @hypothesis.settings(max_examples=50)
    def test_greedy_never_beats_optimal(self, data):
        graph, nodes = data
        source, goal = nodes[0], nodes[-1]

        ucs, _ = search(graph, source, goal, UCS)
        greedy, _ = search(graph, source, goal, GREEDY)

        assert greedy.path_exists == ucs.path_exists
        assert greedy.cost >= ucs.cost


class TestResultShape:
    """Relations between cost, path and events."""

    @hypothesis.given(planar_graphs(), st.sampled_from([UCS, GREEDY, A_STAR]))
    @hypothesis.settings(max_examples=100)
    def test_cost_matches_path(self, data, method):
        graph, nodes = data
        source, goal = nodes[0], nodes[-1]
        result, events = search(graph, source, goal, method)

        if result.path_exists:
            assert result.path[0] is source
            assert result.path[-1] is goal
            assert result.cost == path_weight(graph, result.path)
        else:
            assert math.isinf(result.cost)
            assert result.path == ()

        assert events[-1].nodes == result.path
        assert len(events[-1].edges) == max(len(result.path) - 1, 0)

    @hypothesis.given(planar_graphs(), st.sampled_from([UCS, GREEDY, A_STAR]))
    @hypothesis.settings(max_examples=50)
    def test_search_is_repeatable(self, data, method):
        graph, nodes = data
        source, goal = nodes[0], nodes[-1]

        first, first_events = search(graph, source, goal, method)
        second, second_events = search(graph, source, goal, method)

        assert first == second
        assert first_events == second_events

    @hypothesis.given(planar_graphs(), st.sampled_from([UCS, GREEDY, A_STAR]))
    @hypothesis.settings(max_examples=50)
    def test_each_node_expanded_once(self, data, method):
        graph, nodes = data
        result, events = search(graph, nodes[0], nodes[-1], method)

        current = [e.node for e in events if e.kind == 'node-current']
        assert len(current) == len(set(map(id, current)))
        assert len(current) == result.nodes_explored
