from __future__ import annotations

import random

import pytest

from collab_graph.errors import UnknownNodeError
from collab_graph.graph import Graph
from collab_graph.models import Edge


def _random_edges(seed: int, nodes: int = 40, edges: int = 120) -> list[tuple[int, int]]:
    rng = random.Random(seed)
    out = []
    while len(out) < edges:
        a, b = rng.randrange(nodes), rng.randrange(nodes)
        if a != b:
            out.append((a, b))
    return out


def test_adjacency_is_symmetric() -> None:
    graph = Graph.build(_random_edges(7))
    for a in graph.nodes():
        for b in graph.neighbors(a):
            assert a in graph.neighbors(b)


def test_edge_count_ignores_duplicates_and_order() -> None:
    edges = _random_edges(11)
    distinct = {Edge.of(a, b) for a, b in edges}

    forward = Graph.build(edges)
    shuffled = list(edges)
    random.Random(3).shuffle(shuffled)
    backward = Graph.build([(b, a) for a, b in shuffled] + edges)

    assert forward.edge_count() == len(distinct)
    assert backward.edge_count() == len(distinct)


def test_degree_sum_is_twice_edge_count() -> None:
    graph = Graph.build(_random_edges(19))
    assert sum(graph.degree(node) for node in graph.nodes()) == 2 * graph.edge_count()


def test_reinserting_edge_is_noop() -> None:
    once = Graph.build([(1, 2)])
    twice = Graph.build([(1, 2), (2, 1), Edge(1, 2)])

    assert once.neighbors(1) == twice.neighbors(1) == frozenset({2})
    assert twice.edge_count() == 1


def test_node_and_edge_iterators_are_sorted_and_canonical() -> None:
    graph = Graph.build([(5, 3), (1, 5), (3, 1)])

    assert list(graph.nodes()) == [1, 3, 5]
    assert list(graph.edges()) == [(1, 3), (1, 5), (3, 5)]
    assert len(graph) == 3
    assert 3 in graph
    assert 4 not in graph


def test_isolated_nodes_can_be_registered() -> None:
    graph = Graph.build([(1, 2)], nodes=[9])

    assert graph.node_count() == 3
    assert graph.degree(9) == 0
    assert graph.edge_count() == 1


def test_unknown_node_fails_the_query_only() -> None:
    graph = Graph.build([(1, 2)])

    with pytest.raises(UnknownNodeError) as info:
        graph.neighbors(42)
    assert info.value.node == 42
    # KeyError compatibility for callers that catch lookups generically
    with pytest.raises(KeyError):
        graph.degree(42)

    assert graph.degree(1) == 1


def test_neighbors_are_read_only() -> None:
    graph = Graph.build([(1, 2)])
    with pytest.raises(AttributeError):
        graph.neighbors(1).add(3)  # type: ignore[attr-defined]


def test_edge_rejects_self_loop() -> None:
    with pytest.raises(ValueError):
        Edge.of(3, 3)
    assert Edge.of(4, 2) == Edge(2, 4)


def test_empty_graph() -> None:
    graph = Graph.build([])
    assert graph.is_empty()
    assert graph.node_count() == 0
    assert graph.edge_count() == 0
    assert list(graph.edges()) == []
