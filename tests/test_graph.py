import random

import pytest

from roguerooms_core.graph import ConnectionGraph, GraphError, generate_graph, is_reachable


@pytest.mark.parametrize("seed", range(50))
def test_generated_graph_respects_degree_bounds(seed):
    graph = generate_graph(random.Random(seed))

    for node in range(graph.size):
        neighbours = graph.neighbours(node)
        assert 3 <= len(neighbours) <= 6
        assert node not in neighbours
        assert len(set(neighbours)) == len(neighbours)
        for other in neighbours:
            assert node in graph.neighbours(other)


def test_connect_rejects_self_and_duplicate_edges():
    graph = ConnectionGraph(7)
    graph.connect(0, 1)

    with pytest.raises(GraphError):
        graph.connect(2, 2)
    with pytest.raises(GraphError):
        graph.connect(1, 0)
    assert graph.edges() == [(0, 1)]


def test_saturated_slot_is_never_picked():
    graph = ConnectionGraph(7)
    for other in range(1, 7):
        graph.connect(0, other)
    assert not graph.can_add_connection_from(0)

    rng = random.Random(3)
    for _ in range(5):
        a, b = graph.add_random_connection(rng)
        assert 0 not in (a, b)
    assert graph.degree(0) == 6


def test_neighbours_keep_generation_order():
    graph = ConnectionGraph(7)
    graph.connect(3, 5)
    graph.connect(3, 1)
    graph.connect(3, 6)

    assert graph.neighbours(3) == (5, 1, 6)
    assert not graph.is_full()


def test_impossible_degree_bounds_are_rejected():
    with pytest.raises(ValueError):
        ConnectionGraph(3, min_degree=3, max_degree=6)


def test_is_reachable():
    adjacency = {"A": ["B"], "B": ["A", "C"], "C": ["B"], "D": []}

    assert is_reachable(adjacency, "A", "C")
    assert not is_reachable(adjacency, "A", "D")
    assert not is_reachable(adjacency, "Z", "A")


@pytest.mark.parametrize("size", [8, 9, 10])
@pytest.mark.parametrize("seed", range(60))
def test_larger_graphs_restart_instead_of_stalling(size, seed):
    graph = generate_graph(random.Random(seed), size=size)

    assert graph.is_full()
    for node in range(size):
        assert 3 <= graph.degree(node) <= 6
