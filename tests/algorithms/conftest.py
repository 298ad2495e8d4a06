import pytest

from flowrank.graph.strict_multidigraph import StrictMultiDiGraph


def _graph(nodes, edges):
    g = StrictMultiDiGraph()
    for node in nodes:
        g.add_node(node)
    for src, dst, cap in edges:
        g.add_edge(src, dst, capacity=cap)
    return g


@pytest.fixture
def diamond():
    # Capacity:
    #       [3]       [2]
    #   ┌───────►B────────┐
    #   │                 ▼
    #   A                 D
    #   │                 ▲
    #   └───────►C────────┘
    #       [2]       [3]
    return _graph(
        "ABCD",
        [("A", "B", 3), ("A", "C", 2), ("B", "D", 2), ("C", "D", 3)],
    )


@pytest.fixture
def clrs():
    # Textbook flow network with max flow 23 from s to t.
    return _graph(
        ["s", "v1", "v2", "v3", "v4", "t"],
        [
            ("s", "v1", 16),
            ("s", "v2", 13),
            ("v2", "v1", 4),
            ("v1", "v3", 12),
            ("v3", "v2", 9),
            ("v2", "v4", 14),
            ("v4", "v3", 7),
            ("v3", "t", 20),
            ("v4", "t", 4),
        ],
    )


@pytest.fixture
def crossover():
    # All s-t paths have three hops. BFS first routes s->a->b->t, which blocks
    # c from reaching t until the a->b flow is cancelled over its reverse edge:
    # s->c->b->a->d->t.
    #
    #   s ──► a ──► b ──► t
    #   │     │     ▲     ▲
    #   ▼     ▼     │     │
    #   c ────┼─────┘     │
    #         d ──────────┘
    return _graph(
        ["s", "a", "b", "c", "d", "t"],
        [
            ("s", "a", 1),
            ("s", "c", 1),
            ("a", "b", 1),
            ("a", "d", 1),
            ("c", "b", 1),
            ("b", "t", 1),
            ("d", "t", 1),
        ],
    )


@pytest.fixture
def parallel():
    # Two parallel A->B edges feeding one B->C edge.
    return _graph(
        "ABC",
        [("A", "B", 2), ("A", "B", 5), ("B", "C", 6)],
    )


@pytest.fixture
def disconnected():
    return _graph("ABCD", [("A", "B", 4), ("C", "D", 4)])


@pytest.fixture
def cycle_with_dangling():
    # A->B->C->A plus an isolated node D without any links.
    return _graph(
        "ABCD",
        [("A", "B", 1), ("B", "C", 1), ("C", "A", 1)],
    )


@pytest.fixture
def chain():
    # A->B->C
    return _graph("ABC", [("A", "B", 1), ("B", "C", 1)])
