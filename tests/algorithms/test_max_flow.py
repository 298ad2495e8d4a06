import networkx as nx
import pytest

from flowrank.algorithms import max_flow as max_flow_module
from flowrank.algorithms.max_flow import calc_max_flow, max_flow_value
from flowrank.graph.strict_multidigraph import StrictMultiDiGraph


def _edge_state(graph):
    return {key: dict(attrs) for key, (_, _, _, attrs) in graph.get_edges().items()}


def _nx_max_flow(graph, src, dst):
    """Reference max-flow value from networkx, merging parallel edges."""
    digraph = nx.DiGraph()
    digraph.add_nodes_from(graph)
    for u, v, _, attrs in graph.get_edges().values():
        if digraph.has_edge(u, v):
            digraph[u][v]["capacity"] += attrs["capacity"]
        else:
            digraph.add_edge(u, v, capacity=attrs["capacity"])
    return nx.maximum_flow_value(digraph, src, dst), nx.minimum_cut_value(
        digraph, src, dst
    )


class TestMaxFlowBasic:
    def test_diamond_two_paths(self, diamond):
        paths = calc_max_flow(diamond, "A", "D")

        assert [p.nodes for p in paths] == [("A", "B", "D"), ("A", "C", "D")]
        assert [p.bottleneck for p in paths] == [2, 2]
        assert max_flow_value(paths) == 4

    def test_diamond_edge_ids(self, diamond):
        paths = calc_max_flow(diamond, "A", "D")
        assert [tuple(p) for p in paths] == [((0, 4), 2), ((2, 6), 2)]

    def test_clrs(self, clrs):
        assert max_flow_value(calc_max_flow(clrs, "s", "t")) == 23

    def test_parallel_edges(self, parallel):
        paths = calc_max_flow(parallel, "A", "C")
        assert max_flow_value(paths) == 6
        assert [p.edge_keys for p in paths] == [(0, 2), (1, 2)]

    def test_flow_cancellation_over_reverse_edge(self, crossover):
        paths = calc_max_flow(crossover, "s", "t")

        assert max_flow_value(paths) == 2
        assert paths[0].nodes == ("s", "a", "b", "t")
        second = paths[1]
        assert second.nodes == ("s", "c", "b", "a", "d", "t")
        assert second.edges == (2, 8, 5, 6, 12)
        # The b->a hop runs over the reverse edge of a->b
        assert second.edge_keys == (1, 4, None, 3, 6)


class TestMaxFlowEdgeCases:
    def test_disconnected(self, disconnected):
        assert calc_max_flow(disconnected, "A", "D") == []

    def test_no_edges(self):
        g = StrictMultiDiGraph()
        g.add_node("A")
        g.add_node("B")
        assert calc_max_flow(g, "A", "B") == []

    def test_same_source_and_sink(self, diamond):
        assert calc_max_flow(diamond, "A", "A") == []

    def test_zero_capacity_edges(self):
        g = StrictMultiDiGraph()
        g.add_node("A")
        g.add_node("B")
        g.add_edge("A", "B", capacity=0)
        assert calc_max_flow(g, "A", "B") == []

    def test_missing_src_node(self, diamond):
        with pytest.raises(ValueError, match="Source node 'Z'"):
            calc_max_flow(diamond, "Z", "D")

    def test_missing_dst_node(self, diamond):
        with pytest.raises(ValueError, match="Destination node 'Z'"):
            calc_max_flow(diamond, "A", "Z")

    def test_self_loop_ignored(self):
        g = StrictMultiDiGraph()
        g.add_node("A")
        g.add_node("B")
        g.add_edge("A", "A", capacity=5)
        g.add_edge("A", "B", capacity=3)
        assert max_flow_value(calc_max_flow(g, "A", "B")) == 3


class TestMaxFlowResidualReset:
    def test_edges_restored(self, clrs):
        before = _edge_state(clrs)
        calc_max_flow(clrs, "s", "t")
        assert _edge_state(clrs) == before

    def test_existing_flow_restored(self, diamond):
        diamond.update_edge_attr(0, flow=1)
        calc_max_flow(diamond, "A", "D")
        assert diamond.get_edge_attr(0) == {"capacity": 3, "flow": 1}
        assert "flow" not in diamond.get_edge_attr(1)

    def test_repeated_runs_identical(self, crossover):
        first = calc_max_flow(crossover, "s", "t")
        second = calc_max_flow(crossover, "s", "t")
        assert first == second

    def test_no_reverse_edges_left_in_graph(self, diamond):
        calc_max_flow(diamond, "A", "D")
        assert diamond.number_of_edges() == 4

    def test_restored_when_search_fails(self, diamond, monkeypatch):
        real_search = max_flow_module.find_augmenting_path
        calls = []

        def failing_search(residual, src, dst):
            calls.append(1)
            if len(calls) > 1:
                raise RuntimeError("boom")
            return real_search(residual, src, dst)

        monkeypatch.setattr(max_flow_module, "find_augmenting_path", failing_search)
        before = _edge_state(diamond)

        with pytest.raises(RuntimeError, match="boom"):
            calc_max_flow(diamond, "A", "D")
        assert _edge_state(diamond) == before


@pytest.mark.parametrize(
    "fixture_name,src,dst",
    [
        ("diamond", "A", "D"),
        ("clrs", "s", "t"),
        ("clrs", "v2", "v3"),
        ("crossover", "s", "t"),
        ("parallel", "A", "C"),
        ("disconnected", "A", "B"),
    ],
)
def test_flow_value_matches_min_cut(request, fixture_name, src, dst):
    graph = request.getfixturevalue(fixture_name)
    expected_flow, expected_cut = _nx_max_flow(graph, src, dst)

    value = max_flow_value(calc_max_flow(graph, src, dst))
    assert value == expected_flow
    assert value == expected_cut


def test_bottlenecks_positive(clrs):
    for path in calc_max_flow(clrs, "s", "t"):
        assert path.bottleneck > 0
        assert len(path.nodes) == len(path.edges) + 1


def test_debug_logging(diamond, caplog):
    caplog.set_level("DEBUG", logger="flowrank")
    calc_max_flow(diamond, "A", "D")
    assert "value=4 over 2 augmenting paths" in caplog.text
