"""PageRank by power iteration over a link index.

Each round builds a fresh score table from the previous one:

    score(v) = dangling + (1 - d) / N + d * sum(prev(p) / outdeg(p) for p -> v)

where ``dangling = d * sum(prev(n) / N)`` over nodes without outgoing links.
Spreading the rank of dangling nodes over every node keeps the total at 1.
The number of rounds is fixed; there is no convergence test.
"""

from __future__ import annotations

from typing import Optional

from flowrank.algorithms.links import LinkIndex, build_link_index
from flowrank.algorithms.types import RankTable
from flowrank.config import PAGERANK_CONFIG, PageRankConfig
from flowrank.graph.strict_multidigraph import StrictMultiDiGraph


def rank_link_index(
    index: LinkIndex,
    iterations: Optional[int] = None,
    damping_factor: Optional[float] = None,
) -> RankTable:
    """Run the power iteration on a prepared link index.

    Args:
        index: Link index holding every node and its links.
        iterations: Number of rounds. Defaults to ``PAGERANK_CONFIG.iterations``.
        damping_factor: Link-following probability. Defaults to
            ``PAGERANK_CONFIG.damping_factor``.

    Returns:
        RankTable: Node -> score, in ``index.nodes`` order.

    Raises:
        ValueError: If the index has no nodes, or the settings are invalid.
    """
    config = PageRankConfig(
        damping_factor=(
            PAGERANK_CONFIG.damping_factor if damping_factor is None else damping_factor
        ),
        iterations=PAGERANK_CONFIG.iterations if iterations is None else iterations,
    )
    config.validate()

    num_nodes = len(index.nodes)
    if num_nodes == 0:
        raise ValueError("Cannot rank a graph with no nodes.")

    d = config.damping_factor
    teleport = (1.0 - d) / num_nodes
    ranks: RankTable = {node: 1.0 / num_nodes for node in index.nodes}

    for _ in range(config.iterations):
        dangling = sum(
            d * ranks[node] / num_nodes
            for node in index.nodes
            if not index.to_links[node]
        )

        new_ranks: RankTable = {}
        for node in index.nodes:
            neighbor_share = sum(
                ranks[back] / len(index.to_links[back])
                for back in index.from_links[node]
            )
            new_ranks[node] = dangling + teleport + d * neighbor_share
        ranks = new_ranks

    return ranks


def calc_pagerank(
    graph: StrictMultiDiGraph,
    iterations: Optional[int] = None,
    damping_factor: Optional[float] = None,
) -> RankTable:
    """Compute the PageRank of every node in ``graph``.

    The graph is not modified; links are read from its edges once.

    Args:
        graph: Directed graph; parallel edges count as a single link.
        iterations: Number of rounds (default 10).
        damping_factor: Damping factor (default 0.85).

    Returns:
        RankTable: Node -> score; the scores sum to 1.

    Raises:
        ValueError: If the graph has no nodes, or the settings are invalid.
    """
    return rank_link_index(build_link_index(graph), iterations, damping_factor)
