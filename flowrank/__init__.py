"""flowrank: max-flow and PageRank analysis over directed capacity graphs.

Primary API:
    compute_max_flow() - Edmonds-Karp augmenting paths between two nodes
    compute_pagerank() - PageRank scores by power iteration
    compute_most_influential_neighbors() - in-neighbor whose link matters most
    StrictMultiDiGraph - the input graph model

Example:
    from flowrank import StrictMultiDiGraph, compute_max_flow

    g = StrictMultiDiGraph()
    for n in ("A", "B", "C"):
        g.add_node(n)
    g.add_edge("A", "B", capacity=3)
    g.add_edge("B", "C", capacity=2)

    for edges, bottleneck in compute_max_flow(g, "A", "C"):
        print(edges, bottleneck)
"""

from __future__ import annotations

from flowrank import logging
from flowrank.algorithms.max_flow import calc_max_flow as compute_max_flow
from flowrank.algorithms.max_flow import max_flow_value
from flowrank.algorithms.pagerank import calc_pagerank as compute_pagerank
from flowrank.algorithms.sensitivity import (
    calc_most_influential_neighbors as compute_most_influential_neighbors,
)
from flowrank.algorithms.sensitivity import calc_neighbor_influence
from flowrank.algorithms.types import NO_NEIGHBOR, AugmentingPath
from flowrank.graph.io import edgelist_to_graph, graph_to_edgelist
from flowrank.graph.strict_multidigraph import StrictMultiDiGraph

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Model
    "StrictMultiDiGraph",
    "edgelist_to_graph",
    "graph_to_edgelist",
    # Max flow
    "compute_max_flow",
    "max_flow_value",
    "AugmentingPath",
    # Ranking
    "compute_pagerank",
    "compute_most_influential_neighbors",
    "calc_neighbor_influence",
    "NO_NEIGHBOR",
    # Utilities
    "logging",
]
