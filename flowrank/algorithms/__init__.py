"""Flow and ranking algorithms.

- ``residual``, ``bfs``, ``max_flow``: Edmonds-Karp maximum flow.
- ``links``, ``pagerank``: PageRank power iteration.
- ``sensitivity``: leave-one-out influence of incoming links on PageRank.
"""

from flowrank.algorithms.max_flow import calc_max_flow, max_flow_value
from flowrank.algorithms.pagerank import calc_pagerank
from flowrank.algorithms.sensitivity import (
    calc_most_influential_neighbors,
    calc_neighbor_influence,
)
from flowrank.algorithms.types import NO_NEIGHBOR, AugmentingPath

__all__ = [
    "AugmentingPath",
    "NO_NEIGHBOR",
    "calc_max_flow",
    "calc_most_influential_neighbors",
    "calc_neighbor_influence",
    "calc_pagerank",
    "max_flow_value",
]
