"""Maximum-flow computation with the Edmonds-Karp method.

Repeatedly finds a fewest-hops augmenting path in the residual graph with BFS
and pushes its bottleneck flow along it, until the sink is unreachable. Every
augmentation is returned, in discovery order, so callers can see how the flow
was assembled rather than only its value.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from flowrank.algorithms.bfs import find_augmenting_path
from flowrank.algorithms.residual import build_residual_graph
from flowrank.algorithms.types import AugmentingPath, Capacity
from flowrank.config import GRAPH_ATTRS
from flowrank.graph.strict_multidigraph import NodeID, StrictMultiDiGraph
from flowrank.logging import get_logger

logger = get_logger(__name__)


def calc_max_flow(
    graph: StrictMultiDiGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    capacity_attr: Optional[str] = None,
    flow_attr: Optional[str] = None,
) -> List[AugmentingPath]:
    """Compute the maximum flow from src_node to dst_node.

    Capacities and flows of the graph's edges are updated in place while the
    computation runs and reset to their original values before returning,
    including when an exception interrupts the computation. Reverse edges live
    only in the residual graph and are never added to ``graph``.

    Args:
        graph: Capacity graph; every edge needs a non-negative ``capacity_attr``.
        src_node: Source node.
        dst_node: Sink node.
        capacity_attr: Edge capacity attribute. Defaults to ``GRAPH_ATTRS``.
        flow_attr: Edge flow attribute. Defaults to ``GRAPH_ATTRS``.

    Returns:
        List[AugmentingPath]: Augmentations in the order they were found. Empty
        if the sink is unreachable or ``src_node == dst_node``.

    Raises:
        ValueError: If either node is missing, or an edge has no capacity or a
            negative capacity or flow.

    Example:
        >>> g = StrictMultiDiGraph()
        >>> for n in "ABCD":
        ...     g.add_node(n)
        >>> for u, v, cap in [("A", "B", 3), ("A", "C", 2), ("B", "D", 2), ("C", "D", 3)]:
        ...     _ = g.add_edge(u, v, capacity=cap)
        >>> paths = calc_max_flow(g, "A", "D")
        >>> max_flow_value(paths)
        4
    """
    if src_node not in graph:
        raise ValueError(f"Source node '{src_node}' does not exist.")
    if dst_node not in graph:
        raise ValueError(f"Destination node '{dst_node}' does not exist.")

    residual = build_residual_graph(
        graph,
        capacity_attr=capacity_attr or GRAPH_ATTRS.capacity_attr,
        flow_attr=flow_attr or GRAPH_ATTRS.flow_attr,
    )

    augmentations: List[AugmentingPath] = []
    try:
        while True:
            path = find_augmenting_path(residual, src_node, dst_node)
            if path is None:
                break

            augmentations.append(path)
            for edge_id in path.edges:
                residual.push(edge_id, path.bottleneck)
            logger.debug(
                "Augmenting path %s -> %s: nodes=%s bottleneck=%s",
                src_node,
                dst_node,
                path.nodes,
                path.bottleneck,
            )
    finally:
        residual.restore()

    logger.debug(
        "Max flow %s -> %s: value=%s over %d augmenting paths",
        src_node,
        dst_node,
        max_flow_value(augmentations),
        len(augmentations),
    )
    return augmentations


def max_flow_value(paths: Iterable[AugmentingPath]) -> Capacity:
    """Return the total flow carried by a sequence of augmenting paths."""
    return sum(path.bottleneck for path in paths)
