"""Breadth-first search for augmenting paths in a residual graph."""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional

from flowrank.algorithms.residual import ResidualGraph
from flowrank.algorithms.types import AugmentingPath, ResidualEdgeID
from flowrank.graph.strict_multidigraph import NodeID


def find_augmenting_path(
    residual: ResidualGraph,
    src_node: NodeID,
    dst_node: NodeID,
) -> Optional[AugmentingPath]:
    """Find the shortest (fewest hops) augmenting path from src_node to dst_node.

    Each node is reached at most once; ``back_pointer`` maps a reached node to
    the residual edge id used to reach it. Edges with no residual capacity and
    edges leading back into the source are skipped. The search stops as soon as
    the destination is reached, even if the queue still holds nodes.

    Args:
        residual: The residual graph to search.
        src_node: Start of the path.
        dst_node: End of the path.

    Returns:
        The path with its bottleneck, or None if dst_node is unreachable.
    """
    back_pointer: Dict[NodeID, ResidualEdgeID] = {}
    queue = deque([src_node])

    while queue:
        node = queue.popleft()
        for edge_id in residual.out_edges[node]:
            edge = residual.edge(edge_id)
            if (
                edge.dst == src_node
                or edge.dst in back_pointer
                or residual.capacity(edge_id) <= 0
            ):
                continue

            back_pointer[edge.dst] = edge_id
            if edge.dst == dst_node:
                return _rebuild_path(residual, back_pointer, src_node, dst_node)
            queue.append(edge.dst)

    return None


def _rebuild_path(
    residual: ResidualGraph,
    back_pointer: Dict[NodeID, ResidualEdgeID],
    src_node: NodeID,
    dst_node: NodeID,
) -> AugmentingPath:
    """Walk back-pointers from dst_node to src_node and measure the bottleneck."""
    edge_ids: List[ResidualEdgeID] = []
    node = dst_node
    while node != src_node:
        edge_id = back_pointer[node]
        edge_ids.append(edge_id)
        node = residual.edge(edge_id).src
    edge_ids.reverse()

    edges = [residual.edge(edge_id) for edge_id in edge_ids]
    bottleneck = min(residual.capacity(edge_id) for edge_id in edge_ids)
    return AugmentingPath(
        edges=tuple(edge_ids),
        bottleneck=bottleneck,
        nodes=(src_node,) + tuple(edge.dst for edge in edges),
        edge_keys=tuple(edge.key for edge in edges),
    )
