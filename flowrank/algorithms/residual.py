"""Residual graph construction for max-flow computation.

Every original edge gets a forward copy with an even id and a zero-capacity
reverse edge with the following odd id. The pairing is stored explicitly on
each `ResidualEdge` (``reverse_id``) and always satisfies
``reverse_id == edge_id ^ 1``.

Forward residual edges operate directly on the caller's edge attribute dicts,
so augmentation is visible on the input graph while a computation runs. The
pre-run capacity and flow of every forward edge is kept in a snapshot and
written back by `ResidualGraph.restore`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from flowrank.algorithms.types import Capacity, ResidualEdgeID
from flowrank.graph.strict_multidigraph import (
    AttrDict,
    EdgeID,
    NodeID,
    StrictMultiDiGraph,
)

# Snapshot entry: (capacity, flow); flow is None when the attribute was absent.
EdgeSnapshot = Tuple[Capacity, Optional[Capacity]]


@dataclass
class ResidualEdge:
    """A forward or reverse edge of the residual graph."""

    edge_id: ResidualEdgeID
    reverse_id: ResidualEdgeID
    src: NodeID
    dst: NodeID
    attrs: AttrDict
    # Key of the original graph edge; None for reverse edges.
    key: Optional[EdgeID] = None

    @property
    def is_reverse(self) -> bool:
        return self.key is None


@dataclass
class ResidualGraph:
    """Edge registry, per-node outgoing edge ids and the original snapshot.

    Attributes:
        edges: Residual edge id -> ResidualEdge.
        out_edges: Node -> residual edge ids leaving it, in assignment order.
        snapshot: Forward edge id -> pre-run (capacity, flow).
        capacity_attr: Attribute holding the residual capacity.
        flow_attr: Attribute holding the flow.
    """

    edges: Dict[ResidualEdgeID, ResidualEdge] = field(default_factory=dict)
    out_edges: Dict[NodeID, List[ResidualEdgeID]] = field(default_factory=dict)
    snapshot: Dict[ResidualEdgeID, EdgeSnapshot] = field(default_factory=dict)
    capacity_attr: str = "capacity"
    flow_attr: str = "flow"

    def edge(self, edge_id: ResidualEdgeID) -> ResidualEdge:
        """Look up a residual edge.

        Raises:
            ValueError: If no residual edge has this id.
        """
        try:
            return self.edges[edge_id]
        except KeyError:
            raise ValueError(f"Residual edge with id='{edge_id}' not found.") from None

    def reverse(self, edge_id: ResidualEdgeID) -> ResidualEdge:
        """Return the paired counterpart of an edge."""
        return self.edge(self.edge(edge_id).reverse_id)

    def capacity(self, edge_id: ResidualEdgeID) -> Capacity:
        return self.edge(edge_id).attrs[self.capacity_attr]

    def flow(self, edge_id: ResidualEdgeID) -> Capacity:
        return self.edge(edge_id).attrs.get(self.flow_attr, 0)

    def push(self, edge_id: ResidualEdgeID, amount: Capacity) -> None:
        """Push flow over one edge and credit its reverse edge's capacity.

        The reverse edge's flow is left as is; only its residual capacity grows.
        """
        edge = self.edge(edge_id)
        edge.attrs[self.flow_attr] = edge.attrs.get(self.flow_attr, 0) + amount
        edge.attrs[self.capacity_attr] -= amount

        reverse = self.edge(edge.reverse_id)
        reverse.attrs[self.capacity_attr] += amount

    def restore(self) -> None:
        """Write the snapshot back onto the forward edges."""
        for edge_id, (capacity, flow) in self.snapshot.items():
            attrs = self.edges[edge_id].attrs
            attrs[self.capacity_attr] = capacity
            if flow is None:
                attrs.pop(self.flow_attr, None)
            else:
                attrs[self.flow_attr] = flow


def build_residual_graph(
    graph: StrictMultiDiGraph,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
) -> ResidualGraph:
    """Build the residual graph of ``graph``.

    Ids are assigned while walking ``graph.get_edges()`` in order: the k-th
    original edge becomes id ``2k`` and its reverse edge id ``2k + 1``.

    Args:
        graph: The capacity graph.
        capacity_attr: Edge attribute holding the capacity.
        flow_attr: Edge attribute holding the flow (optional on edges).

    Returns:
        ResidualGraph: Registry, adjacency and snapshot for one computation.

    Raises:
        ValueError: If an edge lacks ``capacity_attr`` or has a negative
            capacity or flow.
    """
    residual = ResidualGraph(capacity_attr=capacity_attr, flow_attr=flow_attr)
    for node in graph:
        residual.out_edges[node] = []

    # Validate everything first so a bad edge leaves the graph untouched.
    original_edges = list(graph.get_edges().values())
    for src, dst, key, attrs in original_edges:
        if capacity_attr not in attrs:
            raise ValueError(
                f"Edge '{key}' from {src} to {dst} has no '{capacity_attr}' attribute."
            )
        if attrs[capacity_attr] < 0 or attrs.get(flow_attr, 0) < 0:
            raise ValueError(
                f"Edge '{key}' from {src} to {dst} has a negative capacity or flow."
            )

    edge_id = 0
    for src, dst, key, attrs in original_edges:
        forward_id, reverse_id = edge_id, edge_id + 1

        residual.edges[forward_id] = ResidualEdge(
            forward_id, reverse_id, src, dst, attrs, key
        )
        residual.snapshot[forward_id] = (attrs[capacity_attr], attrs.get(flow_attr))
        residual.out_edges[src].append(forward_id)

        residual.edges[reverse_id] = ResidualEdge(
            reverse_id, forward_id, dst, src, {capacity_attr: 0, flow_attr: 0}
        )
        residual.out_edges[dst].append(reverse_id)

        edge_id += 2

    return residual
