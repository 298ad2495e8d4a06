"""Types and data structures shared by the flow and rank engines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple, Union

from flowrank.graph.strict_multidigraph import EdgeID, NodeID

#: Identifier of an edge in a residual graph. Forward copies of original edges
#: get even ids, their paired reverse edges the following odd id.
ResidualEdgeID = int

#: Capacity or flow amount on an edge.
Capacity = int

#: Node -> score mapping produced by the rank engine.
RankTable = Dict[NodeID, float]

#: Name reported for a node that has no incoming links.
NO_NEIGHBOR = "none"


@dataclass(frozen=True)
class AugmentingPath:
    """One augmentation found by the max-flow engine.

    Unpacks as ``(edges, bottleneck)``.

    Attributes:
        edges: Residual edge ids from source to sink.
        bottleneck: Minimum residual capacity along ``edges`` at discovery
            time; the amount of flow pushed along the path.
        nodes: Nodes visited from source to sink (``len(edges) + 1`` entries).
        edge_keys: Original graph edge key per hop, or None where the hop
            cancels flow over a reverse edge.
    """

    edges: Tuple[ResidualEdgeID, ...]
    bottleneck: Capacity
    nodes: Tuple[NodeID, ...] = ()
    edge_keys: Tuple[Optional[EdgeID], ...] = ()

    def __iter__(self) -> Iterator[Union[Tuple[ResidualEdgeID, ...], Capacity]]:
        yield self.edges
        yield self.bottleneck
