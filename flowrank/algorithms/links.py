"""Forward/backward link indexing for PageRank.

`LinkIndex` is a set-valued adjacency built from a graph's edges. Parallel
edges between the same pair of nodes collapse into one link. The index is a
value of its own: ranking and sensitivity trials work on it (or on cheap
copies of it) and never touch the graph it was built from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Set, Tuple

from flowrank.graph.strict_multidigraph import NodeID, StrictMultiDiGraph


@dataclass
class LinkIndex:
    """Per-node outgoing (``to_links``) and incoming (``from_links``) neighbors.

    Every node in ``nodes`` has an entry in both mappings, possibly empty.
    """

    nodes: Tuple[NodeID, ...] = ()
    to_links: Dict[NodeID, Set[NodeID]] = field(default_factory=dict)
    from_links: Dict[NodeID, Set[NodeID]] = field(default_factory=dict)

    def _check_node(self, node: NodeID) -> None:
        if node not in self.to_links:
            raise ValueError(f"Node '{node}' does not exist.")

    def out_degree(self, node: NodeID) -> int:
        self._check_node(node)
        return len(self.to_links[node])

    def in_neighbors(self, node: NodeID) -> FrozenSet[NodeID]:
        """Return a snapshot of the nodes linking to ``node``."""
        self._check_node(node)
        return frozenset(self.from_links[node])

    def has_link(self, u: NodeID, v: NodeID) -> bool:
        return v in self.to_links.get(u, ())

    def add_link(self, u: NodeID, v: NodeID) -> None:
        """Add the link u -> v in place (no-op if it already exists)."""
        self._check_node(u)
        self._check_node(v)
        self.to_links[u].add(v)
        self.from_links[v].add(u)

    def remove_link(self, u: NodeID, v: NodeID) -> None:
        """Remove the link u -> v in place.

        Raises:
            ValueError: If either node or the link does not exist.
        """
        self._check_node(u)
        self._check_node(v)
        if v not in self.to_links[u]:
            raise ValueError(f"No link from '{u}' to '{v}'.")
        self.to_links[u].discard(v)
        self.from_links[v].discard(u)

    def without_link(self, u: NodeID, v: NodeID) -> LinkIndex:
        """Return a copy of the index lacking the link u -> v.

        Only the two affected sets are copied; all others are shared with this
        index, so neither index may be mutated in place afterwards.

        Raises:
            ValueError: If either node or the link does not exist.
        """
        self._check_node(u)
        self._check_node(v)
        if v not in self.to_links[u]:
            raise ValueError(f"No link from '{u}' to '{v}'.")

        to_links = dict(self.to_links)
        from_links = dict(self.from_links)
        to_links[u] = self.to_links[u] - {v}
        from_links[v] = self.from_links[v] - {u}
        return LinkIndex(self.nodes, to_links, from_links)


def build_link_index(graph: StrictMultiDiGraph) -> LinkIndex:
    """Index the forward and backward links of every node in ``graph``.

    For each edge u -> v, ``v`` joins ``to_links[u]`` and ``u`` joins
    ``from_links[v]``. Nodes keep the graph's insertion order.
    """
    nodes = tuple(graph.get_nodes())
    index = LinkIndex(
        nodes=nodes,
        to_links={node: set() for node in nodes},
        from_links={node: set() for node in nodes},
    )
    for src, dst, _, _ in graph.get_edges().values():
        index.to_links[src].add(dst)
        index.from_links[dst].add(src)
    return index
