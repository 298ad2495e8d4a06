"""Append-only multi-directed graph used as input to the flow and rank engines.

`StrictMultiDiGraph` extends `networkx.MultiDiGraph` with explicit node
creation, unique edge keys and an insertion-ordered edge registry. The engines
enumerate nodes and edges through `get_nodes()` and `get_edges()`, so the
order in which edges were added is the order in which they are processed.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Optional, Tuple

import networkx as nx

NodeID = Hashable
EdgeID = Hashable
AttrDict = Dict[str, Any]
EdgeTuple = Tuple[NodeID, NodeID, EdgeID, AttrDict]


class StrictMultiDiGraph(nx.MultiDiGraph):
    """A capacity graph with unique edge keys and a stable edge order.

    Rules:
      - Edges never create their endpoints; both nodes must exist.
      - Node IDs and edge keys are unique (duplicates raise ValueError).
      - Nodes and edges cannot be removed, so the edge registry always matches
        the adjacency NetworkX keeps.

    Edges carry an integer ``capacity`` and optionally an integer ``flow``.
    Nodes may carry a ``name`` used when results are reported by name.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        # key -> (src, dst, key, live attribute dict), in insertion order
        self._edges: Dict[EdgeID, EdgeTuple] = {}
        self._next_edge_id: int = 0

    def new_edge_key(self, u: NodeID, v: NodeID, key: Optional[int] = None) -> int:  # type: ignore[override]
        """Return the next unused integer key (NetworkX calls this hook too)."""
        while self._next_edge_id in self._edges:
            self._next_edge_id += 1
        return self._next_edge_id

    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a node.

        Raises:
            ValueError: If the node is already present.
        """
        if node_for_adding in self:
            raise ValueError(f"Node '{node_for_adding}' already exists in this graph.")
        super().add_node(node_for_adding, **attr)

    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """Add a directed edge and register it at the end of the edge order.

        Args:
            u_for_edge: Source node; must exist.
            v_for_edge: Target node; must exist.
            key: Unique edge key. Defaults to the next unused integer.
            **attr: Edge attributes, e.g. ``capacity=3``.

        Returns:
            EdgeID: The key of the new edge.

        Raises:
            ValueError: If an endpoint is missing or the key is taken.
        """
        for role, node in (("Source", u_for_edge), ("Target", v_for_edge)):
            if node not in self:
                raise ValueError(f"{role} node '{node}' does not exist.")

        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        elif key in self._edges:
            raise ValueError(f"Edge with id '{key}' already exists.")

        super().add_edge(u_for_edge, v_for_edge, key=key, **attr)
        self._edges[key] = (
            u_for_edge,
            v_for_edge,
            key,
            self.succ[u_for_edge][v_for_edge][key],
        )
        return key

    def remove_node(self, n: NodeID) -> None:
        raise NotImplementedError("StrictMultiDiGraph does not support removing nodes.")

    def remove_edge(self, u: NodeID, v: NodeID, key: Optional[EdgeID] = None) -> None:
        raise NotImplementedError("StrictMultiDiGraph does not support removing edges.")

    def get_nodes(self) -> Dict[NodeID, AttrDict]:
        """Return node ID -> attribute dict, in insertion order."""
        return dict(self.nodes(data=True))

    def get_edges(self) -> Dict[EdgeID, EdgeTuple]:
        """Return the edge registry in insertion order.

        The attribute dicts inside are the graph's live edge attributes, which
        the max-flow engine updates while it runs.
        """
        return self._edges

    def get_edge_attr(self, key: EdgeID) -> AttrDict:
        """Return the live attribute dict of one edge.

        Raises:
            ValueError: If no edge has this key.
        """
        if key not in self._edges:
            raise ValueError(f"Edge with id='{key}' not found.")
        return self._edges[key][3]

    def update_edge_attr(self, key: EdgeID, **attr: Any) -> None:
        """Set attributes on one edge.

        Raises:
            ValueError: If no edge has this key.
        """
        self.get_edge_attr(key).update(attr)

    def node_name(self, n: NodeID, name_attr: str = "name") -> str:
        """Return the ``name_attr`` attribute of a node, or ``str(n)`` if unset.

        Raises:
            ValueError: If the node does not exist.
        """
        if n not in self:
            raise ValueError(f"Node '{n}' does not exist.")
        name = self.nodes[n].get(name_attr)
        return str(n) if name is None else str(name)
