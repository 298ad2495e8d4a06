"""Edge-list loading and dumping for capacity graphs.

A line describes one directed edge as ``src dst capacity [flow]``. Capacity and
flow are integers; a missing flow column means zero flow.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from flowrank.graph.strict_multidigraph import NodeID, StrictMultiDiGraph


def edgelist_to_graph(
    lines: Iterable[str],
    separator: Optional[str] = None,
    graph: Optional[StrictMultiDiGraph] = None,
    names: Optional[Dict[NodeID, str]] = None,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
    name_attr: str = "name",
) -> StrictMultiDiGraph:
    """Build or extend a StrictMultiDiGraph from an edge list.

    Blank lines and lines starting with ``#`` are skipped. Nodes are created on
    first sight, in the order they appear, so the resulting node and edge order
    follows the input.

    Args:
        lines: Iterable of edge lines.
        separator: Token separator; ``None`` splits on any whitespace.
        graph: Existing graph to extend; a new graph is created if None.
        names: Optional mapping of node ID to display name.
        capacity_attr: Edge attribute receiving the capacity column.
        flow_attr: Edge attribute receiving the flow column.
        name_attr: Node attribute receiving the display name.

    Returns:
        The updated (or newly created) StrictMultiDiGraph.

    Raises:
        ValueError: If a line has the wrong number of tokens or a non-integer
            or negative capacity/flow.
    """
    if graph is None:
        graph = StrictMultiDiGraph()
    names = names or {}

    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        tokens = line.split(separator)
        if len(tokens) not in (3, 4):
            raise ValueError(
                f"Line '{line}' does not match 'src dst capacity [flow]' "
                f"(got {len(tokens)} tokens)."
            )

        src_id, dst_id = tokens[0], tokens[1]
        try:
            capacity = int(tokens[2])
            flow = int(tokens[3]) if len(tokens) == 4 else 0
        except ValueError as exc:
            raise ValueError(f"Line '{line}' has a non-integer capacity or flow.") from exc
        if capacity < 0 or flow < 0:
            raise ValueError(f"Line '{line}' has a negative capacity or flow.")

        for node_id in (src_id, dst_id):
            if node_id not in graph:
                if node_id in names:
                    graph.add_node(node_id, **{name_attr: names[node_id]})
                else:
                    graph.add_node(node_id)

        graph.add_edge(src_id, dst_id, **{capacity_attr: capacity, flow_attr: flow})

    return graph


def graph_to_edgelist(
    graph: StrictMultiDiGraph,
    separator: str = " ",
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
) -> List[str]:
    """Convert a StrictMultiDiGraph into ``src dst capacity flow`` lines.

    Edges are written in registry (insertion) order.
    """
    lines: List[str] = []
    for src, dst, _, attrs in graph.get_edges().values():
        tokens = [
            str(src),
            str(dst),
            str(attrs.get(capacity_attr, 0)),
            str(attrs.get(flow_attr, 0)),
        ]
        lines.append(separator.join(tokens))
    return lines
