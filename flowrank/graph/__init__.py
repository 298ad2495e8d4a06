"""Graph primitives and helpers.

This package provides the strict multi-directed graph type `StrictMultiDiGraph`
and edge-list loading/dumping helpers (`io`).
"""

from flowrank.graph.strict_multidigraph import (
    AttrDict,
    EdgeID,
    EdgeTuple,
    NodeID,
    StrictMultiDiGraph,
)

__all__ = ["AttrDict", "EdgeID", "EdgeTuple", "NodeID", "StrictMultiDiGraph"]
