"""Configuration classes for flowrank components."""

from dataclasses import dataclass


@dataclass
class PageRankConfig:
    """Defaults for the PageRank power iteration."""

    # Probability of following a link rather than teleporting
    damping_factor: float = 0.85

    # Fixed number of power-iteration rounds (no early convergence check)
    iterations: int = 10

    def validate(self) -> None:
        """Raise ValueError if the settings cannot drive a power iteration."""
        if not 0.0 <= self.damping_factor <= 1.0:
            raise ValueError(
                f"damping_factor must be within [0, 1], got {self.damping_factor}"
            )
        if self.iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {self.iterations}")


@dataclass
class GraphAttrConfig:
    """Names of the node and edge attributes the engines read and write."""

    capacity_attr: str = "capacity"
    flow_attr: str = "flow"
    name_attr: str = "name"


# Global configuration instances
PAGERANK_CONFIG = PageRankConfig()
GRAPH_ATTRS = GraphAttrConfig()
