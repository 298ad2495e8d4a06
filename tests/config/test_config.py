"""Test the configuration module functionality."""

import pytest

from flowrank.config import (
    GRAPH_ATTRS,
    PAGERANK_CONFIG,
    GraphAttrConfig,
    PageRankConfig,
)


def test_pagerank_config_defaults():
    config = PageRankConfig()
    assert config.damping_factor == 0.85
    assert config.iterations == 10
    config.validate()


def test_global_instances():
    assert isinstance(PAGERANK_CONFIG, PageRankConfig)
    assert isinstance(GRAPH_ATTRS, GraphAttrConfig)
    assert GRAPH_ATTRS.capacity_attr == "capacity"
    assert GRAPH_ATTRS.flow_attr == "flow"
    assert GRAPH_ATTRS.name_attr == "name"


@pytest.mark.parametrize("damping", [0.0, 0.5, 1.0])
def test_pagerank_config_valid_damping(damping):
    PageRankConfig(damping_factor=damping).validate()


@pytest.mark.parametrize(
    "kwargs,match",
    [
        ({"damping_factor": 1.01}, "damping_factor"),
        ({"damping_factor": -0.5}, "damping_factor"),
        ({"iterations": -1}, "iterations"),
    ],
)
def test_pagerank_config_invalid(kwargs, match):
    with pytest.raises(ValueError, match=match):
        PageRankConfig(**kwargs).validate()
