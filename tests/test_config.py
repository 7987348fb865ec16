"""Test the configuration module functionality."""

import pytest

from ridematch.config import DEFAULT_CONFIG, MatchingConfig
from ridematch.types.base import DistanceMetric


def test_matching_config_defaults():
    """Defaults price a pair at two minutes per great-circle kilometer."""
    config = MatchingConfig()
    assert config.metric is DistanceMetric.HAVERSINE
    assert config.cost_per_unit_distance == 2.0
    assert config.metric_name == "haversine"


def test_metric_string_is_parsed():
    config = MatchingConfig(metric="HAVERSINE")
    assert config.metric is DistanceMetric.HAVERSINE
    assert config.metric_name == "haversine"


def test_invalid_metric():
    with pytest.raises(ValueError, match="Invalid metric"):
        MatchingConfig(metric="taxicab")


@pytest.mark.parametrize("factor", [0, -1.5, float("nan")])
def test_non_positive_cost_factor(factor):
    """NaN fails every comparison, so it is rejected along with zero and negatives."""
    with pytest.raises(ValueError, match="must be positive"):
        MatchingConfig(cost_per_unit_distance=factor)


def test_global_config_instance():
    assert DEFAULT_CONFIG == MatchingConfig()
    with pytest.raises(AttributeError):
        DEFAULT_CONFIG.cost_per_unit_distance = 3.0  # type: ignore[misc]
