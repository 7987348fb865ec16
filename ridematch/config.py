"""Configuration classes for ridematch components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ridematch.types.base import DistanceMetric


@dataclass(frozen=True)
class MatchingConfig:
    """Distance metric and cost scaling applied when building cost matrices.

    Cost is modeled linearly as ``distance * cost_per_unit_distance``; with the
    haversine metric the default factor reads as minutes per kilometer.
    """

    # Haversine km, so the default factor prices a pair in minutes
    metric: Union[DistanceMetric, str] = DistanceMetric.HAVERSINE

    # Multiplier from distance to cost
    cost_per_unit_distance: float = 2.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "metric", DistanceMetric.coerce(self.metric))
        if not (self.cost_per_unit_distance > 0):
            raise ValueError(
                "cost_per_unit_distance must be positive, "
                f"got {self.cost_per_unit_distance}"
            )

    @property
    def metric_name(self) -> str:
        return DistanceMetric.coerce(self.metric).name.lower()


# Global default configuration instance
DEFAULT_CONFIG = MatchingConfig()
