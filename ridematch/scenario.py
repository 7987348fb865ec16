"""Scenario class describing a matching run from YAML."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ridematch.analysis import analyze, check_unique_ids
from ridematch.config import MatchingConfig
from ridematch.dsl.loader import load_scenario_yaml
from ridematch.generate import (
    DEFAULT_BOUNDS,
    DRIVER,
    PASSENGER,
    Bounds,
    generate_random_nodes,
)
from ridematch.logging import get_logger
from ridematch.types.dto import AnalysisReport, Node
from ridematch.utils.seed_manager import SeedManager


@dataclass
class Scenario:
    """Drivers, passengers and matching settings for one analysis run.

    Typical usage example:

        scenario = Scenario.from_yaml(yaml_str)
        report = scenario.run()
    """

    drivers: List[Node] = field(default_factory=list)
    passengers: List[Node] = field(default_factory=list)
    config: MatchingConfig = field(default_factory=MatchingConfig)
    bounds: Bounds = DEFAULT_BOUNDS
    seed: Optional[int] = None

    # Module-level logger
    _logger = get_logger(__name__)

    @property
    def seed_manager(self) -> SeedManager:
        return SeedManager(self.seed)

    def run(self) -> AnalysisReport:
        """Analyze the scenario's drivers and passengers."""
        self._logger.info(
            f"Running scenario: {len(self.drivers)} drivers, "
            f"{len(self.passengers)} passengers, metric={self.config.metric_name}"
        )
        return analyze(self.drivers, self.passengers, self.config)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> Scenario:
        """Constructs a Scenario from a YAML string.

        Top-level YAML keys can include:
          - seed: Master seed for reproducible node generation
          - metric: "haversine" (default) or "euclidean"
          - cost_per_unit_distance: Positive multiplier (default 2)
          - bounds: lat_min/lat_max/lng_min/lng_max box for generated nodes
          - drivers / passengers: a list of {id, lat, lng} mappings, or
            {count: N} to generate N random nodes inside bounds. Ids are
            unique across both lists

        Omitted node sets are empty. Any unrecognized top-level key raises
        ValueError; schema violations raise jsonschema.ValidationError.
        """
        data = load_scenario_yaml(yaml_str)
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Scenario:
        """Build a Scenario from an already validated dictionary.

        Raises:
            ValueError: If a node id is shared by drivers and passengers,
                including ids produced by count-based generation.
        """
        config_kwargs: Dict[str, Any] = {}
        if "metric" in data:
            config_kwargs["metric"] = data["metric"]
        if "cost_per_unit_distance" in data:
            config_kwargs["cost_per_unit_distance"] = float(
                data["cost_per_unit_distance"]
            )
        config = MatchingConfig(**config_kwargs)

        bounds = Bounds.from_dict(data["bounds"]) if "bounds" in data else DEFAULT_BOUNDS
        seed = data.get("seed")
        seed_mgr = SeedManager(seed)

        def _nodes(role: str, kind: str) -> List[Node]:
            node_set = data.get(role)
            if node_set is None:
                return []
            if isinstance(node_set, dict):
                return generate_random_nodes(
                    int(node_set["count"]), kind, bounds, seed_mgr.node_stream(kind)
                )
            return [Node.from_dict(entry) for entry in node_set]

        drivers = _nodes("drivers", DRIVER)
        passengers = _nodes("passengers", PASSENGER)
        # Generated ids may collide with explicit ones from the other role
        check_unique_ids([*drivers, *passengers])

        return cls(
            drivers=drivers,
            passengers=passengers,
            config=config,
            bounds=bounds,
            seed=seed,
        )
