"""Scenario YAML parsing and validation."""

from ridematch.dsl.loader import load_scenario_yaml

__all__ = ["load_scenario_yaml"]
