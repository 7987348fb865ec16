"""YAML loader + schema validation for scenario files.

Provides a single entrypoint to parse a YAML string, validate it against the
packaged JSON schema, and return a canonical dictionary suitable for building
a Scenario.
"""

from __future__ import annotations

import json
from importlib import resources
from typing import Any, Dict

import jsonschema
import yaml

RECOGNIZED_KEYS = {
    "seed",
    "metric",
    "cost_per_unit_distance",
    "bounds",
    "drivers",
    "passengers",
}


def _load_schema() -> Dict[str, Any]:
    try:
        with (
            resources.files("ridematch.schemas")
            .joinpath("scenario.json")
            .open("r", encoding="utf-8")
        ) as f:
            return json.load(f)
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(
            "Failed to locate packaged scenario schema 'ridematch/schemas/scenario.json'."
        ) from exc


def load_scenario_yaml(yaml_str: str) -> Dict[str, Any]:
    """Load and validate a scenario YAML string.

    Raises:
        ValueError: If the document is not a mapping, uses unknown top-level
            keys, or repeats a node id. Ids must be unique within a role and
            across drivers and passengers.
        jsonschema.ValidationError: If the document violates the schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    # Checked before schema validation for a clearer message
    extra = set(data.keys()) - RECOGNIZED_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in scenario: {', '.join(sorted(map(str, extra)))}. "
            f"Allowed keys are {sorted(RECOGNIZED_KEYS)}"
        )

    jsonschema.validate(data, _load_schema())

    # Ids name nodes of one spanning tree, so they are unique across both roles
    owners: Dict[str, str] = {}
    for role in ("drivers", "passengers"):
        entries = data.get(role)
        if not isinstance(entries, list):
            continue
        for entry in entries:
            node_id = str(entry["id"])
            owner = owners.get(node_id)
            if owner == role:
                raise ValueError(f"Duplicate id '{node_id}' in '{role}'")
            if owner is not None:
                raise ValueError(
                    f"Id '{node_id}' is used by both '{owner}' and '{role}'"
                )
            owners[node_id] = role

    return data
