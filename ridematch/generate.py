"""Random generation of driver and passenger nodes inside geographic bounds."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ridematch.logging import get_logger
from ridematch.types.dto import Node
from ridematch.utils.seed_manager import SeedManager

logger = get_logger(__name__)

DRIVER = "driver"
PASSENGER = "passenger"


@dataclass(frozen=True)
class Bounds:
    """Latitude/longitude box that generated nodes fall into.

    Defaults cover central Tiruchirappalli.
    """

    lat_min: float = 10.75
    lat_max: float = 10.85
    lng_min: float = 78.65
    lng_max: float = 78.75

    def __post_init__(self) -> None:
        if self.lat_min > self.lat_max or self.lng_min > self.lng_max:
            raise ValueError(
                "Bounds minimum must not exceed maximum: "
                f"lat [{self.lat_min}, {self.lat_max}], "
                f"lng [{self.lng_min}, {self.lng_max}]"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Bounds":
        return cls(**{k: float(v) for k, v in data.items()})

    def to_dict(self) -> Dict[str, float]:
        return {
            "lat_min": self.lat_min,
            "lat_max": self.lat_max,
            "lng_min": self.lng_min,
            "lng_max": self.lng_max,
        }


DEFAULT_BOUNDS = Bounds()


def random_in_range(low: float, high: float, rng: Optional[random.Random] = None) -> float:
    """Return a float in ``[low, high)``."""
    rng = rng or random.Random()
    return rng.random() * (high - low) + low


def generate_random_nodes(
    count: int,
    kind: str,
    bounds: Bounds = DEFAULT_BOUNDS,
    rng: Optional[random.Random] = None,
) -> List[Node]:
    """Generate ``count`` nodes with ids ``"{kind}-{i}"`` inside ``bounds``.

    Raises:
        ValueError: If ``count`` is negative.
    """
    if count < 0:
        raise ValueError(f"Node count must be non-negative, got {count}")
    rng = rng or random.Random()
    return [
        Node(
            id=f"{kind}-{i}",
            lat=random_in_range(bounds.lat_min, bounds.lat_max, rng),
            lng=random_in_range(bounds.lng_min, bounds.lng_max, rng),
        )
        for i in range(count)
    ]


def generate_drivers_and_passengers(
    driver_count: int,
    passenger_count: int,
    bounds: Bounds = DEFAULT_BOUNDS,
    seed: Optional[int] = None,
) -> Tuple[List[Node], List[Node]]:
    """Generate fresh driver and passenger sets.

    Each role draws from its own seeded stream, so the same seed reproduces the
    same coordinates for a role regardless of the other role's count.

    Args:
        driver_count: Number of drivers.
        passenger_count: Number of passengers.
        bounds: Box to draw coordinates from.
        seed: Master seed; None draws non-deterministically.

    Returns:
        Tuple of (drivers, passengers).
    """
    seed_mgr = SeedManager(seed)
    drivers = generate_random_nodes(
        driver_count, DRIVER, bounds, seed_mgr.node_stream(DRIVER)
    )
    passengers = generate_random_nodes(
        passenger_count,
        PASSENGER,
        bounds,
        seed_mgr.node_stream(PASSENGER),
    )
    logger.debug(
        f"Generated {len(drivers)} drivers and {len(passengers)} passengers "
        f"(seed={seed})"
    )
    return drivers, passengers
