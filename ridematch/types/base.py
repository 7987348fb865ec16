"""Base aliases and enums shared by the matching engine."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

#: Represents numeric cost (e.g. distance, expected travel time).
Cost = Union[int, float]

#: Node identifier within a role set (drivers or passengers).
NodeID = str


class DistanceMetric(IntEnum):
    """Metric used to measure the distance between two coordinate pairs."""

    #: Planar distance treating lat/lng as Cartesian coordinates (unitless).
    EUCLIDEAN = 1
    #: Great-circle distance on a sphere of radius 6371 km.
    HAVERSINE = 2

    @classmethod
    def from_string(cls, value: str) -> "DistanceMetric":
        """Parse a string into a DistanceMetric enum value.

        Args:
            value: Case-insensitive string name (e.g., "euclidean", "HAVERSINE").

        Returns:
            The corresponding DistanceMetric enum member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name.lower() for e in cls)
            raise ValueError(
                f"Invalid metric '{value}'. Valid values are: {valid}"
            ) from None

    @classmethod
    def coerce(cls, value: Union["DistanceMetric", str]) -> "DistanceMetric":
        """Return ``value`` as a DistanceMetric, parsing strings when needed."""
        if isinstance(value, cls):
            return value
        return cls.from_string(str(value))
