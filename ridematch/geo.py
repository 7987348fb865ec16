"""Distance functions between two latitude/longitude pairs."""

from __future__ import annotations

from math import atan2, cos, radians, sin, sqrt
from typing import Callable, Union

from ridematch.types.base import DistanceMetric

#: Mean Earth radius in kilometers (https://en.wikipedia.org/wiki/Earth_radius).
EARTH_RADIUS_KM = 6371.0

DistanceFunc = Callable[[float, float, float, float], float]


def euclidean_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Planar distance treating lat/lng as Cartesian coordinates.

    No unit conversion is applied, so the result is only meaningful on small
    synthetic maps.
    """
    d_lat = lat2 - lat1
    d_lng = lng2 - lng1
    return sqrt(d_lat * d_lat + d_lng * d_lng)


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Calculates great-circle distance in kilometers between two points given in degrees.
    https://en.wikipedia.org/wiki/Haversine_formula
    """
    phi1 = radians(lat1)
    phi2 = radians(lat2)
    d_phi = radians(lat2 - lat1)
    d_lambda = radians(lng2 - lng1)

    h = sin(d_phi / 2) ** 2 + cos(phi1) * cos(phi2) * sin(d_lambda / 2) ** 2
    # Rounding can push h marginally above 1 for antipodal points
    h = min(1.0, max(0.0, h))
    return EARTH_RADIUS_KM * 2 * atan2(sqrt(h), sqrt(1 - h))


_DISTANCE_FUNCS = {
    DistanceMetric.EUCLIDEAN: euclidean_distance,
    DistanceMetric.HAVERSINE: haversine_distance,
}


def get_distance_func(metric: Union[DistanceMetric, str]) -> DistanceFunc:
    """Return the distance function for ``metric``.

    Raises:
        ValueError: If ``metric`` is a string naming no known metric.
    """
    return _DISTANCE_FUNCS[DistanceMetric.coerce(metric)]
