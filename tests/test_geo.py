import math
import random

import pytest

from ridematch import geo
from ridematch.types.base import DistanceMetric


def test_euclidean_known_value():
    assert geo.euclidean_distance(0, 0, 3, 4) == 5


def test_haversine_new_york_los_angeles():
    d = geo.haversine_distance(40.7128, -74.0060, 34.0522, -118.2437)
    assert d == pytest.approx(3935, abs=10)


def test_haversine_san_jose_new_york():
    d = geo.haversine_distance(37.3382, -121.8863, 40.7128, -74.0060)
    assert d == pytest.approx(4101.5, abs=1)


def test_haversine_antipodal():
    """Antipodal points are half the Earth's circumference apart."""
    d = geo.haversine_distance(0, 0, 0, 180)
    assert d == pytest.approx(math.pi * geo.EARTH_RADIUS_KM)
    assert geo.haversine_distance(90, 0, -90, 0) == pytest.approx(
        math.pi * geo.EARTH_RADIUS_KM
    )


@pytest.mark.parametrize("func", [geo.euclidean_distance, geo.haversine_distance])
def test_identical_points(func):
    assert func(10.8, 78.7, 10.8, 78.7) == 0


@pytest.mark.parametrize("func", [geo.euclidean_distance, geo.haversine_distance])
def test_symmetry(func):
    rng = random.Random(11)
    for _ in range(50):
        a = (rng.uniform(-89, 89), rng.uniform(-179, 179))
        b = (rng.uniform(-89, 89), rng.uniform(-179, 179))
        assert func(*a, *b) == pytest.approx(func(*b, *a))


@pytest.mark.parametrize(
    "metric,expected",
    [
        ("euclidean", geo.euclidean_distance),
        ("Haversine", geo.haversine_distance),
        (DistanceMetric.HAVERSINE, geo.haversine_distance),
    ],
)
def test_get_distance_func(metric, expected):
    assert geo.get_distance_func(metric) is expected


def test_get_distance_func_unknown():
    with pytest.raises(ValueError, match="Valid values are: euclidean, haversine"):
        geo.get_distance_func("chebyshev")
