import numpy as np
import pytest

from bizsearch.search.distance import EARTH_RADIUS_MILES, haversine_miles

PHILADELPHIA = (39.9526, -75.1652)
NEW_YORK = (40.7128, -74.0060)
LOS_ANGELES = (34.0522, -118.2437)


def test_identical_points_are_zero_apart():
    for lat, lng in [PHILADELPHIA, NEW_YORK, (0.0, 0.0), (-33.8688, 151.2093)]:
        assert haversine_miles(lat, lng, lat, lng) == 0.0


def test_distance_is_symmetric():
    a = haversine_miles(*PHILADELPHIA, *LOS_ANGELES)
    b = haversine_miles(*LOS_ANGELES, *PHILADELPHIA)
    assert a == b


def test_known_city_distance():
    # Philadelphia to New York is roughly 80 miles as the crow flies
    assert haversine_miles(*PHILADELPHIA, *NEW_YORK) == pytest.approx(80.5, abs=1.5)


def test_one_degree_of_latitude():
    expected = EARTH_RADIUS_MILES * np.pi / 180
    assert haversine_miles(40.0, -75.0, 41.0, -75.0) == pytest.approx(expected)


def test_returns_python_float_for_scalars():
    assert isinstance(haversine_miles(*PHILADELPHIA, *NEW_YORK), float)


def test_broadcasts_over_arrays():
    lats = np.array([PHILADELPHIA[0], NEW_YORK[0], LOS_ANGELES[0]])
    lngs = np.array([PHILADELPHIA[1], NEW_YORK[1], LOS_ANGELES[1]])
    distances = haversine_miles(*PHILADELPHIA, lats, lngs)
    assert distances.shape == (3,)
    assert distances[0] == 0.0
    assert distances[1] == pytest.approx(haversine_miles(*PHILADELPHIA, *NEW_YORK))


def test_antipodal_points_are_half_circumference():
    assert haversine_miles(0.0, 0.0, 0.0, 180.0) == pytest.approx(EARTH_RADIUS_MILES * np.pi)
