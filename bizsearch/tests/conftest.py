import math

import pytest

from bizsearch.catalog.models import Business, Catalog
from bizsearch.search.distance import EARTH_RADIUS_MILES
from bizsearch.search.escalation import RadiusEscalationEngine

MILES_PER_DEGREE_LAT = EARTH_RADIUS_MILES * math.pi / 180


def north_of(lat: float, miles: float) -> float:
    """Latitude ``miles`` due north of ``lat`` along a meridian."""
    return lat + miles / MILES_PER_DEGREE_LAT


SAMPLE_BUSINESSES = (
    Business("Taco Town", "Los Angeles", "CA", 34.0522, -118.2437),
    Business("Golden Gate Coffee", "San Francisco", "CA", 37.7749, -122.4194),
    # 30 miles due north of (40.0, -75.0)
    Business("Lehigh Valley Feed", "Quakertown", "PA", north_of(40.0, 30), -75.0),
    # 20 miles due north of (35.0, -100.0)
    Business("Panhandle Taco Stand", "Shamrock", "TX", north_of(35.0, 20), -100.0),
    Business("Empire Pizza", "New York", "NY", 40.7128, -74.0060),
)


@pytest.fixture
def sample_catalog() -> Catalog:
    return Catalog(businesses=SAMPLE_BUSINESSES)


@pytest.fixture
def engine(sample_catalog) -> RadiusEscalationEngine:
    return RadiusEscalationEngine(sample_catalog)
