from __future__ import annotations

from typing import Sequence

from ..catalog.models import Business
from .distance import haversine_miles
from .filters import CoordinateFilter, LocationFilter, StateFilter


def _filter_matches(business: Business, location: LocationFilter, radius_miles: float) -> bool:
    if isinstance(location, StateFilter):
        return business.state == location.state
    if isinstance(location, CoordinateFilter):
        distance = haversine_miles(
            location.lat, location.lng, business.latitude, business.longitude
        )
        return distance <= radius_miles
    return False


def location_matches(
    business: Business,
    filters: Sequence[LocationFilter],
    radius_miles: float,
) -> bool:
    """True when any filter matches; stops at the first one that does."""
    return any(_filter_matches(business, f, radius_miles) for f in filters)


def text_matches(business: Business, text: str | None) -> bool:
    if not text:
        return True
    return text.lower() in business.name.lower()


def record_matches(
    business: Business,
    filters: Sequence[LocationFilter],
    radius_miles: float,
    text: str | None = None,
) -> bool:
    return location_matches(business, filters, radius_miles) and text_matches(business, text)
