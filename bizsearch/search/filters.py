from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class StateFilter:
    state: str


@dataclass(frozen=True)
class CoordinateFilter:
    lat: float
    lng: float


LocationFilter = Union[StateFilter, CoordinateFilter]


def filters_from_location(location: Mapping[str, Any]) -> list[LocationFilter]:
    """
    Convert one wire-level ``{state?, lat?, lng?}`` object into location filters.

    An object carrying both a state and a coordinate pair yields both filters.
    A malformed object (no state, half a coordinate pair) yields none, so it
    can never match.
    """
    filters: list[LocationFilter] = []

    state = location.get("state")
    if state:
        filters.append(StateFilter(state=state))

    lat, lng = location.get("lat"), location.get("lng")
    if lat is not None and lng is not None:
        filters.append(CoordinateFilter(lat=float(lat), lng=float(lng)))

    return filters


def filters_from_locations(locations: list[Mapping[str, Any]]) -> list[LocationFilter]:
    """Flatten a list of wire-level location objects, keeping their order."""
    filters: list[LocationFilter] = []
    for location in locations:
        filters.extend(filters_from_location(location))
    return filters
