from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .config import DEFAULT_SEARCH_CONFIG
from .escalation import SearchOutcome
from .filters import LocationFilter, filters_from_locations


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LocationIn(BaseModel):
    state: str | None = None
    lat: float | None = None
    lng: float | None = None


class SearchRequest(_CamelModel):
    locations: list[LocationIn] = Field(..., min_length=1)
    radius_miles: float = Field(default=DEFAULT_SEARCH_CONFIG.default_radius_miles, gt=0)
    text: str | None = None

    def to_filters(self) -> list[LocationFilter]:
        return filters_from_locations([loc.model_dump() for loc in self.locations])


class BusinessOut(BaseModel):
    name: str
    city: str
    state: str
    latitude: float
    longitude: float


class SearchParameters(_CamelModel):
    locations: list[LocationIn]
    radius_miles: float
    text: str | None = None


class RadiusExpanded(_CamelModel):
    original_radius: float
    final_radius: float
    explain: str
    expanded: bool = True


class SearchResponse(_CamelModel):
    businesses: list[BusinessOut]
    total_results: int
    businesses_within: float
    search_parameters: SearchParameters
    radius_expanded: RadiusExpanded | None = None

    @classmethod
    def from_outcome(cls, request: SearchRequest, outcome: SearchOutcome) -> "SearchResponse":
        radius_expanded = None
        if outcome.expansion is not None:
            radius_expanded = RadiusExpanded(
                original_radius=outcome.expansion.original_radius,
                final_radius=outcome.expansion.final_radius,
                explain=outcome.expansion.explain,
            )
        return cls(
            businesses=[
                BusinessOut(
                    name=b.name,
                    city=b.city,
                    state=b.state,
                    latitude=b.latitude,
                    longitude=b.longitude,
                )
                for b in outcome.businesses
            ],
            total_results=outcome.total_results,
            businesses_within=outcome.used_radius,
            search_parameters=SearchParameters(
                locations=request.locations,
                radius_miles=request.radius_miles,
                # Empty text is echoed as absent, as it is not applied
                text=request.text or None,
            ),
            radius_expanded=radius_expanded,
        )
