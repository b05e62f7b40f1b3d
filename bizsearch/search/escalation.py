from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..catalog.models import Business, Catalog
from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .filters import LocationFilter
from .matcher import record_matches

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Expansion:
    original_radius: float
    final_radius: float
    explain: str


@dataclass(frozen=True)
class SearchOutcome:
    businesses: tuple[Business, ...]
    used_radius: float
    requested_radius: float
    text: str | None = None
    expansion: Expansion | None = None
    radii_tried: tuple[float, ...] = ()

    @property
    def total_results(self) -> int:
        return len(self.businesses)

    @property
    def expanded(self) -> bool:
        return self.expansion is not None


def format_miles(radius: float) -> str:
    """Render a radius without a trailing ``.0`` (10.0 -> "10")."""
    return f"{radius:g}"


def candidate_radii(
    requested_radius: float,
    ladder: Sequence[float] = DEFAULT_SEARCH_CONFIG.radius_ladder,
) -> list[float]:
    """The requested radius merged into the ladder, deduplicated and ascending."""
    return sorted({requested_radius, *ladder})


class RadiusEscalationEngine:
    """
    Search a catalog, widening the radius until something matches.

    Radii are tried in ascending order starting at the requested one. The
    first radius with at least one match wins; if none matches, the largest
    candidate is reported with an empty result.
    """

    def __init__(self, catalog: Catalog, config: SearchConfig = DEFAULT_SEARCH_CONFIG) -> None:
        self.catalog = catalog
        self.config = config

    def match_at(
        self,
        filters: Sequence[LocationFilter],
        radius_miles: float,
        text: str | None = None,
    ) -> tuple[Business, ...]:
        return tuple(
            b for b in self.catalog if record_matches(b, filters, radius_miles, text)
        )

    def search(
        self,
        filters: Sequence[LocationFilter],
        radius_miles: float | None = None,
        text: str | None = None,
    ) -> SearchOutcome:
        requested = self.config.default_radius_miles if radius_miles is None else radius_miles
        radii = [
            r for r in candidate_radii(requested, self.config.radius_ladder) if r >= requested
        ]

        results: tuple[Business, ...] = ()
        used = requested
        tried: list[float] = []
        for radius in radii:
            tried.append(radius)
            results = self.match_at(filters, radius, text)
            used = radius
            logger.debug("radius=%s matches=%d", format_miles(radius), len(results))
            if results:
                break

        expansion = None
        if not results:
            expansion = Expansion(
                original_radius=requested,
                final_radius=used,
                explain=f"there's no result within {format_miles(used)} miles",
            )
        elif used != requested:
            expansion = Expansion(
                original_radius=requested,
                final_radius=used,
                explain=(
                    f"there's no result within {format_miles(requested)} miles, "
                    f"expanded to {format_miles(used)} miles."
                ),
            )

        if expansion is not None:
            logger.info("Radius expansion: %s", expansion.explain)

        return SearchOutcome(
            businesses=results,
            used_radius=used,
            requested_radius=requested,
            text=text,
            expansion=expansion,
            radii_tried=tuple(tried),
        )
