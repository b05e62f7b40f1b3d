from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchConfig:
    default_radius_miles: float = 10
    radius_ladder: tuple[float, ...] = (1, 5, 10, 25, 50, 100, 500)


DEFAULT_SEARCH_CONFIG = SearchConfig()
