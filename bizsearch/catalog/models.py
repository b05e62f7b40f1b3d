from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

import pandas as pd


@dataclass(frozen=True)
class Business:
    name: str
    city: str
    state: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Catalog:
    """Read-only collection of businesses, in the order they were loaded."""

    businesses: tuple[Business, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Business]:
        return iter(self.businesses)

    def __len__(self) -> int:
        return len(self.businesses)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {
                    "name": b.name,
                    "city": b.city,
                    "state": b.state,
                    "latitude": b.latitude,
                    "longitude": b.longitude,
                }
                for b in self.businesses
            ],
            columns=["name", "city", "state", "latitude", "longitude"],
        )
