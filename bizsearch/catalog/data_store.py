from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Business, Catalog

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: list[str] = ["name", "city", "state", "latitude", "longitude"]

_catalog: Catalog | None = None


class CatalogError(ValueError):
    """Raised when the catalog file is missing or unusable."""


def load_catalog(path: Path) -> Catalog:
    """
    Read a JSON array of business objects into an immutable Catalog.

    Rows missing any required field are dropped with a warning; a missing
    file or missing columns raise ``CatalogError``.
    """
    path = Path(path)
    if not path.is_file():
        raise CatalogError(f"Catalog file not found: {path}")

    df = pd.read_json(path, orient="records", dtype=False)
    if df.empty:
        logger.warning("Catalog %s is empty", path)
        return Catalog()

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise CatalogError(f"Catalog {path} is missing columns: {', '.join(missing)}")

    complete = df[REQUIRED_COLUMNS].dropna()
    dropped = len(df) - len(complete)
    if dropped:
        logger.warning("Dropped %d incomplete catalog rows from %s", dropped, path)

    businesses = tuple(
        Business(
            name=str(row.name),
            city=str(row.city),
            state=str(row.state),
            latitude=float(row.latitude),
            longitude=float(row.longitude),
        )
        for row in complete.itertuples(index=False)
    )
    logger.info("Loaded %d businesses from %s", len(businesses), path)
    return Catalog(businesses=businesses)


def get_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> Catalog:
    """Return the process-wide catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(config.catalog_path)
    return _catalog
