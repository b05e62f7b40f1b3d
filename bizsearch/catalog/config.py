from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_CATALOG = Path(__file__).resolve().parent.parent / "data" / "businesses.json"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Where the business catalog is read from.

    ``CATALOG_PATH`` overrides the dataset bundled with the package.
    """

    catalog_path: Path = Path(os.getenv("CATALOG_PATH", str(_BUNDLED_CATALOG)))


DEFAULT_CATALOG_CONFIG = CatalogConfig()
