from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, HTTPException

from .catalog.data_store import get_catalog
from .search.escalation import RadiusEscalationEngine
from .search.models import SearchRequest, SearchResponse

logger = logging.getLogger(__name__)

app = FastAPI(title="Business Search API", version="1.0.0")


def get_engine() -> RadiusEscalationEngine:
    return RadiusEscalationEngine(get_catalog())


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.get("/metadata")
def metadata(engine: RadiusEscalationEngine = Depends(get_engine)) -> dict:
    df = engine.catalog.to_frame()
    return {
        "total": len(df),
        "states": sorted(df["state"].dropna().unique().tolist()),
        "cities": sorted(df["city"].dropna().unique().tolist()),
    }


# ── Search ───────────────────────────────────────────────────────────────


@app.post(
    "/businesses/search",
    response_model=SearchResponse,
    response_model_exclude_none=True,
)
def search_businesses(
    body: SearchRequest,
    engine: RadiusEscalationEngine = Depends(get_engine),
) -> SearchResponse:
    try:
        outcome = engine.search(body.to_filters(), body.radius_miles, body.text)
        return SearchResponse.from_outcome(body, outcome)
    except Exception:
        logger.exception("Search failed")
        raise HTTPException(status_code=500, detail="Internal server error")
