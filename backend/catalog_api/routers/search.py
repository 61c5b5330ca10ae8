"""Search endpoint."""
from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from ...catalog.metadata_fetcher import MetadataFetcherError
from ..dependencies import get_catalog_service, get_settings
from ..schemas import SearchResponse
from ..services import CatalogRequestError, CatalogService
from ..settings import CatalogSettings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["search"])


@router.get("/search", response_model=SearchResponse)
async def search_titles(
    response: Response,
    q: str | None = Query(default=None, description="Search term, at least 2 characters."),
    search_type: str = Query(
        default="multi", alias="type", description="Search scope: multi, movie or tv."
    ),
    limit: int = Query(default=20, description="Maximum results, clamped to 1-50."),
    service: CatalogService = Depends(get_catalog_service),
    settings: CatalogSettings = Depends(get_settings),
) -> SearchResponse:
    """Search movies and series; people are excluded from the results."""

    try:
        result = await service.search(q, search_type, limit)
    except CatalogRequestError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except MetadataFetcherError as exc:
        logger.exception("Search error: %s", exc)
        raise HTTPException(status_code=502, detail="Search failed") from exc

    response.headers["Cache-Control"] = f"public, max-age={settings.search_cache_seconds}"
    return SearchResponse.model_validate(asdict(result))
