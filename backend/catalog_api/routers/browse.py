"""Catalog listing endpoints."""
from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from ...catalog.metadata_fetcher import MetadataFetcherError
from ..dependencies import get_catalog_service, get_settings
from ..schemas import BrowseResponse
from ..services import CatalogRequestError, CatalogService
from ..settings import CatalogSettings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["browse"])


@router.get("/browse", response_model=BrowseResponse)
async def browse_catalog(
    response: Response,
    content_type: str = Query(
        default="movie",
        alias="type",
        description="Listing kind: movie, tv or trending.",
    ),
    category: str = Query(
        default="popular",
        description="TMDB list name such as popular or top_rated; day or week for trending.",
    ),
    page: int = Query(default=1, description="Page number starting at 1."),
    service: CatalogService = Depends(get_catalog_service),
    settings: CatalogSettings = Depends(get_settings),
) -> BrowseResponse:
    """Return one normalized page of a TMDB listing."""

    try:
        result = await service.browse(content_type, category, page)
    except CatalogRequestError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except MetadataFetcherError as exc:
        logger.exception("Browse error: %s", exc)
        raise HTTPException(status_code=502, detail="Failed to fetch browse data") from exc

    response.headers["Cache-Control"] = f"public, max-age={settings.browse_cache_seconds}"
    return BrowseResponse.model_validate(asdict(result))
