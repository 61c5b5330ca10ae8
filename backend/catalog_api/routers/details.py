"""Title detail endpoint."""
from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Response

from ...catalog.metadata_fetcher import MetadataFetcherError
from ..dependencies import get_catalog_service, get_settings
from ..schemas import TitleDetailsModel
from ..services import CatalogRequestError, CatalogService
from ..settings import CatalogSettings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["details"])


@router.get("/details/{content_type}/{title_id}", response_model=TitleDetailsModel)
async def get_details(
    content_type: str,
    title_id: str,
    response: Response,
    service: CatalogService = Depends(get_catalog_service),
    settings: CatalogSettings = Depends(get_settings),
) -> TitleDetailsModel:
    """Return a movie or series with cast, trailer, seasons and similar titles."""

    try:
        details = await service.details(content_type, title_id)
    except CatalogRequestError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except MetadataFetcherError as exc:
        logger.exception("Details error for %s/%s: %s", content_type, title_id, exc)
        raise HTTPException(status_code=502, detail="Failed to fetch details") from exc

    response.headers["Cache-Control"] = f"public, max-age={settings.browse_cache_seconds}"
    return TitleDetailsModel.model_validate(asdict(details))
