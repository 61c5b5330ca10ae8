"""Landing page aggregation endpoint."""
from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, Response

from ..dependencies import get_catalog_service, get_settings
from ..schemas import HomeResponse
from ..services import CatalogService
from ..settings import CatalogSettings

router = APIRouter(prefix="/api", tags=["home"])


@router.get("/home", response_model=HomeResponse)
async def get_home(
    response: Response,
    service: CatalogService = Depends(get_catalog_service),
    settings: CatalogSettings = Depends(get_settings),
) -> HomeResponse:
    """Return trending and popular/top rated rows; unavailable rows are empty."""

    feed = await service.home()
    response.headers["Cache-Control"] = f"public, max-age={settings.browse_cache_seconds}"
    return HomeResponse.model_validate(asdict(feed))
