"""Embeddable player URL endpoints."""
from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from ...catalog.embed import EmbedDescriptor, describe_embed
from ..dependencies import get_settings
from ..schemas import EmbedResponse
from ..settings import CatalogSettings

router = APIRouter(prefix="/api/embed", tags=["embed"])


def _require_id(title_id: str) -> str:
    stripped = title_id.strip()
    if not stripped:
        raise HTTPException(status_code=400, detail="Invalid title ID")
    return stripped


def _embed_response(
    response: Response, settings: CatalogSettings, descriptor: EmbedDescriptor
) -> EmbedResponse:
    response.headers["Cache-Control"] = f"public, max-age={settings.embed_cache_seconds}"
    return EmbedResponse.model_validate(asdict(descriptor))


@router.get("/movie/{title_id}", response_model=EmbedResponse)
def embed_movie(
    title_id: str,
    response: Response,
    ds_lang: str | None = Query(default=None, description="Subtitle language tag."),
    autoplay: bool = Query(default=True, description="Start playback automatically."),
    settings: CatalogSettings = Depends(get_settings),
) -> EmbedResponse:
    """Return the player URL for a movie by TMDB or IMDb id."""

    descriptor = describe_embed(
        "movie",
        _require_id(title_id),
        language=ds_lang or settings.default_language,
        autoplay=autoplay,
        base_url=settings.embed_base_url,
    )
    return _embed_response(response, settings, descriptor)


@router.get("/tv/{title_id}", response_model=EmbedResponse)
def embed_tv(
    title_id: str,
    response: Response,
    season: int | None = Query(default=None, ge=0, description="Season number."),
    episode: int | None = Query(default=None, ge=0, description="Episode number."),
    ds_lang: str | None = Query(default=None, description="Subtitle language tag."),
    autoplay: bool = Query(default=True, description="Start playback automatically."),
    autonext: bool = Query(default=False, description="Advance to the next episode when done."),
    settings: CatalogSettings = Depends(get_settings),
) -> EmbedResponse:
    """Return the player URL for a series, or an episode when season and episode are both set."""

    descriptor = describe_embed(
        "tv",
        _require_id(title_id),
        season=season,
        episode=episode,
        language=ds_lang or settings.default_language,
        autoplay=autoplay,
        auto_next=autonext,
        base_url=settings.embed_base_url,
    )
    return _embed_response(response, settings, descriptor)
