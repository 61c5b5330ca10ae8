"""Runtime configuration for the Catalog API."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    """Environment-aware settings for the Catalog API service."""

    tmdb_api_key: str | None = Field(
        default=None, description="TMDB API key required by every catalog endpoint."
    )
    tmdb_base_url: str = Field(
        default="https://api.themoviedb.org/3", description="Base URL for the TMDB v3 API."
    )
    embed_base_url: str = Field(
        default="https://vidsrc-embed.ru/embed",
        description="Base path of the embeddable player used for playback URLs.",
    )
    default_language: str = Field(
        default="en", description="Player subtitle language used when none is requested."
    )
    browse_cache_seconds: int = Field(
        default=3600, ge=0, description="Cache-Control max-age for browse, details and home."
    )
    search_cache_seconds: int = Field(
        default=300, ge=0, description="Cache-Control max-age for search responses."
    )
    embed_cache_seconds: int = Field(
        default=86400, ge=0, description="Cache-Control max-age for embed descriptors."
    )
    log_level: str = Field(default="INFO", description="Root logging level for the service.")

    model_config = SettingsConfigDict(
        env_prefix="CINESTREAM_",
        env_file=".env",
        env_file_encoding="utf-8",
    )
