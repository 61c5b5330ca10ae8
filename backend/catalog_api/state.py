"""Shared state container for the Catalog API."""
from __future__ import annotations

from dataclasses import dataclass

from ..catalog.metadata_fetcher import MetadataFetcher
from .services.catalog_service import CatalogService
from .settings import CatalogSettings


@dataclass(slots=True)
class AppState:
    """Encapsulates application state shared across routers."""

    settings: CatalogSettings
    catalog_service: CatalogService | None

    def __init__(self, settings: CatalogSettings) -> None:
        self.settings = settings
        self.catalog_service = None
        if settings.tmdb_api_key:
            fetcher = MetadataFetcher(settings.tmdb_api_key, base_url=settings.tmdb_base_url)
            self.catalog_service = CatalogService(fetcher)

    @property
    def tmdb_configured(self) -> bool:
        return self.catalog_service is not None
