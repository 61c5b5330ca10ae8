"""Service layer helpers for catalog requests."""

from .catalog_service import (
    BrowsePage,
    CatalogRequestError,
    CatalogService,
    HomeFeed,
    SearchResults,
    clamp_limit,
)

__all__ = [
    "BrowsePage",
    "CatalogRequestError",
    "CatalogService",
    "HomeFeed",
    "SearchResults",
    "clamp_limit",
]
