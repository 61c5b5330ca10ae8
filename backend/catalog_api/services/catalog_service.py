"""Catalog orchestration between TMDB and the normalizer."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ...catalog.metadata_fetcher import MetadataFetcher, MetadataFetcherError
from ...catalog.normalizer import Title, TitleDetails, normalize_details, normalize_titles

logger = logging.getLogger(__name__)

BROWSE_CATEGORIES: Dict[str, tuple[str, ...]] = {
    "movie": ("popular", "top_rated", "now_playing", "upcoming"),
    "tv": ("popular", "top_rated", "on_the_air", "airing_today"),
}
BROWSE_TYPES = ("movie", "tv", "trending")
SEARCH_TYPES = ("multi", "movie", "tv")
DETAIL_TYPES = ("movie", "tv")

MIN_QUERY_LENGTH = 2
DEFAULT_SEARCH_LIMIT = 20
MAX_SEARCH_LIMIT = 50


class CatalogRequestError(ValueError):
    """Raised when a catalog request carries missing or out-of-range input."""


@dataclass(slots=True)
class BrowsePage:
    content_type: str
    category: str
    page: int
    titles: List[Title]
    total_pages: int
    total_results: int
    has_more: bool


@dataclass(slots=True)
class SearchResults:
    query: str
    results: List[Title]
    total: int


@dataclass(slots=True)
class HomeFeed:
    trending: List[Title] = field(default_factory=list)
    popular_movies: List[Title] = field(default_factory=list)
    top_rated_movies: List[Title] = field(default_factory=list)
    popular_tv: List[Title] = field(default_factory=list)
    top_rated_tv: List[Title] = field(default_factory=list)


def clamp_limit(limit: int | None) -> int:
    """Clamp a search result limit into ``[1, MAX_SEARCH_LIMIT]``."""

    if limit is None:
        return DEFAULT_SEARCH_LIMIT
    return max(1, min(limit, MAX_SEARCH_LIMIT))


def _int_field(payload: Dict[str, Any], key: str) -> int:
    value = payload.get(key)
    return value if isinstance(value, int) and not isinstance(value, bool) else 0


def _result_items(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
    results = payload.get("results")
    if not isinstance(results, list):
        return []
    return [item for item in results if isinstance(item, dict)]


class CatalogService:
    """Validates catalog requests, calls TMDB and normalizes the responses."""

    def __init__(self, fetcher: MetadataFetcher) -> None:
        self.fetcher = fetcher

    async def browse(self, content_type: str, category: str, page: int) -> BrowsePage:
        """Return one page of a movie/TV category or the trending feed."""

        if page < 1:
            raise CatalogRequestError("Page must be >= 1")
        if content_type not in BROWSE_TYPES:
            raise CatalogRequestError(f"Unsupported content type: {content_type}")

        if content_type == "trending":
            window = "day" if category == "day" else "week"
            payload = await self.fetcher.trending(window, page)
        else:
            if category not in BROWSE_CATEGORIES[content_type]:
                raise CatalogRequestError(f"Unsupported {content_type} category: {category}")
            payload = await self.fetcher.list_category(content_type, category, page)

        total_pages = _int_field(payload, "total_pages")
        return BrowsePage(
            content_type=content_type,
            category=category,
            page=page,
            titles=normalize_titles(_result_items(payload), content_type),
            total_pages=total_pages,
            total_results=_int_field(payload, "total_results"),
            has_more=page < total_pages,
        )

    async def search(self, query: str | None, search_type: str, limit: int | None) -> SearchResults:
        """Search TMDB; person results are dropped before the limit applies."""

        trimmed = (query or "").strip()
        if len(trimmed) < MIN_QUERY_LENGTH:
            raise CatalogRequestError(
                f"Query must be at least {MIN_QUERY_LENGTH} characters"
            )
        if search_type not in SEARCH_TYPES:
            raise CatalogRequestError(f"Unsupported search type: {search_type}")

        payload = await self.fetcher.search(trimmed, search_type)
        items = [
            item for item in _result_items(payload) if item.get("media_type") != "person"
        ][: clamp_limit(limit)]
        return SearchResults(
            query=trimmed,
            results=normalize_titles(items, search_type),
            total=_int_field(payload, "total_results"),
        )

    async def details(self, content_type: str, title_id: str) -> TitleDetails:
        if content_type not in DETAIL_TYPES:
            raise CatalogRequestError(f"Unsupported content type: {content_type}")
        title_id = (title_id or "").strip()
        if not title_id:
            raise CatalogRequestError("Title id is required")
        if not title_id.isprintable() or any(char in title_id for char in "/?#"):
            raise CatalogRequestError("Title id contains invalid characters")

        payload = await self.fetcher.details(content_type, title_id)
        return normalize_details(payload, content_type)

    async def _home_row(self, label: str, content_type: str, category: str) -> List[Title]:
        try:
            if content_type == "trending":
                payload = await self.fetcher.trending("week")
            else:
                payload = await self.fetcher.list_category(content_type, category)
        except MetadataFetcherError:
            logger.warning("Home row %s unavailable", label, exc_info=True)
            return []
        return normalize_titles(_result_items(payload), content_type)

    async def home(self) -> HomeFeed:
        """Fetch the five landing page rows concurrently."""

        trending, popular_movies, top_rated_movies, popular_tv, top_rated_tv = await asyncio.gather(
            self._home_row("trending", "trending", "week"),
            self._home_row("popular_movies", "movie", "popular"),
            self._home_row("top_rated_movies", "movie", "top_rated"),
            self._home_row("popular_tv", "tv", "popular"),
            self._home_row("top_rated_tv", "tv", "top_rated"),
        )
        return HomeFeed(
            trending=trending,
            popular_movies=popular_movies,
            top_rated_movies=top_rated_movies,
            popular_tv=popular_tv,
            top_rated_tv=top_rated_tv,
        )
