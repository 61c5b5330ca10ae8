"""
TMDB metadata fetcher.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

import httpx

logger = logging.getLogger(__name__)

TMDB_ENDPOINT = "https://api.themoviedb.org/3"
DETAIL_APPENDICES = ("credits", "videos", "similar")


class MetadataFetcherError(RuntimeError):
    """Raised when TMDB cannot be reached or returns an unusable response."""


class MetadataFetcher:
    """Async wrapper around the TMDB v3 endpoints used by the catalog.

    One pooled ``httpx.AsyncClient`` is shared by every request; call
    :meth:`aclose` on shutdown.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = TMDB_ENDPOINT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                transport=self._transport,
                limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        query: Dict[str, Any] = {"api_key": self.api_key}
        if params:
            query.update(params)

        logger.debug("TMDB request %s %s", path, {k: v for k, v in query.items() if k != "api_key"})
        try:
            response = await self.client.get(path, params=query)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise MetadataFetcherError(
                f"TMDB responded with HTTP {exc.response.status_code} for {path}"
            ) from exc
        except httpx.HTTPError as exc:
            raise MetadataFetcherError(f"Failed to contact TMDB: {exc}") from exc
        except httpx.InvalidURL as exc:
            raise MetadataFetcherError(f"Invalid TMDB request URL for {path!r}: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise MetadataFetcherError(f"TMDB returned invalid JSON for {path}") from exc

        if not isinstance(payload, dict):
            raise MetadataFetcherError(f"TMDB response for {path} must be an object")

        return payload

    async def list_category(self, kind: str, category: str, page: int = 1) -> Dict[str, Any]:
        """Fetch ``/movie/<category>`` or ``/tv/<category>``."""

        return await self._get(f"/{kind}/{category}", {"page": page})

    async def trending(self, window: str = "week", page: int = 1) -> Dict[str, Any]:
        """Fetch trending movies and series for the ``day`` or ``week`` window."""

        return await self._get(f"/trending/all/{window}", {"page": page})

    async def search(self, query: str, search_type: str = "multi", page: int = 1) -> Dict[str, Any]:
        return await self._get(f"/search/{search_type}", {"query": query, "page": page})

    async def details(
        self, kind: str, title_id: str, appendices: Iterable[str] = DETAIL_APPENDICES
    ) -> Dict[str, Any]:
        """Fetch a single movie or series with credits, videos and similar titles."""

        return await self._get(
            f"/{kind}/{title_id}", {"append_to_response": ",".join(appendices)}
        )
