"""Shared fixtures for the Cinestream test-suite."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.catalog.metadata_fetcher import MetadataFetcher  # noqa: E402
from backend.catalog_api import create_app  # noqa: E402
from backend.catalog_api.services import CatalogService  # noqa: E402
from backend.catalog_api.settings import CatalogSettings  # noqa: E402
from tmdb_payloads import (  # noqa: E402
    MOVIE_DETAILS_RESPONSE,
    MOVIE_POPULAR_RESPONSE,
    MULTI_SEARCH_RESPONSE,
    TRENDING_RESPONSE,
    TV_DETAILS_RESPONSE,
    TV_POPULAR_RESPONSE,
)


Route = tuple[int, Any]


@pytest.fixture()
def tmdb_routes() -> dict[str, Route]:
    """Map of TMDB request paths (without the /3 prefix) to canned responses."""

    return {
        "/movie/popular": (200, MOVIE_POPULAR_RESPONSE),
        "/movie/top_rated": (200, MOVIE_POPULAR_RESPONSE),
        "/tv/popular": (200, TV_POPULAR_RESPONSE),
        "/tv/top_rated": (200, TV_POPULAR_RESPONSE),
        "/trending/all/week": (200, TRENDING_RESPONSE),
        "/trending/all/day": (200, TRENDING_RESPONSE),
        "/search/multi": (200, MULTI_SEARCH_RESPONSE),
        "/tv/1399": (200, TV_DETAILS_RESPONSE),
        "/movie/438631": (200, MOVIE_DETAILS_RESPONSE),
    }


@pytest.fixture()
def tmdb_requests() -> list[httpx.Request]:
    return []


@pytest.fixture()
def tmdb_transport(
    tmdb_routes: dict[str, Route], tmdb_requests: list[httpx.Request]
) -> httpx.MockTransport:
    """Mock transport serving ``tmdb_routes`` and recording every request."""

    def _handler(request: httpx.Request) -> httpx.Response:
        tmdb_requests.append(request)
        path = request.url.path.removeprefix("/3")
        status, body = tmdb_routes.get(path, (404, {"status_message": "not found"}))
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    return httpx.MockTransport(_handler)


@pytest.fixture()
def fetcher(tmdb_transport: httpx.MockTransport) -> MetadataFetcher:
    return MetadataFetcher("test-key", transport=tmdb_transport)


@pytest.fixture()
def make_client() -> Callable[..., TestClient]:
    def _factory(**overrides: Any) -> TestClient:
        settings = CatalogSettings(_env_file=None, **overrides)
        return TestClient(create_app(settings=settings))

    return _factory


@pytest.fixture()
def client(make_client: Callable[..., TestClient], fetcher: MetadataFetcher) -> TestClient:
    """Provide a test client whose TMDB traffic is served by the mock transport."""

    test_client = make_client(tmdb_api_key="test-key")
    test_client.app.state.app_state.catalog_service = CatalogService(fetcher)
    return test_client


@pytest.fixture()
def unconfigured_client(make_client: Callable[..., TestClient]) -> TestClient:
    """Provide a test client without a TMDB API key."""

    return make_client(tmdb_api_key=None)
