"""HTTP client helpers for the Cinestream CLI."""
from __future__ import annotations

import httpx

USER_AGENT = "cinestream-cli/0.1.0"


def create_client(
    base_url: str,
    *,
    timeout: float = 10.0,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Return an HTTPX client bound to the Catalog API base URL."""

    return httpx.Client(
        base_url=base_url.rstrip("/"),
        timeout=timeout,
        transport=transport,
        headers={"Accept": "application/json", "User-Agent": USER_AGENT},
    )
