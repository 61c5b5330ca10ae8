"""
Builders for embeddable player URLs.

Path layout of the player:

    movie:    <base>/movie/<id>
    tv:       <base>/tv/<id>
    episode:  <base>/tv/<id>/<season>-<episode>
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal, Optional
from urllib.parse import quote, urlencode

DEFAULT_EMBED_BASE_URL = "https://vidsrc-embed.ru/embed"
DEFAULT_LANGUAGE = "en"

IMDB_ID_PATTERN = re.compile(r"^[A-Za-z]{2}\d{7,9}$")

IdentifierKind = Literal["imdb", "tmdb"]


@dataclass(slots=True)
class EmbedDescriptor:
    """Identifier metadata and the derived player URL for a title."""

    id: str
    id_type: IdentifierKind
    content_type: Literal["movie", "tv"]
    embed_url: str
    season: Optional[int] = None
    episode: Optional[int] = None


def classify_identifier(identifier: str) -> IdentifierKind:
    """Return ``imdb`` for IMDb-style ids (``tt1234567``), ``tmdb`` otherwise."""

    return "imdb" if IMDB_ID_PATTERN.match(identifier) else "tmdb"


def _episode_pair(
    season: Optional[int], episode: Optional[int]
) -> tuple[Optional[int], Optional[int]]:
    if season is None or episode is None:
        return None, None
    return season, episode


def build_embed_url(
    content_type: str,
    identifier: str,
    *,
    season: Optional[int] = None,
    episode: Optional[int] = None,
    language: Optional[str] = None,
    autoplay: bool = True,
    auto_next: bool = False,
    base_url: str = DEFAULT_EMBED_BASE_URL,
) -> str:
    """Build the player URL for a movie, a series or a single episode.

    Season and episode are only used when both are given. ``autonext`` is
    emitted for episodes only.
    """

    if content_type not in ("movie", "tv"):
        raise ValueError(f"Unsupported content type: {content_type!r}")

    season, episode = _episode_pair(season, episode)
    has_episode = content_type == "tv" and season is not None

    params: list[tuple[str, str]] = [("ds_lang", language or DEFAULT_LANGUAGE)]
    if not autoplay:
        params.append(("autoplay", "0"))
    if auto_next and has_episode:
        params.append(("autonext", "1"))

    path = f"{base_url.rstrip('/')}/{content_type}/{quote(identifier, safe='')}"
    if has_episode:
        path = f"{path}/{season}-{episode}"
    return f"{path}?{urlencode(params)}"


def describe_embed(
    content_type: str,
    identifier: str,
    *,
    season: Optional[int] = None,
    episode: Optional[int] = None,
    language: Optional[str] = None,
    autoplay: bool = True,
    auto_next: bool = False,
    base_url: str = DEFAULT_EMBED_BASE_URL,
) -> EmbedDescriptor:
    """Classify ``identifier`` and build its :class:`EmbedDescriptor`."""

    embed_url = build_embed_url(
        content_type,
        identifier,
        season=season,
        episode=episode,
        language=language,
        autoplay=autoplay,
        auto_next=auto_next,
        base_url=base_url,
    )
    if content_type == "tv":
        season, episode = _episode_pair(season, episode)
    else:
        season, episode = None, None
    return EmbedDescriptor(
        id=identifier,
        id_type=classify_identifier(identifier),
        content_type=content_type,  # type: ignore[arg-type]
        embed_url=embed_url,
        season=season,
        episode=episode,
    )
