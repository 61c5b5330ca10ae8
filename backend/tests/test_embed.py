"""Tests for the embeddable player URL builder."""
from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import pytest

from backend.catalog.embed import build_embed_url, classify_identifier, describe_embed


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [
        ("tt1234567", "imdb"),
        ("tt123456789", "imdb"),
        ("nm0000123", "imdb"),
        ("tt123456", "tmdb"),
        ("tt1234567890", "tmdb"),
        ("1399", "tmdb"),
        ("t1234567", "tmdb"),
        ("tt1234567x", "tmdb"),
    ],
)
def test_classify_identifier(identifier: str, expected: str) -> None:
    assert classify_identifier(identifier) == expected


def test_movie_url_uses_movie_path_and_default_language() -> None:
    url = build_embed_url("movie", "385687")

    parts = urlsplit(url)
    assert parts.path == "/embed/movie/385687"
    assert parse_qs(parts.query) == {"ds_lang": ["en"]}


def test_tv_episode_url_appends_season_episode_segment() -> None:
    url = build_embed_url("tv", "1399", season=1, episode=1)

    assert urlsplit(url).path.endswith("/tv/1399/1-1")


@pytest.mark.parametrize(("season", "episode"), [(1, None), (None, 3), (None, None)])
def test_partial_season_episode_is_ignored(season, episode) -> None:
    url = build_embed_url("tv", "1399", season=season, episode=episode, auto_next=True)

    parts = urlsplit(url)
    assert parts.path == "/embed/tv/1399"
    assert "autonext" not in parse_qs(parts.query)


def test_autoplay_only_emitted_when_disabled() -> None:
    assert "autoplay" not in build_embed_url("movie", "1")
    assert parse_qs(urlsplit(build_embed_url("movie", "1", autoplay=False)).query)["autoplay"] == ["0"]


def test_autonext_only_for_episodes() -> None:
    episode_url = build_embed_url("tv", "1399", season=2, episode=5, auto_next=True, language="de")

    query = parse_qs(urlsplit(episode_url).query)
    assert query == {"ds_lang": ["de"], "autonext": ["1"]}
    assert "autonext" not in build_embed_url("movie", "1", auto_next=True)


def test_builder_is_deterministic() -> None:
    kwargs = dict(season=3, episode=4, language="fr", autoplay=False, auto_next=True)

    assert build_embed_url("tv", "tt0944947", **kwargs) == build_embed_url("tv", "tt0944947", **kwargs)


def test_invalid_content_type_raises() -> None:
    with pytest.raises(ValueError):
        build_embed_url("episode", "1")


def test_describe_embed_classifies_imdb_movie() -> None:
    descriptor = describe_embed("movie", "tt1234567", season=1, episode=2)

    assert descriptor.id_type == "imdb"
    assert descriptor.content_type == "movie"
    assert descriptor.season is None
    assert descriptor.episode is None
    assert descriptor.embed_url.startswith("https://vidsrc-embed.ru/embed/movie/tt1234567?")


def test_describe_embed_keeps_episode_pair_for_tv() -> None:
    descriptor = describe_embed("tv", "1399", season=1, episode=9, base_url="https://player.test/embed/")

    assert descriptor.id_type == "tmdb"
    assert (descriptor.season, descriptor.episode) == (1, 9)
    assert descriptor.embed_url == "https://player.test/embed/tv/1399/1-9?ds_lang=en"


@pytest.mark.parametrize(
    ("identifier", "escaped"),
    [
        ("550?autoplay=1&x=", "550%3Fautoplay%3D1%26x%3D"),
        ("12 34", "12%2034"),
        ("12#frag", "12%23frag"),
        ("a/b", "a%2Fb"),
    ],
)
def test_identifier_is_escaped_in_path(identifier: str, escaped: str) -> None:
    url = build_embed_url("movie", identifier)

    assert url == f"https://vidsrc-embed.ru/embed/movie/{escaped}?ds_lang=en"
    assert parse_qs(urlsplit(url).query) == {"ds_lang": ["en"]}


def test_classification_uses_raw_identifier() -> None:
    descriptor = describe_embed("tv", "tt0944947", season=1, episode=1)

    assert descriptor.id_type == "imdb"
    assert descriptor.id == "tt0944947"
    assert "/tv/tt0944947/1-1?" in descriptor.embed_url
