"""Command line interface for the Cinestream Catalog API."""
from __future__ import annotations

import json
from typing import Any, Optional

import httpx
import typer

from .client import create_client


DEFAULT_API_BASE = "http://localhost:8000"

app = typer.Typer(help="Browse the Cinestream catalog and build player URLs.")
embed_app = typer.Typer(help="Build embeddable player URLs via the catalog API.")
app.add_typer(embed_app, name="embed")


BROWSE_TYPE_CHOICES = {"movie", "tv", "trending"}
SEARCH_TYPE_CHOICES = {"multi", "movie", "tv"}


def _api_base_option() -> typer.Option:
    return typer.Option(
        DEFAULT_API_BASE,
        "--api-base",
        help="Base URL for the Catalog API service.",
        show_default=True,
        envvar="CINESTREAM_API_BASE",
    )


def _echo_response(response: httpx.Response) -> None:
    """Pretty-print a JSON body, or report the API error and exit."""

    if response.is_error:
        try:
            detail: Any = response.json().get("detail")
        except ValueError:
            detail = response.text
        typer.echo(f"Error {response.status_code}: {detail}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(response.json(), indent=2, ensure_ascii=False))


def _check_choice(value: str, choices: set[str], label: str) -> str:
    normalized = value.lower()
    if normalized not in choices:
        typer.echo(
            f"Invalid {label}. Allowed values: " + ", ".join(sorted(choices)),
            err=True,
        )
        raise typer.Exit(code=1)
    return normalized


@app.command()
def health(api_base: str = _api_base_option()) -> None:
    """Call the /health endpoint and pretty-print the response."""

    with create_client(api_base) as client:
        _echo_response(client.get("/health"))


@app.command()
def browse(
    content_type: str = typer.Option("movie", "--type", help="movie, tv or trending."),
    category: str = typer.Option("popular", help="TMDB list name (popular, top_rated, ...)."),
    page: int = typer.Option(1, min=1, help="Page number starting at 1."),
    api_base: str = _api_base_option(),
) -> None:
    """List one page of movies, series or trending titles."""

    params = {
        "type": _check_choice(content_type, BROWSE_TYPE_CHOICES, "type"),
        "category": category,
        "page": page,
    }
    with create_client(api_base) as client:
        _echo_response(client.get("/api/browse", params=params))


@app.command()
def search(
    query: str = typer.Argument(..., help="Search term (at least 2 characters)."),
    search_type: str = typer.Option("multi", "--type", help="multi, movie or tv."),
    limit: int = typer.Option(20, min=1, max=50, help="Maximum number of results."),
    api_base: str = _api_base_option(),
) -> None:
    """Search movies and series by title."""

    params = {
        "q": query,
        "type": _check_choice(search_type, SEARCH_TYPE_CHOICES, "type"),
        "limit": limit,
    }
    with create_client(api_base) as client:
        _echo_response(client.get("/api/search", params=params))


@app.command()
def details(
    content_type: str = typer.Argument(..., help="movie or tv."),
    title_id: str = typer.Argument(..., help="TMDB identifier of the title."),
    api_base: str = _api_base_option(),
) -> None:
    """Show cast, trailer, seasons and similar titles for a movie or series."""

    kind = _check_choice(content_type, {"movie", "tv"}, "content type")
    with create_client(api_base) as client:
        _echo_response(client.get(f"/api/details/{kind}/{title_id}"))


@app.command()
def home(api_base: str = _api_base_option()) -> None:
    """Show the trending and popular rows of the landing page."""

    with create_client(api_base) as client:
        _echo_response(client.get("/api/home"))


def _embed_params(language: Optional[str], autoplay: bool) -> dict[str, object]:
    params: dict[str, object] = {}
    if language:
        params["ds_lang"] = language
    if not autoplay:
        params["autoplay"] = "false"
    return params


@embed_app.command("movie")
def embed_movie(
    title_id: str = typer.Argument(..., help="TMDB id or IMDb id (tt1234567)."),
    language: Optional[str] = typer.Option(None, "--lang", help="Subtitle language tag."),
    autoplay: bool = typer.Option(
        True, "--autoplay/--no-autoplay", help="Start playback automatically.", show_default=True
    ),
    api_base: str = _api_base_option(),
) -> None:
    """Build the player URL for a movie."""

    with create_client(api_base) as client:
        _echo_response(
            client.get(f"/api/embed/movie/{title_id}", params=_embed_params(language, autoplay))
        )


@embed_app.command("tv")
def embed_tv(
    title_id: str = typer.Argument(..., help="TMDB id or IMDb id (tt1234567)."),
    season: Optional[int] = typer.Option(None, min=0, help="Season number."),
    episode: Optional[int] = typer.Option(None, min=0, help="Episode number."),
    language: Optional[str] = typer.Option(None, "--lang", help="Subtitle language tag."),
    autoplay: bool = typer.Option(
        True, "--autoplay/--no-autoplay", help="Start playback automatically.", show_default=True
    ),
    autonext: bool = typer.Option(
        False, "--autonext/--no-autonext", help="Advance to the next episode.", show_default=True
    ),
    api_base: str = _api_base_option(),
) -> None:
    """Build the player URL for a series or a single episode."""

    if (season is None) != (episode is None):
        typer.echo("Season and episode must be given together.", err=True)
        raise typer.Exit(code=1)

    params = _embed_params(language, autoplay)
    if season is not None and episode is not None:
        params["season"] = season
        params["episode"] = episode
    if autonext:
        params["autonext"] = "true"

    with create_client(api_base) as client:
        _echo_response(client.get(f"/api/embed/tv/{title_id}", params=params))
