"""Pydantic models exposed by the Catalog API."""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys for the browser front end."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthStatus(CamelModel):
    """Service health payload."""

    status: Literal["ok"] = Field(default="ok")
    version: str = Field(default="0.1.0", description="Semantic version of the API service.")
    tmdb_configured: bool = Field(
        default=False, description="Whether a TMDB API key is available to catalog endpoints."
    )


class TitleModel(CamelModel):
    """Normalized summary record for a movie or series."""

    id: int
    tmdb_id: int
    title: str
    type: Literal["movie", "tv"]
    poster_url: str | None = None
    backdrop_url: str | None = None
    year: str = Field(default="", description="Release year, empty when unknown.")
    rating: float = 0.0
    description: str = ""
    genre_ids: list[int] = Field(default_factory=list)


class GenreModel(CamelModel):
    id: int
    name: str


class SeasonModel(CamelModel):
    id: int
    name: str
    season_number: int
    episode_count: int
    air_date: str | None = None
    poster_url: str | None = None


class CastMemberModel(CamelModel):
    id: int
    name: str
    character: str
    profile_url: str | None = None


class TrailerModel(CamelModel):
    id: str
    key: str
    name: str
    site: str
    type: str


class TitleDetailsModel(TitleModel):
    """Detail page record including credits, trailer and similar titles."""

    imdb_id: str | None = None
    tagline: str | None = None
    release_date: str | None = None
    vote_count: int = 0
    runtime: int | None = Field(
        default=None, description="Runtime in minutes; first episode runtime for series."
    )
    genres: list[GenreModel] = Field(default_factory=list)
    status: str = ""
    number_of_seasons: int | None = None
    number_of_episodes: int | None = None
    seasons: list[SeasonModel] = Field(default_factory=list)
    cast: list[CastMemberModel] = Field(default_factory=list, description="At most 10 entries.")
    trailer: TrailerModel | None = None
    similar: list[TitleModel] = Field(default_factory=list, description="At most 10 entries.")


class BrowseResponse(CamelModel):
    """Paginated catalog listing."""

    content_type: str
    category: str
    page: int
    titles: list[TitleModel]
    total_pages: int
    total_results: int
    has_more: bool


class SearchResponse(CamelModel):
    """Search results with persons filtered out."""

    query: str
    results: list[TitleModel]
    total: int


class HomeResponse(CamelModel):
    """Rows rendered on the landing page."""

    trending: list[TitleModel] = Field(default_factory=list)
    popular_movies: list[TitleModel] = Field(default_factory=list)
    top_rated_movies: list[TitleModel] = Field(default_factory=list)
    popular_tv: list[TitleModel] = Field(default_factory=list)
    top_rated_tv: list[TitleModel] = Field(default_factory=list)


class EmbedResponse(CamelModel):
    """Embeddable player URL for a movie, series or episode."""

    content_type: Literal["movie", "tv"]
    id: str
    id_type: Literal["imdb", "tmdb"]
    embed_url: str
    season: int | None = None
    episode: int | None = None
