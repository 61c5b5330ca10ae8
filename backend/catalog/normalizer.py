"""
Normalization of TMDB movie/TV payloads into uniform title records.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Literal, Mapping, Optional

ContentKind = Literal["movie", "tv"]
RawItem = Mapping[str, Any]

IMAGE_BASE_URL = "https://image.tmdb.org/t/p"

LISTING_POSTER_SIZE = "w500"
LISTING_BACKDROP_SIZE = "w1280"
DETAIL_POSTER_SIZE = "w780"
DETAIL_BACKDROP_SIZE = "original"
SIMILAR_POSTER_SIZE = "w300"
SEASON_POSTER_SIZE = "w300"
PROFILE_SIZE = "w185"

MAX_CAST = 10
MAX_SIMILAR = 10


@dataclass(slots=True)
class Title:
    """Summary record shared by listings, search results and similar titles."""

    id: int
    tmdb_id: int
    title: str
    type: ContentKind
    poster_url: Optional[str]
    backdrop_url: Optional[str]
    year: str
    rating: float
    description: str
    genre_ids: List[int] = field(default_factory=list)


@dataclass(slots=True)
class Genre:
    id: int
    name: str


@dataclass(slots=True)
class Season:
    id: int
    name: str
    season_number: int
    episode_count: int
    air_date: Optional[str]
    poster_url: Optional[str]


@dataclass(slots=True)
class CastMember:
    id: int
    name: str
    character: str
    profile_url: Optional[str]


@dataclass(slots=True)
class Trailer:
    id: str
    key: str
    name: str
    site: str
    type: str


@dataclass(slots=True)
class TitleDetails(Title):
    """Full record for a detail page, including credits, videos and similar titles."""

    imdb_id: Optional[str] = None
    tagline: Optional[str] = None
    release_date: Optional[str] = None
    vote_count: int = 0
    runtime: Optional[int] = None
    genres: List[Genre] = field(default_factory=list)
    status: str = ""
    number_of_seasons: Optional[int] = None
    number_of_episodes: Optional[int] = None
    seasons: List[Season] = field(default_factory=list)
    cast: List[CastMember] = field(default_factory=list)
    trailer: Optional[Trailer] = None
    similar: List[Title] = field(default_factory=list)


def build_image_url(path: Optional[str], size: str) -> Optional[str]:
    """Join an image path fragment onto the TMDB image CDN, or return None."""

    if not path:
        return None
    return f"{IMAGE_BASE_URL}/{size}{path}"


def extract_year(raw: RawItem) -> str:
    """Return the year segment of the release/first-air date, or an empty string."""

    date_str = raw.get("release_date") or raw.get("first_air_date") or ""
    return str(date_str).split("-")[0]


def resolve_kind(raw: RawItem, requested_type: str) -> ContentKind:
    media_type = raw.get("media_type")
    if media_type in ("movie", "tv"):
        return media_type
    return "tv" if requested_type == "tv" else "movie"


def _text(value: Any, default: str = "") -> str:
    return value if isinstance(value, str) else default


def _number(value: Any, default: float = 0.0) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return float(value)


def _integer(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _items(value: Any) -> Iterable[RawItem]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def _results(container: Any) -> Iterable[RawItem]:
    if not isinstance(container, Mapping):
        return []
    return _items(container.get("results"))


def normalize_title(
    raw: RawItem,
    requested_type: str,
    *,
    poster_size: str = LISTING_POSTER_SIZE,
    backdrop_size: str = LISTING_BACKDROP_SIZE,
) -> Title:
    """Build a :class:`Title` from a movie, TV or multi-search result item."""

    item_id = _integer(raw.get("id")) or 0
    genre_ids = raw.get("genre_ids")
    return Title(
        id=item_id,
        tmdb_id=item_id,
        title=_text(raw.get("title")) or _text(raw.get("name")),
        type=resolve_kind(raw, requested_type),
        poster_url=build_image_url(raw.get("poster_path"), poster_size),
        backdrop_url=build_image_url(raw.get("backdrop_path"), backdrop_size),
        year=extract_year(raw),
        rating=_number(raw.get("vote_average")),
        description=_text(raw.get("overview")),
        genre_ids=[gid for gid in genre_ids if isinstance(gid, int)] if isinstance(genre_ids, list) else [],
    )


def normalize_titles(items: Iterable[RawItem], requested_type: str) -> List[Title]:
    return [normalize_title(item, requested_type) for item in items]


def select_trailer(videos: Any) -> Optional[Trailer]:
    """Pick the first YouTube trailer from a ``videos`` appendix."""

    for video in _results(videos):
        if video.get("type") == "Trailer" and video.get("site") == "YouTube":
            return Trailer(
                id=_text(video.get("id")),
                key=_text(video.get("key")),
                name=_text(video.get("name")),
                site="YouTube",
                type="Trailer",
            )
    return None


def _runtime(raw: RawItem) -> Optional[int]:
    runtime = _integer(raw.get("runtime"))
    if runtime:
        return runtime
    episode_run_time = raw.get("episode_run_time")
    if isinstance(episode_run_time, list) and episode_run_time:
        return _integer(episode_run_time[0])
    return None


def _cast(credits: Any) -> List[CastMember]:
    if not isinstance(credits, Mapping):
        return []
    members = list(_items(credits.get("cast")))[:MAX_CAST]
    return [
        CastMember(
            id=_integer(person.get("id")) or 0,
            name=_text(person.get("name")),
            character=_text(person.get("character")),
            profile_url=build_image_url(person.get("profile_path"), PROFILE_SIZE),
        )
        for person in members
    ]


def _seasons(raw: RawItem) -> List[Season]:
    return [
        Season(
            id=_integer(season.get("id")) or 0,
            name=_text(season.get("name")),
            season_number=_integer(season.get("season_number")) or 0,
            episode_count=_integer(season.get("episode_count")) or 0,
            air_date=season.get("air_date") or None,
            poster_url=build_image_url(season.get("poster_path"), SEASON_POSTER_SIZE),
        )
        for season in _items(raw.get("seasons"))
    ]


def normalize_details(raw: RawItem, requested_type: str) -> TitleDetails:
    """Build a :class:`TitleDetails` from a details payload with appended
    ``credits``, ``videos`` and ``similar`` responses.

    Similar titles inherit the requested kind; TMDB omits ``media_type`` on
    them.
    """

    kind: ContentKind = "tv" if requested_type == "tv" else "movie"
    base = normalize_title(
        raw,
        kind,
        poster_size=DETAIL_POSTER_SIZE,
        backdrop_size=DETAIL_BACKDROP_SIZE,
    )
    similar = [
        normalize_title(item, kind, poster_size=SIMILAR_POSTER_SIZE)
        for item in list(_results(raw.get("similar")))[:MAX_SIMILAR]
    ]
    return TitleDetails(
        id=base.id,
        tmdb_id=base.tmdb_id,
        title=base.title,
        type=base.type,
        poster_url=base.poster_url,
        backdrop_url=base.backdrop_url,
        year=base.year,
        rating=base.rating,
        description=base.description,
        genre_ids=[genre.get("id") for genre in _items(raw.get("genres")) if isinstance(genre.get("id"), int)],
        imdb_id=_text(raw.get("imdb_id")) or None,
        tagline=_text(raw.get("tagline")) or None,
        release_date=raw.get("release_date") or raw.get("first_air_date") or None,
        vote_count=_integer(raw.get("vote_count")) or 0,
        runtime=_runtime(raw),
        genres=[
            Genre(id=genre["id"], name=_text(genre.get("name")))
            for genre in _items(raw.get("genres"))
            if isinstance(genre.get("id"), int)
        ],
        status=_text(raw.get("status")),
        number_of_seasons=_integer(raw.get("number_of_seasons")) or None,
        number_of_episodes=_integer(raw.get("number_of_episodes")) or None,
        seasons=_seasons(raw),
        cast=_cast(raw.get("credits")),
        trailer=select_trailer(raw.get("videos")),
        similar=similar,
    )


def normalize(raw: RawItem, requested_type: str, *, detailed: bool = False) -> Title:
    """Normalize an upstream item into a :class:`Title` or :class:`TitleDetails`."""

    if detailed:
        return normalize_details(raw, requested_type)
    return normalize_title(raw, requested_type)
