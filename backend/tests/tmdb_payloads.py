"""
Canned TMDB API responses used by the Cinestream tests.
"""
from __future__ import annotations

from typing import Any


MOVIE_POPULAR_RESPONSE: dict[str, Any] = {
    "page": 1,
    "results": [
        {
            "id": 438631,
            "title": "Dune",
            "release_date": "2021-10-21",
            "poster_path": "/abc.jpg",
            "backdrop_path": "/dune-backdrop.jpg",
            "vote_average": 8.0,
            "overview": "Paul Atreides travels to Arrakis.",
            "genre_ids": [878, 12],
        },
        {
            "id": 27205,
            "title": "Inception",
            "release_date": "2010-07-15",
            "poster_path": None,
            "backdrop_path": None,
            "vote_average": 8.4,
            "overview": "A thief who steals corporate secrets.",
        },
    ],
    "total_pages": 3,
    "total_results": 60,
}

TV_POPULAR_RESPONSE: dict[str, Any] = {
    "page": 1,
    "results": [
        {
            "id": 1399,
            "name": "Game of Thrones",
            "first_air_date": "2011-04-17",
            "poster_path": "/got.jpg",
            "vote_average": 8.5,
            "overview": "Seven noble families fight for control.",
            "genre_ids": [10765, 18],
        }
    ],
    "total_pages": 1,
    "total_results": 1,
}

TRENDING_RESPONSE: dict[str, Any] = {
    "page": 1,
    "results": [
        {"id": 438631, "title": "Dune", "media_type": "movie", "release_date": "2021-10-21"},
        {"id": 1399, "name": "Game of Thrones", "media_type": "tv", "first_air_date": "2011-04-17"},
    ],
    "total_pages": 1,
    "total_results": 2,
}

MULTI_SEARCH_RESPONSE: dict[str, Any] = {
    "page": 1,
    "results": [
        {"id": 438631, "title": "Dune", "media_type": "movie", "release_date": "2021-10-21"},
        {"id": 1190, "name": "Frank Herbert", "media_type": "person"},
        {"id": 90228, "name": "Dune: Prophecy", "media_type": "tv", "first_air_date": "2024-11-17"},
        {"id": 841, "title": "Dune", "media_type": "movie", "release_date": "1984-12-14"},
    ],
    "total_pages": 1,
    "total_results": 4,
}


def _cast(count: int) -> list[dict[str, Any]]:
    return [
        {
            "id": 100 + index,
            "name": f"Actor {index}",
            "character": f"Role {index}",
            "profile_path": f"/actor{index}.jpg" if index % 2 == 0 else None,
        }
        for index in range(count)
    ]


def _similar(count: int) -> list[dict[str, Any]]:
    return [
        {"id": 500 + index, "name": f"Similar {index}", "first_air_date": "2015-01-01"}
        for index in range(count)
    ]


TV_DETAILS_RESPONSE: dict[str, Any] = {
    "id": 1399,
    "name": "Game of Thrones",
    "tagline": "Winter is coming.",
    "overview": "Seven noble families fight for control.",
    "first_air_date": "2011-04-17",
    "poster_path": "/got.jpg",
    "backdrop_path": "/got-backdrop.jpg",
    "vote_average": 8.5,
    "vote_count": 24000,
    "episode_run_time": [60, 55],
    "genres": [{"id": 18, "name": "Drama"}, {"id": 10765, "name": "Sci-Fi & Fantasy"}],
    "status": "Ended",
    "number_of_seasons": 8,
    "number_of_episodes": 73,
    "seasons": [
        {
            "id": 3624,
            "name": "Season 1",
            "season_number": 1,
            "episode_count": 10,
            "air_date": "2011-04-17",
            "poster_path": "/s1.jpg",
        },
        {
            "id": 3625,
            "name": "Season 2",
            "season_number": 2,
            "episode_count": 10,
            "air_date": None,
            "poster_path": None,
        },
    ],
    "credits": {"cast": _cast(14)},
    "videos": {
        "results": [
            {"id": "v1", "key": "teaser", "name": "Teaser", "site": "YouTube", "type": "Teaser"},
            {"id": "v2", "key": "vimeo", "name": "Vimeo Trailer", "site": "Vimeo", "type": "Trailer"},
            {"id": "v3", "key": "bjqEWgDVPe0", "name": "Official Trailer", "site": "YouTube", "type": "Trailer"},
            {"id": "v4", "key": "later", "name": "Second Trailer", "site": "YouTube", "type": "Trailer"},
        ]
    },
    "similar": {"results": _similar(12)},
}

MOVIE_DETAILS_RESPONSE: dict[str, Any] = {
    "id": 438631,
    "imdb_id": "tt1160419",
    "title": "Dune",
    "release_date": "2021-10-21",
    "runtime": 155,
    "poster_path": "/abc.jpg",
    "backdrop_path": None,
    "vote_average": 8.0,
    "vote_count": 11000,
    "status": "Released",
    "genres": [{"id": 878, "name": "Science Fiction"}],
}
