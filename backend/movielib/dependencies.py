"""
Movie Library API - Request Dependencies
========================================

What:  FastAPI dependencies that hand the per-application stores and settings
       to route handlers, plus the path-id parser every route uses.
How:   create_app() places a MovieStore, a ReviewStore and the active
       Settings on app.state. The dependencies read them back from the
       request, so two app instances never share records.

Example usage in a route:
    @router.get("/movies")
    async def list_movies(movies: MovieStore = Depends(get_movie_store)):
        return movies.list_all()
"""

import re
from typing import Optional

from fastapi import Request

from movielib.config import Settings
from movielib.exceptions import MalformedInputError, NotFoundError
from movielib.schemas.movie import INT32_MAX, INT32_MIN
from movielib.services import MovieStore, ReviewStore

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def get_movie_store(request: Request) -> MovieStore:
    return request.app.state.movie_store


def get_review_store(request: Request) -> ReviewStore:
    return request.app.state.review_store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def parse_id(raw: str) -> Optional[int]:
    """
    Parse a path id, returning None when it is not an integer.

    Accepts an optional sign followed by ASCII digits, within the 32-bit
    signed range. Whitespace, underscores, decimals and non-ASCII digits are
    rejected even though int() would take some of them.
    """
    if not _INT_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value


def require_id(raw: str, field: str = "id") -> int:
    """Path id for endpoints that answer a malformed id with 400."""
    value = parse_id(raw)
    if value is None:
        raise MalformedInputError(
            message=f"Invalid {field} '{raw}': must be an integer",
            field=field,
        )
    return value


def lookup_id(raw: str, resource: str) -> int:
    """Path id for endpoints that answer a malformed id with 404."""
    value = parse_id(raw)
    if value is None:
        raise NotFoundError(resource=resource, resource_id=raw)
    return value
