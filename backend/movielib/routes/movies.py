"""
Movie Library API - Movie Route Handlers
========================================

What:  CRUD, search and average-rating endpoints for movies.
How:   Parses path/query input, delegates to MovieStore (and ReviewStore for
       ratings), converts store results into response models or exceptions.

Path ids arrive as strings so a non-integer id can be answered with the
status the endpoint calls for (400 or 404) instead of FastAPI's 422:
    - GET/DELETE /movies/{id}           malformed id → 404
    - PUT /movies/{id}, average-rating  malformed id → 400

Route order matters: /movies/search is declared before /movies/{movie_id}
so "search" is never taken for an id.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from movielib.dependencies import (
    get_movie_store,
    get_review_store,
    lookup_id,
    require_id,
)
from movielib.exceptions import MalformedInputError, NotFoundError
from movielib.models.movie import Movie
from movielib.schemas.common import ErrorResponse
from movielib.schemas.movie import (
    AverageRatingResponse,
    MovieRequest,
    MovieResponse,
    MovieWithAverageRatingResponse,
)
from movielib.services import MovieStore, ReviewStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Movies"])


def to_movie_response(movie: Movie) -> MovieResponse:
    return MovieResponse(
        id=movie.id,
        title=movie.title,
        director=movie.director,
        release_year=movie.release_year,
    )


@router.get(
    "/movies",
    response_model=List[MovieWithAverageRatingResponse],
    summary="List all movies with their average rating",
)
async def list_movies(
    movies: MovieStore = Depends(get_movie_store),
    reviews: ReviewStore = Depends(get_review_store),
) -> List[MovieWithAverageRatingResponse]:
    """
    All movies in insertion order, each with averageRating computed from its
    reviews (0.0 if none). Stored records are not modified.
    """
    return [
        MovieWithAverageRatingResponse(
            id=movie.id,
            title=movie.title,
            director=movie.director,
            release_year=movie.release_year,
            average_rating=reviews.average_rating(movie.id),
        )
        for movie in movies.list_all()
    ]


@router.get(
    "/movies/search",
    response_model=List[MovieResponse],
    responses={400: {"description": "Missing or empty query", "model": ErrorResponse}},
    summary="Search movies by title or director",
)
async def search_movies(
    q: Optional[str] = Query(
        default=None,
        description="Case-insensitive substring matched against title and director",
    ),
    movies: MovieStore = Depends(get_movie_store),
) -> List[MovieResponse]:
    if not q:
        raise MalformedInputError(message="Missing query parameter", field="q")
    results = movies.search(q)
    logger.debug("Search %r matched %d movies", q, len(results))
    return [to_movie_response(movie) for movie in results]


@router.post(
    "/movies",
    status_code=201,
    response_model=MovieResponse,
    responses={400: {"description": "Malformed body", "model": ErrorResponse}},
    summary="Create a movie",
)
async def create_movie(
    body: MovieRequest,
    movies: MovieStore = Depends(get_movie_store),
) -> MovieResponse:
    movie = movies.add(body.title, body.director, body.release_year)
    return to_movie_response(movie)


@router.get(
    "/movies/{movie_id}",
    response_model=MovieResponse,
    responses={404: {"description": "Movie not found", "model": ErrorResponse}},
    summary="Get a movie by id",
)
async def get_movie(
    movie_id: str,
    movies: MovieStore = Depends(get_movie_store),
) -> MovieResponse:
    parsed = lookup_id(movie_id, resource="movie")
    movie = movies.get_by_id(parsed)
    if movie is None:
        raise NotFoundError(resource="movie", resource_id=movie_id)
    return to_movie_response(movie)


@router.put(
    "/movies/{movie_id}",
    response_model=MovieResponse,
    responses={
        400: {"description": "Malformed id or body", "model": ErrorResponse},
        404: {"description": "Movie not found", "model": ErrorResponse},
    },
    summary="Replace a movie",
)
async def update_movie(
    movie_id: str,
    body: MovieRequest,
    movies: MovieStore = Depends(get_movie_store),
) -> MovieResponse:
    """Replaces title, director and releaseYear. The id never changes."""
    parsed = require_id(movie_id)
    updated = movies.update(parsed, body.title, body.director, body.release_year)
    if updated is None:
        raise NotFoundError(resource="movie", resource_id=movie_id)
    return to_movie_response(updated)


@router.delete(
    "/movies/{movie_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Movie not found", "model": ErrorResponse}},
    summary="Delete a movie",
)
async def delete_movie(
    movie_id: str,
    movies: MovieStore = Depends(get_movie_store),
) -> Response:
    """
    Removes the movie. Its reviews stay in the review store and can still be
    deleted through /reviews/{id}.
    """
    parsed = lookup_id(movie_id, resource="movie")
    if not movies.delete(parsed):
        raise NotFoundError(resource="movie", resource_id=movie_id)
    return Response(status_code=204)


@router.get(
    "/movies/{movie_id}/average-rating",
    response_model=AverageRatingResponse,
    responses={400: {"description": "Malformed id", "model": ErrorResponse}},
    summary="Average review rating of a movie",
)
async def get_average_rating(
    movie_id: str,
    reviews: ReviewStore = Depends(get_review_store),
) -> AverageRatingResponse:
    """0.0 for a movie without reviews. The movie itself is not looked up."""
    parsed = require_id(movie_id)
    return AverageRatingResponse(average_rating=reviews.average_rating(parsed))
