"""
Movie Library API - Review Route Handlers
=========================================

What:  Endpoints for listing, creating and deleting reviews.

Validation order for POST /movies/{id}/reviews:
    1. Path id must be an integer          → 400
    2. Body must match ReviewRequest       → 400 (handled in main.py)
    3. rating must be within 1..5          → 400 "Rating must be between 1 and 5"
    4. The movie must exist                → 400 "Movie not found"
                                             (404 if REVIEW_MISSING_MOVIE_STATUS=404)

ReviewStore does none of these checks itself.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from movielib.config import Settings
from movielib.dependencies import (
    get_movie_store,
    get_review_store,
    get_settings,
    lookup_id,
    require_id,
)
from movielib.exceptions import NotFoundError, ValidationError
from movielib.models.movie import Review
from movielib.schemas.common import ErrorResponse
from movielib.schemas.movie import ReviewRequest, ReviewResponse
from movielib.services import MovieStore, ReviewStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Reviews"])

MIN_RATING = 1
MAX_RATING = 5


def to_review_response(review: Review) -> ReviewResponse:
    return ReviewResponse(
        id=review.id,
        movie_id=review.movie_id,
        reviewer_name=review.reviewer_name,
        rating=review.rating,
        comment=review.comment,
    )


@router.get(
    "/movies/{movie_id}/reviews",
    response_model=List[ReviewResponse],
    responses={400: {"description": "Malformed id", "model": ErrorResponse}},
    summary="List reviews of a movie",
)
async def list_reviews(
    movie_id: str,
    reviews: ReviewStore = Depends(get_review_store),
) -> List[ReviewResponse]:
    """Empty list both for an unknown movie and for a movie without reviews."""
    parsed = require_id(movie_id)
    return [to_review_response(review) for review in reviews.list_by_movie(parsed)]


@router.post(
    "/movies/{movie_id}/reviews",
    status_code=201,
    response_model=ReviewResponse,
    responses={
        400: {"description": "Malformed id, rating out of range, or movie absent", "model": ErrorResponse},
    },
    summary="Add a review to a movie",
)
async def create_review(
    movie_id: str,
    body: ReviewRequest,
    movies: MovieStore = Depends(get_movie_store),
    reviews: ReviewStore = Depends(get_review_store),
    settings: Settings = Depends(get_settings),
) -> ReviewResponse:
    parsed = require_id(movie_id)

    if not MIN_RATING <= body.rating <= MAX_RATING:
        raise ValidationError(
            message=f"Rating must be between {MIN_RATING} and {MAX_RATING}",
            field="rating",
            context={"rating": body.rating},
        )

    if movies.get_by_id(parsed) is None:
        if settings.review_missing_movie_status == 404:
            raise NotFoundError(resource="movie", resource_id=movie_id)
        raise ValidationError(
            message="Movie not found",
            field="movieId",
            context={"movie_id": parsed},
        )

    review = reviews.add(parsed, body.reviewer_name, body.rating, body.comment)
    return to_review_response(review)


@router.delete(
    "/reviews/{review_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Review not found", "model": ErrorResponse}},
    summary="Delete a review",
)
async def delete_review(
    review_id: str,
    reviews: ReviewStore = Depends(get_review_store),
) -> Response:
    parsed = lookup_id(review_id, resource="review")
    if not reviews.delete(parsed):
        raise NotFoundError(resource="review", resource_id=review_id)
    return Response(status_code=204)
