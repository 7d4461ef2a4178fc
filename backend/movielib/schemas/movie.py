"""
Movie Library API - Pydantic Request/Response Schemas
=====================================================

What:  Pydantic models defining the JSON contract of the movie and review
       endpoints.
How:   Fields are declared in snake_case and exposed in camelCase through an
       alias generator. FastAPI validates request bodies against the aliases
       and serializes responses by alias, so clients only ever see
       `releaseYear`, `movieId`, `reviewerName`, `averageRating`.

Design Decision:
    Schemas are separate from the stored records (models/movie.py) because
    the listing endpoint adds a computed averageRating that is never stored.
"""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

CAMEL_CASE_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}

# Request bodies take JSON integers only: no bools, numeric strings or 4.0.
STRICT_REQUEST_CONFIG = {**CAMEL_CASE_CONFIG, "strict": True}

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


# ══════════════════════════════════════════════════════════════════════════
# Request Models - What clients send
# ══════════════════════════════════════════════════════════════════════════


class MovieRequest(BaseModel):
    """Body of POST /movies and PUT /movies/{id}."""

    title: str = Field(description="Movie title")
    director: str = Field(description="Director name")
    release_year: int = Field(ge=INT32_MIN, le=INT32_MAX, description="Year of release")

    model_config = STRICT_REQUEST_CONFIG


class ReviewRequest(BaseModel):
    """
    Body of POST /movies/{id}/reviews.

    rating is only bounded to a 32-bit integer here. The route checks 1..5
    itself so that rejection comes back with its own message.
    """

    reviewer_name: str = Field(description="Name of the reviewer")
    rating: int = Field(ge=INT32_MIN, le=INT32_MAX, description="Rating from 1 to 5 inclusive")
    comment: str = Field(description="Free-text review")

    model_config = STRICT_REQUEST_CONFIG


# ══════════════════════════════════════════════════════════════════════════
# Response Models - What the API returns
# ══════════════════════════════════════════════════════════════════════════


class MovieResponse(BaseModel):
    id: int = Field(description="Sequential movie identifier")
    title: str
    director: str
    release_year: int

    model_config = CAMEL_CASE_CONFIG


class MovieWithAverageRatingResponse(MovieResponse):
    """
    A movie as returned by GET /movies.

    averageRating is computed from the movie's reviews at request time
    (0.0 when there are none).
    """

    average_rating: float = Field(description="Mean review rating, 0.0 if unreviewed")


class AverageRatingResponse(BaseModel):
    average_rating: float = Field(description="Mean review rating, 0.0 if unreviewed")

    model_config = CAMEL_CASE_CONFIG


class ReviewResponse(BaseModel):
    id: int = Field(description="Sequential review identifier")
    movie_id: int
    reviewer_name: str
    rating: int
    comment: str

    model_config = CAMEL_CASE_CONFIG
