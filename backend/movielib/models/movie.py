"""
Movie Library API - Stored Records
==================================

What:  The record types held by MovieStore and ReviewStore.
How:   Frozen dataclasses. Updating a movie swaps in a new record with the
       same id, so a record handed out by a store never changes under the
       caller.

Field naming:
    Records use Python snake_case. The camelCase wire names (releaseYear,
    movieId, reviewerName) live in the Pydantic schemas only.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Movie:
    """A catalog entry. `id` is assigned by MovieStore and never reused."""

    id: int
    title: str
    director: str
    release_year: int


@dataclass(frozen=True)
class Review:
    """
    A rating (1..5) and comment attached to a movie.

    `movie_id` is checked against MovieStore only when the review is created.
    Deleting the movie later leaves the review in place.
    """

    id: int
    movie_id: int
    reviewer_name: str
    rating: int
    comment: str
