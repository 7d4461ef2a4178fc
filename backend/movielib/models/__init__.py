"""In-memory record types owned by the stores."""

from movielib.models.movie import Movie, Review

__all__ = ["Movie", "Review"]
