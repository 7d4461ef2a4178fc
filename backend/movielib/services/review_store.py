"""
Movie Library API - Review Store
================================

What:  In-memory collection of Review records with their own id sequence.
How:   Same shape as MovieStore: an insertion-ordered list, a forward-only
       counter, and a lock around every operation.

Validation:
    The store accepts whatever it is given. Rating range and movie existence
    are checked by the route before add() is called.
"""

import logging
import threading
from typing import List

from movielib.models.movie import Review

logger = logging.getLogger(__name__)


class ReviewStore:
    """Owns the review records and the review id sequence."""

    def __init__(self) -> None:
        self._reviews: List[Review] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def list_by_movie(self, movie_id: int) -> List[Review]:
        """
        Reviews for a movie, in insertion order.

        An unknown movie id yields an empty list, same as a movie with no
        reviews.
        """
        with self._lock:
            return [r for r in self._reviews if r.movie_id == movie_id]

    def add(self, movie_id: int, reviewer_name: str, rating: int, comment: str) -> Review:
        with self._lock:
            review = Review(
                id=self._next_id,
                movie_id=movie_id,
                reviewer_name=reviewer_name,
                rating=rating,
                comment=comment,
            )
            self._next_id += 1
            self._reviews.append(review)
        logger.info("Review created: %d for movie %d (rating=%d)", review.id, movie_id, rating)
        return review

    def delete(self, review_id: int) -> bool:
        with self._lock:
            before = len(self._reviews)
            self._reviews = [r for r in self._reviews if r.id != review_id]
            removed = len(self._reviews) != before
        if removed:
            logger.info("Review deleted: %d", review_id)
        return removed

    def average_rating(self, movie_id: int) -> float:
        """
        Arithmetic mean of the movie's ratings.

        Returns:
            0.0 when the movie has no reviews. This is a default, not a
            "movie not found" signal.
        """
        ratings = [r.rating for r in self.list_by_movie(movie_id)]
        if not ratings:
            return 0.0
        return sum(ratings) / len(ratings)

    def count(self) -> int:
        with self._lock:
            return len(self._reviews)
