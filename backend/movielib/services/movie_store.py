"""
Movie Library API - Movie Store
===============================

What:  In-memory collection of Movie records with sequential integer ids.
How:   A list kept in insertion order plus a counter that only moves forward.
Who:   One instance per application (app.state.movie_store), injected into
       routes through movielib.dependencies.

Concurrency:
    Every operation holds the store's lock. Id assignment and append happen
    under the same acquisition, so two concurrent creates can never receive
    the same id. Nothing is locked across stores.
"""

import logging
import threading
from typing import List, Optional

from movielib.models.movie import Movie

logger = logging.getLogger(__name__)


class MovieStore:
    """
    Owns the movie records and the movie id sequence.

    Missing records are reported as None/False; raising HTTP errors is the
    routing layer's job.
    """

    def __init__(self) -> None:
        self._movies: List[Movie] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def list_all(self) -> List[Movie]:
        """All movies, in insertion order."""
        with self._lock:
            return list(self._movies)

    def get_by_id(self, movie_id: int) -> Optional[Movie]:
        with self._lock:
            return self._find(movie_id)

    def search(self, query: str) -> List[Movie]:
        """
        Case-insensitive substring match against title or director.

        Args:
            query: Non-empty search text. The route rejects empty queries
                   before calling this.
        """
        needle = query.lower()
        with self._lock:
            return [
                movie for movie in self._movies
                if needle in movie.title.lower() or needle in movie.director.lower()
            ]

    def add(self, title: str, director: str, release_year: int) -> Movie:
        with self._lock:
            movie = Movie(
                id=self._next_id,
                title=title,
                director=director,
                release_year=release_year,
            )
            self._next_id += 1
            self._movies.append(movie)
        logger.info("Movie created: %d (%s)", movie.id, movie.title)
        return movie

    def update(
        self, movie_id: int, title: str, director: str, release_year: int
    ) -> Optional[Movie]:
        """
        Replace every field except the id, keeping the movie's position.

        Returns:
            The updated Movie, or None if no movie has this id.
        """
        with self._lock:
            for index, existing in enumerate(self._movies):
                if existing.id == movie_id:
                    updated = Movie(
                        id=movie_id,
                        title=title,
                        director=director,
                        release_year=release_year,
                    )
                    self._movies[index] = updated
                    break
            else:
                return None
        logger.info("Movie updated: %d", movie_id)
        return updated

    def delete(self, movie_id: int) -> bool:
        """
        Remove the movie with this id. Its reviews are left in ReviewStore.

        Returns:
            True if a movie was removed, False if none had this id.
        """
        with self._lock:
            before = len(self._movies)
            self._movies = [m for m in self._movies if m.id != movie_id]
            removed = len(self._movies) != before
        if removed:
            logger.info("Movie deleted: %d", movie_id)
        return removed

    def count(self) -> int:
        with self._lock:
            return len(self._movies)

    def _find(self, movie_id: int) -> Optional[Movie]:
        # Caller holds the lock.
        for movie in self._movies:
            if movie.id == movie_id:
                return movie
        return None
