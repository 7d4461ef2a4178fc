"""
Movie Library API - ReviewStore Unit Tests
==========================================

What:  Tests for the in-memory review store: listing per movie, deletion,
       average rating, and the independence of its id sequence.
"""

import pytest

from movielib.models.movie import Review
from movielib.services.review_store import ReviewStore


class TestReviewStoreAdd:

    def setup_method(self):
        self.store = ReviewStore()

    def test_add_assigns_sequential_ids(self):
        first = self.store.add(1, "Alice", 5, "Great")
        second = self.store.add(2, "Bob", 3, "Fine")

        assert first == Review(id=1, movie_id=1, reviewer_name="Alice", rating=5, comment="Great")
        assert second.id == 2

    def test_add_performs_no_validation(self):
        """Range and movie checks belong to the route, not the store."""
        review = self.store.add(999, "Mallory", 42, "")
        assert review.rating == 42
        assert review.movie_id == 999


class TestReviewStoreListing:

    def setup_method(self):
        self.store = ReviewStore()
        self.a = self.store.add(1, "Alice", 5, "Great")
        self.b = self.store.add(2, "Bob", 2, "Meh")
        self.c = self.store.add(1, "Carol", 4, "Good")

    def test_list_by_movie_in_insertion_order(self):
        assert self.store.list_by_movie(1) == [self.a, self.c]

    def test_list_by_unknown_movie_is_empty(self):
        assert self.store.list_by_movie(77) == []

    def test_delete_then_list(self):
        assert self.store.delete(self.a.id) is True
        assert self.store.list_by_movie(1) == [self.c]

    def test_delete_twice(self):
        assert self.store.delete(self.b.id) is True
        assert self.store.delete(self.b.id) is False

    def test_ids_not_reused_after_delete(self):
        self.store.delete(self.c.id)
        assert self.store.add(3, "Dan", 1, "Bad").id == 4


class TestReviewStoreAverageRating:

    def setup_method(self):
        self.store = ReviewStore()

    def test_no_reviews_is_exactly_zero(self):
        assert self.store.average_rating(1) == 0.0

    def test_average_of_five_and_four(self):
        self.store.add(1, "Alice", 5, "")
        self.store.add(1, "Bob", 4, "")
        assert self.store.average_rating(1) == 4.5

    def test_average_ignores_other_movies(self):
        self.store.add(1, "Alice", 1, "")
        self.store.add(2, "Bob", 5, "")
        self.store.add(1, "Carol", 2, "")
        assert self.store.average_rating(1) == pytest.approx(1.5)

    def test_average_is_float(self):
        self.store.add(1, "Alice", 3, "")
        assert isinstance(self.store.average_rating(1), float)
