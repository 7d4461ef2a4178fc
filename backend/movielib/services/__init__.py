# Services package init
"""
Movie Library API - Services Layer
==================================

What:  The in-memory stores sitting behind the routes.
How:   Each store owns its records and id counter. An instance of each is
       created per application in create_app() and handed to routes via
       FastAPI dependencies (movielib.dependencies).

Service Inventory:
    - MovieStore:  Movie records, search, update, delete
    - ReviewStore: Review records, per-movie listing, average rating
"""

from movielib.services.movie_store import MovieStore
from movielib.services.review_store import ReviewStore

__all__ = ["MovieStore", "ReviewStore"]
