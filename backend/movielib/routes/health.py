"""
Movie Library API - Health Check Route
======================================

What:  Health check endpoint for monitoring and container probes.
How:   Reports version, uptime and how many records each store holds.
       There are no external dependencies to probe, so the service is
       "healthy" whenever it can answer.
"""

import logging
import time

from fastapi import APIRouter, Depends

from movielib import __version__
from movielib.dependencies import get_movie_store, get_review_store
from movielib.schemas.common import HealthResponse
from movielib.services import MovieStore, ReviewStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    movies: MovieStore = Depends(get_movie_store),
    reviews: ReviewStore = Depends(get_review_store),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        movies=movies.count(),
        reviews=reviews.count(),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
