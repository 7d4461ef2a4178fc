"""
Movie Library API - Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the test suite.
How:   Every endpoint test gets a brand-new application from create_app(),
       so stores, id counters and settings never leak between tests.

Fixtures:
    ├── test_settings: Settings isolated from the environment and .env
    ├── app: Fresh FastAPI app built with test_settings
    ├── test_client: HTTPX AsyncClient talking to `app` through ASGITransport
    └── movie_request / review_request: Sample request bodies (camelCase)
"""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set before movielib is imported so the module-level settings singleton
# doesn't flood test output.
os.environ.setdefault("LOG_LEVEL", "WARNING")

from movielib.config import Settings  # noqa: E402
from movielib.main import create_app  # noqa: E402


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, log_level="WARNING")


@pytest.fixture
def app(test_settings):
    return create_app(settings=test_settings)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def movie_request():
    return {"title": "Inception", "director": "Nolan", "releaseYear": 2010}


@pytest.fixture
def review_request():
    return {"reviewerName": "Alice", "rating": 5, "comment": "Great movie!"}
