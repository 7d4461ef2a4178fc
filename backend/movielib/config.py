"""
Movie Library API - Application Configuration
=============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py; routes read the active settings from app.state.
When:  Loaded once at module import time. Tests build their own Settings
       and pass them to create_app().
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development; there are
    no secrets to configure.
    """

    # ── Server ────────────────────────────────────────────────────────────
    app_host: str = Field(default="0.0.0.0")
    app_port: int = Field(default=8000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # What: Request paths left out of the access log (comma-separated)
    access_log_skip_paths: str = Field(default="/health")

    @property
    def access_log_skip_paths_list(self) -> List[str]:
        return [path.strip() for path in self.access_log_skip_paths.split(",") if path.strip()]

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs (split by cors_origins_list)
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── API Behavior ──────────────────────────────────────────────────────
    # What: Plain-text body returned by GET /
    welcome_message: str = Field(default="🎬 Welcome to Movie Library API!")

    # What: Status returned when a review is posted for a movie that does not exist.
    # 400 keeps compatibility with existing clients; 404 matches the other
    # endpoints' treatment of absent resources.
    review_missing_movie_status: int = Field(default=400)

    @field_validator("review_missing_movie_status")
    @classmethod
    def validate_missing_movie_status(cls, v: int) -> int:
        if v not in (400, 404):
            raise ValueError(
                f"Invalid review_missing_movie_status {v}. Must be 400 or 404"
            )
        return v

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


settings = Settings()
