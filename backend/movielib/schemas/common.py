"""
Movie Library API - Shared Response Schemas
===========================================

What:  Error envelope and health check payloads shared by every router.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "malformed_input", "not_found")
        message: Human-readable description
        details: Optional extra context (e.g., which field failed)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "validation_error",
            "message": "Rating must be between 1 and 5",
            "details": {"field": "rating", "rating": 6},
            "request_id": "1f3c9a2b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    movies: int = Field(description="Number of movies currently stored")
    reviews: int = Field(description="Number of reviews currently stored")
    uptime_seconds: float = Field(description="Seconds since service started")
