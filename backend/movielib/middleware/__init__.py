# Middleware package init
"""
Movie Library API - Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Generate correlation ID for logging and error bodies
    2. Logging: Log request details with the generated request ID
    3. GZip / CORS: Standard Starlette middleware configured in main.py

    The order is reversed for responses, so the request ID header is set
    after the handler has run and the access log sees the final status.
"""
