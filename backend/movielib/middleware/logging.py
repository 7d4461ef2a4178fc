"""
Movie Library API - Request Logging Middleware
==============================================

What:  One access-log line per HTTP request on the "movielib.access" logger.
How:   After the handler runs, reads the route FastAPI matched from the
       request scope and logs its path template with the path parameters,
       so GET /movies/1 and GET /movies/2 group under /movies/{movie_id}.
       Unmatched requests fall back to the raw path.
When:  Runs inside RequestIDMiddleware, so the request ID is already set.

Log levels follow the status code:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Example line:
    PUT /movies/{movie_id} {'movie_id': '3'} 404 0.8ms [1f3c9a2b]
"""

import logging
import time
from typing import Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from movielib.middleware.request_id import request_id_var

logger = logging.getLogger("movielib.access")


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Access log keyed by route template.

    Args:
        skip_paths: Raw request paths that are never logged
                    (Settings.access_log_skip_paths).
    """

    def __init__(self, app: ASGIApp, skip_paths: Iterable[str] = ()) -> None:
        super().__init__(app)
        self.skip_paths = frozenset(skip_paths)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.skip_paths:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        # The router fills these into the shared scope while handling the request.
        route = request.scope.get("route")
        template = getattr(route, "path", request.url.path)
        path_params = dict(request.scope.get("path_params") or {})
        rid = request_id_var.get("")
        status = response.status_code

        logger.log(
            level_for_status(status),
            "%s %s %s %d %.1fms [%s]",
            request.method,
            template,
            path_params or "",
            status,
            duration_ms,
            rid,
            extra={
                "request_id": rid,
                "method": request.method,
                "route": template,
                "path_params": path_params,
                "status": status,
                "duration_ms": round(duration_ms, 2),
            },
        )

        return response
