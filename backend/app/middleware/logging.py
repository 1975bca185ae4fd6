"""
Notes API Backend: Request Logging Middleware
=============================================

What:  One access-log line per HTTP request on the `notes.access` logger.
How:   Times the downstream call with `time.perf_counter` and picks the log
       level from the response status.

Example line:
    2024-01-15T12:00:00 [INFO] notes.access [a1b2c3d4]: POST /api/notes 201 0.8ms from 127.0.0.1

Levels:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Request bodies are never logged; the notes route logs the title on create.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("notes.access")

# Polled by monitors; logging it would drown everything else.
QUIET_PATHS = frozenset({"/api/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status, duration and client address for each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms from %s",
            method,
            path,
            status,
            duration_ms,
            client_ip,
            extra={
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
