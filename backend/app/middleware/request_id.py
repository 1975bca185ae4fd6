"""
Notes API Backend: Request ID Middleware
========================================

What:  Tags every request with a short correlation id and returns it in the
       `X-Request-ID` response header.
How:   The id is stored in a ContextVar for the duration of the request;
       `RequestIDLogFilter` copies it onto every log record so the
       `%(request_id)s` placeholder in the log format is always populated.
Who:   Installed on the app by `app.main.create_app`.

A client that already sends `X-Request-ID` (e.g. the browser form correlating
its own error banners) gets the same value echoed back; otherwise an 8-char
slice of a UUID4 is generated.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Longer client-supplied values are replaced, not truncated.
MAX_REQUEST_ID_LENGTH = 64

# Coroutine-local: concurrent requests on one event loop each see their own id.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def _new_request_id() -> str:
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns `request.state.request_id` and echoes it in the response headers."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER, "").strip()
        if not rid or len(rid) > MAX_REQUEST_ID_LENGTH:
            rid = _new_request_id()

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response


class RequestIDLogFilter(logging.Filter):
    """Attach the current request id (or "-" outside a request) to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = request_id_var.get("") or "-"
        return True
