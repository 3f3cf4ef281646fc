"""
Request ID tracking.

Every request gets an ID, taken from the incoming X-Request-ID header or
generated, which is kept in a context variable for log records and error
responses and echoed back in the response headers.
"""
import logging
import time
import uuid
from contextvars import ContextVar
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id() -> Optional[str]:
    """Get the ID of the request being handled, if any."""
    return _request_id.get()


def add_request_id(logger, method_name: str, event_dict: dict) -> dict:
    """structlog processor adding the current request ID to every log event."""
    event_dict.setdefault("request_id", get_request_id() or "-")
    return event_dict


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware assigning a request ID and logging request timing."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        token = _request_id.set(request_id)
        start = time.perf_counter()
        try:
            response = await call_next(request)
            duration_ms = (time.perf_counter() - start) * 1000
            logger.debug(
                f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.1f}ms)"
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            _request_id.reset(token)
