"""
Request ID middleware.

Assigns every request an ID (or keeps the caller's), binds it as the logging
correlation ID while the request is served, and writes a one-line access log.
"""

import logging
import secrets
import time
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ..monitoring.logging import correlation_context

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Request ID middleware.

    Adds unique request ID for tracing.
    """

    async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
        """Add request ID to request, logging context and response."""
        request_id = request.headers.get(REQUEST_ID_HEADER)
        if not request_id:
            request_id = f"req_{secrets.token_urlsafe(16)}"

        request.state.request_id = request_id

        with correlation_context(request_id):
            start_time = time.perf_counter()
            response = await call_next(request)
            duration_ms = (time.perf_counter() - start_time) * 1000

            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code}",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": round(duration_ms, 3),
                },
            )

        response.headers[REQUEST_ID_HEADER] = request_id

        return response  # type: ignore[no-any-return]
