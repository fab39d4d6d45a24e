"""Structured access logging middleware.

Emits one log record per request.  The request metadata travels as record
attributes (``extra=``) rather than inside the message text:

    ``method``, ``path``, ``status``, ``duration_ms``, ``request_id``, ``client``

:class:`~src.logging_config.JsonFormatter` lifts these attributes to top-level
keys of the emitted JSON line.  Successful and client-error responses are
logged at ``INFO``; server errors (5xx) at ``WARNING`` so they stand out in the
platform log viewer.  The ``request_id`` attribute comes from
:data:`~src.middleware.request_id.REQUEST_ID_CTX` and matches the
``X-Request-Id`` header when :class:`~src.middleware.request_id.RequestIdMiddleware`
is wired outermost.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.middleware.request_id import REQUEST_ID_CTX

logger = logging.getLogger(__name__)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Emit a structured access-log record after every HTTP request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response: Response = await call_next(request)
        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s %d",
            request.method,
            request.url.path,
            response.status_code,
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": duration_ms,
                "request_id": REQUEST_ID_CTX.get(),
                "client": request.client.host if request.client else None,
            },
        )
        return response
