"""Request ID middleware.

Every response carries an ``X-Request-Id`` header.  When the caller (or a
proxy in front of the service) already supplied a well-formed id it is reused
so log lines can be correlated across hops; otherwise a fresh UUID4 is minted.
The id is also published through a ``ContextVar`` so other middleware layers
can read it without touching the raw request object.

Ordering note
-------------
Add this middleware *last* via ``app.add_middleware`` so it is invoked *outermost*
(first-in, last-out) and covers all other layers.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-Id"

# Defaults to "" so consumers never receive ``None``.
REQUEST_ID_CTX: ContextVar[str] = ContextVar("request_id", default="")

# Printable token characters only, bounded length.
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")


def resolve_request_id(incoming: str | None) -> str:
    """Return *incoming* if it is a safe id to echo back, else a new UUID4."""
    if incoming and _VALID_REQUEST_ID.match(incoming):
        return incoming
    return str(uuid.uuid4())


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Propagate or assign the ``X-Request-Id`` header on every HTTP response."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        token = REQUEST_ID_CTX.set(request_id)
        try:
            response: Response = await call_next(request)
        finally:
            REQUEST_ID_CTX.reset(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
