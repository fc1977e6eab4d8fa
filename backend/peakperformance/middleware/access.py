"""
PeakPerformance Backend — Access Middleware
=============================================

What:  Request correlation IDs plus one access-log line per request.
Why:   Persistence failures answer with a fixed generic message; the real
       cause only exists in the server log. The ID in `X-Request-ID` is what
       connects a client's 500 to the logged database error.
How:   Accepts a client-supplied `X-Request-ID` or generates a short one,
       stores it in a ContextVar for the request's log records, times the
       handler, and logs at a level chosen by status class.

What we log vs what we DON'T log (privacy):
    ✅ Log: method, path, status, duration, IP, request ID
    ❌ Don't log: request bodies (user records carry passwords and contact data)
"""

import logging
import time
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("peakperformance.access")

# Coroutine-local: concurrent requests on the same thread each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"
QUIET_PATHS = frozenset({"/health"})


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class AccessMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with an ID and logs its outcome.

    Typical durations:
        - GET /api/<resource>: 5-50ms (single table scan)
        - POST /api/usuarios: 50-150ms (bcrypt dominates)
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        token = request_id_var.set(rid)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid

        path = request.url.path
        if path not in QUIET_PATHS:
            duration_ms = (time.perf_counter() - started) * 1000
            client_ip = request.client.host if request.client else "unknown"
            logger.log(
                _level_for(response.status_code),
                "%s %s %d %.1fms [%s] from %s",
                request.method,
                path,
                response.status_code,
                duration_ms,
                rid,
                client_ip,
            )

        return response
