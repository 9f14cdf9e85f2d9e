"""Per-request timing."""

import logging
import time
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

RESPONSE_TIME_HEADER = "X-Response-Time"


class TimingMiddleware(BaseHTTPMiddleware):
    """Times each request, logs the duration and reports it in a response header.

    The duration is logged against the matched route template
    (``/api/property-monies/{money_id}``) when there is one, so timings
    for the same endpoint group together.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        route = request.scope.get("route")
        endpoint = getattr(route, "path", request.url.path)
        logger.debug(
            "%s %s -> %d in %.2f ms", request.method, endpoint, response.status_code, duration_ms
        )
        response.headers[RESPONSE_TIME_HEADER] = f"{duration_ms:.2f}ms"
        return response
