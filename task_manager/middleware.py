"""HTTP middleware: CORS headers, preflight handling and the access log."""

import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

ALLOWED_METHODS = "GET, POST, PATCH, DELETE, OPTIONS"
ALLOWED_HEADERS = "Content-Type"

CallNext = Callable[[Request], Awaitable[Response]]


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Open CORS policy for the browser frontend.

    Every response is tagged with a wildcard origin and a JSON content type.
    OPTIONS requests are answered here for any path, without reaching the
    router, so preflights never hit a 404 or 405.
    """

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=200, media_type="application/json")
        else:
            response = await call_next(request)

        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Methods"] = ALLOWED_METHODS
        response.headers["Access-Control-Allow-Headers"] = ALLOWED_HEADERS
        if "content-type" not in response.headers:
            response.headers["Content-Type"] = "application/json"
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log one line per request with method, path, status and duration."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.exception(
                "%s %s failed after %.2fms",
                request.method,
                request.url.path,
                duration_ms,
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "%s %s %d completed in %.2fms",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response
