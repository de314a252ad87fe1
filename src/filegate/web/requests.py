"""Request logging for the HTTP layer."""

import logging
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


def _escape(text: str) -> str:
    # Keep one request per log line even when the path carries control characters.
    return "".join(c if c.isprintable() else c.encode("unicode_escape").decode("ascii") for c in text)


def log_incoming(method: str, path: str) -> None:
    """Log the method and path of an incoming request."""
    logger.info("%s request, path: %s", method, _escape(path))


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        log_incoming(request.method, request.url.path)
        return await call_next(request)
