"""Request access logging middleware."""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from htmx_prototype.lib.logger import get_logger

logger = get_logger("htmx_prototype.access")


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log method and path of every request before it is dispatched."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        logger.info(
            "%s: %s",
            request.method,
            request.url.path,
            extra={"method": request.method, "path": request.url.path},
        )
        return await call_next(request)
