"""HTTP middleware enforcing the cross-origin allow-list.

A blocked origin is answered with a plain-text 403, not a 500 from the
generic error handler, and the response carries no envelope.
"""

from __future__ import annotations

from collections.abc import Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp

from shopcart_api.logging_utils import create_logger

CORS_REJECTION_MESSAGE = "Not allowed by CORS"

logger = create_logger("cors")


class OriginAllowListMiddleware(BaseHTTPMiddleware):
    """Reject requests whose ``Origin`` header is not allow-listed.

    Requests without an ``Origin`` header (curl, server-to-server clients)
    always pass.
    """

    def __init__(self, app: ASGIApp, *, allowed_origins: Iterable[str]) -> None:
        super().__init__(app)
        self._allowed_origins = frozenset(allowed_origins)

    def is_allowed(self, origin: str | None) -> bool:
        return not origin or origin in self._allowed_origins

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        origin = request.headers.get("origin")
        if not self.is_allowed(origin):
            logger.warning("cors_blocked", origin=origin, path=request.url.path)
            return PlainTextResponse(CORS_REJECTION_MESSAGE, status_code=403)
        return await call_next(request)
