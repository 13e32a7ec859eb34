"""
HTTP middleware for the product API.

Starlette runs the last-added middleware first, so create_app() adds them
in reverse of the request order:

    RequestLogMiddleware -> APIKeyMiddleware -> ErrorHandlerMiddleware -> routes
"""

import logging
from datetime import datetime, timezone
from typing import Iterable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from .auth import AuthPolicy
from .core import INTERNAL_ERROR_MESSAGE, UNAUTHORIZED_MESSAGE

request_logger = logging.getLogger("app.requests")
logger = logging.getLogger(__name__)


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        # path only: the query string carries the api key
        request_logger.info(
            "%s %s request for '%s'",
            datetime.now(timezone.utc).isoformat(),
            request.method,
            request.url.path,
        )
        return await call_next(request)


class APIKeyMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, policy: AuthPolicy, public_paths: Iterable[str] = ("/",)):
        super().__init__(app)
        self.policy = policy
        self.public_paths = frozenset(public_paths)

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path in self.public_paths:
            return await call_next(request)

        if not self.policy.authorize(request):
            return JSONResponse(status_code=401, content={"error": UNAUTHORIZED_MESSAGE})

        return await call_next(request)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception("unhandled error on %s %s", request.method, request.url.path)
            return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})
