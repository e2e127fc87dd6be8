"""Middleware for adding request details to the logging context."""

import uuid
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.core.common.logging import (
    bind_context,
    clear_context,
    logger,
)

REQUEST_ID_HEADER = "X-Request-ID"


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware for adding request_id, method and path to logging context."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Bind request details for the duration of the request.

        Args:
            request: The incoming request
            call_next: The next middleware or route handler

        Returns:
            Response: The response from the application, carrying the request ID header
        """
        try:
            # Clear any existing context from previous requests
            clear_context()

            request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
            bind_context(request_id=request_id, method=request.method, path=request.url.path)

            response = await call_next(request)

            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info("request_completed", status_code=response.status_code)
            return response

        finally:
            # Always clear context after request is complete to avoid leaking to other requests
            clear_context()
