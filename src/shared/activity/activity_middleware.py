"""Middleware to set the request client in context for activity logging."""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from .activity import clear_request_client, set_request_client


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware that stores the client IP and User-Agent for activity logging."""

    async def dispatch(self, request: Request, call_next) -> Response:
        """Process request and set client context."""
        clear_request_client()

        try:
            ip_address = request.client.host if request.client else None
            set_request_client(ip_address, request.headers.get("user-agent"))

            response: Response = await call_next(request)

            return response
        finally:
            # Always clear context after request
            clear_request_client()
