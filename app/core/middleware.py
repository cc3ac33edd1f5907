# middleware.py
"""
Middleware for request logging.
"""
from typing import Callable
from time import perf_counter
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from app.core.logging import logger

SLOW_REQUEST_SECONDS = 2.0


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every request."""

    async def dispatch(self, request: Request, call_next: Callable):
        start = perf_counter()
        client_ip = request.client.host if request.client else None

        response = await call_next(request)

        duration = perf_counter() - start

        logger.info(
            f"Request: {request.method} {request.url.path} | "
            f"Status: {response.status_code} | "
            f"Duration: {duration:.3f}s | "
            f"IP: {client_ip}"
        )

        if duration > SLOW_REQUEST_SECONDS:
            logger.warning(
                f"Slow request detected: {request.method} {request.url.path} | "
                f"Duration: {duration:.3f}s"
            )

        if response.status_code in (400, 404):
            logger.warning(
                f"Client error status: {response.status_code} | "
                f"Path: {request.url.path} | "
                f"IP: {client_ip}"
            )

        return response
