import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from storefront import storefront_logger as logger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per request.

    The body is never read here: the webhook route needs the untouched bytes
    to verify Stripe's signature.
    """

    async def dispatch(self, request: Request, call_next):
        client_ip = request.client.host if request.client else "unknown"
        started = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{client_ip} {request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
        )
        return response
