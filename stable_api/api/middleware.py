"""Request logging middleware."""

import logging
import time

from fastapi import Request

logger = logging.getLogger("stable_api.requests")


async def log_requests(request: Request, call_next):
    """Log method, path, status code and duration of every request.

    Successful (< 400) responses are logged at info, everything else at error.
    """
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000

    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"

    if response.status_code < 400:
        logger.info(
            "Request processed: %s %s -> %s (%.1f ms)",
            request.method,
            path,
            response.status_code,
            elapsed_ms,
        )
    else:
        logger.error(
            "Request failed: %s %s -> %s (%.1f ms)",
            request.method,
            path,
            response.status_code,
            elapsed_ms,
        )
    return response
