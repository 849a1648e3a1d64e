"""Request logging middleware: one line per request with status and timing."""

import logging
import time

from fastapi import FastAPI, Request, status

logger = logging.getLogger(__name__)


def register_request_logging(app: FastAPI) -> None:

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        # Unhandled errors still get a line; the catch-all handler answers 500
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            logger.info(
                f"{request.method} {request.url.path} {status_code} {duration_ms}ms",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": status_code,
                    "duration_ms": duration_ms,
                },
            )
