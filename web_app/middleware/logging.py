"""Request logging middleware."""

import logging
import time
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from slugcast.common.logging_config import REQUEST_LOGGER


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request on the slugcast.web logger.

    Server errors and requests slower than slow_request_ms are logged at
    WARNING, everything else at INFO.
    """

    def __init__(self, app, logger: Optional[logging.Logger] = None, slow_request_ms: float = 1000.0):
        super().__init__(app)
        self.logger = logger or logging.getLogger(REQUEST_LOGGER)
        self.slow_request_ms = slow_request_ms

    async def dispatch(self, request: Request, call_next: Callable):
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            self.logger.exception(f"{request.method} {request.url.path} raised")
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        level = logging.INFO
        if response.status_code >= 500 or duration_ms > self.slow_request_ms:
            level = logging.WARNING

        client_ip = request.client.host if request.client else "-"
        self.logger.log(
            level,
            f"{request.method} {request.url.path} {response.status_code} "
            f"{duration_ms:.1f}ms client={client_ip}",
        )
        return response
