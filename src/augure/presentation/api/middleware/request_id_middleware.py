"""
Request correlation middleware.
"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from augure.infrastructure.monitoring.logger import (
    get_logger,
    get_request_id,
    reset_request_id,
    set_request_id,
)

REQUEST_ID_HEADER = "X-Request-ID"

logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Bind an X-Request-ID to the request context and echo it back.

    A caller-supplied id is reused; otherwise a uuid4 is generated. The
    id is unbound once the response is produced.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        token = set_request_id(request.headers.get(REQUEST_ID_HEADER))
        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = get_request_id()
            logger.debug(
                "%s %s -> %d",
                request.method,
                request.url.path,
                response.status_code,
                extra={"duration_ms": round((time.perf_counter() - started) * 1000, 2)},
            )
            return response
        finally:
            reset_request_id(token)
