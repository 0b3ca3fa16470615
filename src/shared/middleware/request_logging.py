"""Access log for every HTTP request."""

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.shared.logging.loguru_io import Logger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - start) * 1000
            Logger.base.error(
                f'{request.method} {request.url.path} -> 500 ({elapsed_ms:.1f}ms)'
            )
            raise

        elapsed_ms = (time.perf_counter() - start) * 1000
        message = f'{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)'
        if response.status_code >= 500:
            Logger.base.error(message)
        elif response.status_code >= 400:
            Logger.base.warning(message)
        else:
            Logger.base.info(message)
        return response
