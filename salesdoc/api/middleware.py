"""Request ID tracking and access logging middleware"""
import time
import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
import structlog


logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-Id"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a request ID to the request state, the log context and the response"""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its status and latency"""

    async def dispatch(self, request: Request, call_next) -> Response:
        started = time.perf_counter()
        method = request.method
        path = request.url.path

        logger.info("request_started", method=method, path=path)

        response = await call_next(request)

        latency_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "request_completed",
            method=method,
            path=path,
            status_code=response.status_code,
            latency_ms=round(latency_ms, 2),
        )
        return response
