from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import logging
import uuid
import time

logger = logging.getLogger(__name__)

class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request.state.request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        response.headers["X-Request-ID"] = request.state.request_id
        logger.debug(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"in {elapsed_ms:.1f}ms [{request.state.request_id}]"
        )
        return response
