"""
Request ID middleware for request correlation.

Every request gets an id (the client's X-Request-ID when it is usable, a fresh
UUID otherwise). The id is echoed on the response and put in a context var so
tracker, checkpoint and judge logs of that request share it.
"""

import re
import time
import uuid
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from skilltree.logging_config import get_logger, request_id_var

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
SLOW_REQUEST_MS = 1000

# Checkpoint attempts wait on the external judge; only flag them past its timeout
SLOW_JUDGE_REQUEST_MS = 30000
_JUDGE_PATH_SUFFIX = "/checkpoints/attempt"

_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")


def accept_request_id(incoming: Optional[str]) -> str:
    """Client id if it is short and header-safe, otherwise a new UUID."""
    if incoming and _VALID_REQUEST_ID.match(incoming):
        return incoming
    return str(uuid.uuid4())


def _bearer_user(request: Request) -> Optional[str]:
    auth = request.headers.get("authorization", "")
    scheme, _, token = auth.partition(" ")
    if scheme.lower() == "bearer" and token.strip():
        return token.strip()
    return None


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Assign a request id and log slow requests with the learner they served."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = accept_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        try:
            start = time.perf_counter()
            response = await call_next(request)
            duration_ms = (time.perf_counter() - start) * 1000
            response.headers[REQUEST_ID_HEADER] = request_id

            path = request.url.path
            threshold = SLOW_JUDGE_REQUEST_MS if path.endswith(_JUDGE_PATH_SUFFIX) else SLOW_REQUEST_MS
            if duration_ms > threshold:
                logger.warning(
                    "Slow request",
                    extra={
                        "path": path,
                        "method": request.method,
                        "status_code": response.status_code,
                        "user_id": _bearer_user(request),
                        "duration_ms": round(duration_ms, 1),
                    },
                )
            return response
        finally:
            request_id_var.reset(token)
