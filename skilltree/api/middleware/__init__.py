"""
ASGI middleware.
"""

from skilltree.api.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIdMiddleware,
    accept_request_id,
)

__all__ = ["REQUEST_ID_HEADER", "RequestIdMiddleware", "accept_request_id"]
