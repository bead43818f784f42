"""HTTP middleware for the shop API."""

from src.presentation.routers.api.middleware.trace_middleware import (
    TRACE_ID_HEADER,
    TraceMiddleware,
    get_trace_id,
)

__all__ = ["TRACE_ID_HEADER", "TraceMiddleware", "get_trace_id"]
