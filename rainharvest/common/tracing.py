"""Request tracing for the HTTP API.

Callers may send an `x-request-id` header with each request. The middleware
stores it, together with basic request and response details, in context
variables so log records emitted while handling the request can be
correlated.
"""

import contextvars
from logging import getLogger

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = getLogger(__name__)

TRACE_HEADER = "x-request-id"

# Request-scoped tracing data
ctx_trace_id: contextvars.ContextVar[str] = contextvars.ContextVar("trace_id", default="")
ctx_request: contextvars.ContextVar[dict | None] = contextvars.ContextVar("request", default=None)
ctx_response: contextvars.ContextVar[dict | None] = contextvars.ContextVar(
    "response", default=None
)


class TraceIdMiddleware(BaseHTTPMiddleware):
    """Propagates the `x-request-id` header into the logging context.

    The trace id is echoed back on the response so clients can quote it when
    reporting a problem with an assessment.
    """

    async def dispatch(self, request: Request, call_next):
        req_trace_id = request.headers.get(TRACE_HEADER)
        if req_trace_id:
            ctx_trace_id.set(req_trace_id)

        ctx_request.set({"url": str(request.url), "method": request.method})

        response = await call_next(request)
        ctx_response.set({"status_code": response.status_code})
        if req_trace_id:
            response.headers[TRACE_HEADER] = req_trace_id
        return response
