"""Request id propagation for logs and responses."""

import uuid
from contextvars import ContextVar
from typing import Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 128

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id() -> Optional[str]:
    return request_id_var.get()


def _incoming_request_id(request: Request) -> str:
    """Reuse the caller's id when it is sane, otherwise mint one."""
    candidate = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if candidate and len(candidate) <= MAX_REQUEST_ID_LENGTH and candidate.isprintable():
        return candidate
    return uuid.uuid4().hex


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with an id.

    The id is bound into structlog's context for every log line emitted
    while the request is handled, exposed to error handlers through
    get_request_id(), and echoed back in the X-Request-ID header.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = _incoming_request_id(request)
        token = request_id_var.set(request_id)

        try:
            with structlog.contextvars.bound_contextvars(request_id=request_id):
                response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
