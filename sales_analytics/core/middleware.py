"""Request middleware: correlation IDs and per-request outcome logging.

Handlers record what a request produced (number of sellers reported, or the
error code of a rejected dataset) with ``bind_request_outcome``; the
middleware emits it once, on the ``http.request_completed`` event.
"""

import time
import uuid
from collections.abc import Awaitable, Callable
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from sales_analytics.core.logging import get_logger, request_id_ctx

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
_OUTCOME_STATE_KEY = "request_outcome"


def bind_request_outcome(request: Request, **fields: Any) -> None:
    """Attach outcome fields to the request's completion log event."""
    outcome = request_outcome(request)
    outcome.update(fields)
    setattr(request.state, _OUTCOME_STATE_KEY, outcome)


def request_outcome(request: Request) -> dict[str, Any]:
    """Outcome fields bound so far for this request."""
    return dict(getattr(request.state, _OUTCOME_STATE_KEY, {}))


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Correlate log events of one request and summarize its outcome."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        token = request_id_ctx.set(request_id)
        started = time.perf_counter()

        try:
            response = await call_next(request)

            # request.state lives in the ASGI scope, shared with the handlers
            logger.info(
                "http.request_completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
                **request_outcome(request),
            )

            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            request_id_ctx.reset(token)
