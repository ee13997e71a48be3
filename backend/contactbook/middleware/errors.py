"""
ContactBook Backend: Unhandled Error Middleware
===============================================

What:  Turns an exception no handler claimed into a JSON 500 response.
How:   Sits innermost in the middleware chain, so the response still passes
       back through CORS, logging and request ID like any other.

Starlette answers an `Exception` handler from ServerErrorMiddleware, outside
every user middleware; such responses would lack the CORS and X-Request-ID
headers. The app-level catch-all handler remains for failures raised by the
middleware themselves.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from contactbook.middleware.request_id import request_id_var

logger = logging.getLogger("contactbook.errors")


def unexpected_error_response(rid: str) -> JSONResponse:
    """The generic 500 body; the stack trace is logged, never returned."""
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again or contact support.",
            "request_id": rid,
        },
    )


class UnhandledErrorMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            rid = request_id_var.get("")
            logger.error(
                "[%s] Unexpected error on %s %s: %s",
                rid,
                request.method,
                request.url.path,
                str(exc),
                exc_info=True,
            )
            return unexpected_error_response(rid)
