"""
ContactBook Backend: Wildcard CORS Headers
==========================================

What:  Puts the allow-any-origin CORS headers on every response.
How:   Starlette's CORSMiddleware only answers requests that carry an Origin
       header. With `*` configured, this middleware fills in
       Access-Control-Allow-Origin, -Allow-Methods and -Allow-Headers on
       whatever response is missing them. Values already set by
       CORSMiddleware (preflight answers) are left alone.

Installed by create_app() only when CORS_ORIGINS is `*`.
"""

from typing import Sequence

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp


class WildcardCORSHeadersMiddleware(BaseHTTPMiddleware):

    def __init__(self, app: ASGIApp, allow_methods: Sequence[str], allow_headers: Sequence[str]) -> None:
        super().__init__(app)
        self.default_headers = {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": ", ".join(allow_methods),
            "Access-Control-Allow-Headers": ", ".join(allow_headers),
        }

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for key, value in self.default_headers.items():
            response.headers.setdefault(key, value)
        return response
