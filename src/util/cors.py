from typing import Mapping, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from src.config.constants import CORS_HEADERS


class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """
    Attach permissive cross-origin headers to every response.

    Unlike Starlette's CORSMiddleware, headers are added whether or not
    the request carries an Origin header, including on error responses.
    OPTIONS requests are answered here with an empty 200 and never
    reach a route.
    """

    def __init__(self, app: ASGIApp, headers: Optional[Mapping[str, str]] = None):
        super().__init__(app)
        self.headers = dict(CORS_HEADERS if headers is None else headers)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)

        response.headers.update(self.headers)
        return response
