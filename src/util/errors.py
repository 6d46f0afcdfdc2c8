import logging
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.models.responses import ErrorResponse

logger = logging.getLogger(__name__)


class RelayFailedError(Exception):
    """Raised when the outbound webhook call or its response parsing fails"""

    def __init__(self, detail: str, request_id: Optional[str] = None):
        self.detail = detail
        self.request_id = request_id
        super().__init__(f"Proxy failed: {detail}")


def error_response(
    status_code: int,
    error: str,
    detail: Optional[str] = None,
    headers: Optional[dict] = None,
) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # Keep exception headers so 405 responses still carry Allow
    return error_response(
        exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None)
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            ctx = error.get("ctx") or {}
            return error_response(
                400, "Invalid JSON", detail=str(ctx.get("error", error.get("msg")))
            )
    # Any other body shape has no usable command
    return error_response(400, "Missing command")


async def relay_failed_handler(request: Request, exc: RelayFailedError) -> JSONResponse:
    logger.warning(
        f"Returning 500 for request {exc.request_id} on {request.url.path}: {exc.detail}"
    )
    return error_response(500, "Proxy failed", detail=exc.detail)
