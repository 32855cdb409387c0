"""
Error types and the FastAPI handlers that turn them into responses.

- ValidationError -> 400 with a descriptive message
- UpstreamError   -> 500, details stay in the logs
- anything else   -> 500, details stay in the logs

Unexpected exceptions are caught by `UnhandledErrorMiddleware`. It must be
added before `CORSMiddleware` so error responses still carry CORS headers.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger("ytproxy.errors")

INTERNAL_ERROR_BODY = {"error": "Internal server error"}


class ValidationError(Exception):
    """A required query parameter was missing or empty after normalization."""

    def __init__(self, param: str):
        self.param = param
        self.message = f"{param} is required and cannot be empty"
        super().__init__(self.message)


class UpstreamError(Exception):
    """The YouTube Data API call failed (transport, status or payload)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Turns any exception the routes did not handle into a bare 500."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(f"Unhandled exception on {request.url.path}: {e}", exc_info=True)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=INTERNAL_ERROR_BODY,
            )


def register_error_handlers(app: FastAPI) -> None:
    app.add_middleware(UnhandledErrorMiddleware)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning(f"Rejected {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": exc.message},
        )

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError):
        logger.error(
            f"Upstream failure on {request.url.path}: {exc.message}",
            extra={"upstream_status": exc.status_code},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=INTERNAL_ERROR_BODY,
        )
