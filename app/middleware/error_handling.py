"""
Error handling for the deployment gateway.

Route handlers convert the errors they expect into JSON envelopes
themselves. This module covers the rest: malformed request bodies and
anything unexpected, so that no failure escapes as a non-JSON response.
"""

import logging
import traceback
from typing import Callable

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from app.schemas.errors import ErrorResponse

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Catches exceptions no handler dealt with, logs them and returns the
    standard error envelope with status 500.
    """

    def __init__(self, app, enable_error_logging: bool = True):
        """
        Args:
            app: FastAPI application instance
            enable_error_logging: Whether to log full tracebacks
        """
        super().__init__(app)
        self.enable_error_logging = enable_error_logging

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            return self._handle_unexpected_exception(request, e)

    def _handle_unexpected_exception(self, request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"💥 Unexpected error for {request.method} {request.url.path}: {str(exc)}")

        if self.enable_error_logging:
            logger.error(f"📋 Full traceback:\n{traceback.format_exc()}")

        error_response = ErrorResponse(error="Internal server error", details=type(exc).__name__)
        return JSONResponse(status_code=500, content=error_response.to_content())


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report unparseable request bodies as 400 in the standard envelope."""
    logger.warning(f"🚨 Invalid request for {request.method} {request.url.path}: {exc.errors()}")
    error_response = ErrorResponse(error="Invalid request body")
    return JSONResponse(status_code=400, content=error_response.to_content())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown paths, wrong methods and the like, in the standard envelope."""
    logger.warning(
        f"🚨 HTTP {exc.status_code} error for {request.method} {request.url.path}: {exc.detail}"
    )
    error_response = ErrorResponse(error=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.to_content(),
        headers=getattr(exc, "headers", None),
    )
