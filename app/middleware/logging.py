"""
Request logging middleware for the deployment gateway.

Logs every request and response with timing so operators can follow which
commands were triggered from where.
"""

import json
import logging
import time
from datetime import datetime
from typing import Any, Callable, Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request/response logging.

    Logs all incoming requests and outgoing responses, including timing
    information, and adds an X-Process-Time header.
    """

    def __init__(self, app, enable_detailed_logging: bool = False):
        """
        Args:
            app: FastAPI application instance
            enable_detailed_logging: Whether to log request details at debug level
        """
        super().__init__(app)
        self.enable_detailed_logging = enable_detailed_logging

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()
        client_ip = request.client.host if request.client else None

        logger.info(f"📥 {request.method} {request.url.path} - {client_ip}")

        if self.enable_detailed_logging:
            logger.debug(
                f"📋 Request details: {json.dumps(self._extract_request_info(request), indent=2)}"
            )

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"💥 {request.method} {request.url.path} - ERROR - {process_time:.3f}s - {str(e)}"
            )
            # Re-raise for the error handling middleware
            raise

        process_time = time.time() - start_time
        logger.info(
            f"📤 {request.method} {request.url.path} - {response.status_code} - "
            f"{process_time:.3f}s"
        )

        response.headers["X-Process-Time"] = f"{process_time:.6f}"
        return response

    def _extract_request_info(self, request: Request) -> Dict[str, Any]:
        sensitive_headers = {"authorization", "cookie", "x-api-key", "x-auth-token"}
        return {
            "method": request.method,
            "path": str(request.url.path),
            "query_params": dict(request.query_params),
            "client_ip": request.client.host if request.client else None,
            "user_agent": request.headers.get("user-agent"),
            "content_type": request.headers.get("content-type"),
            "timestamp": datetime.now().isoformat(),
            "headers": {
                k: v for k, v in request.headers.items() if k.lower() not in sensitive_headers
            },
        }
