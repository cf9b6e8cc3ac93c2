"""
Middleware package for the deployment gateway.

This package contains middleware components for handling cross-cutting
concerns such as request logging and error handling.
"""

from .error_handling import (
    ErrorHandlingMiddleware,
    http_exception_handler,
    request_validation_exception_handler,
)
from .logging import LoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "http_exception_handler",
    "LoggingMiddleware",
    "request_validation_exception_handler",
]
