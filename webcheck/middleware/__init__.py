"""Webcheck middleware components."""

from webcheck.middleware.base import WebcheckMiddleware
from webcheck.middleware.errors import ErrorHandlingMiddleware
from webcheck.middleware.logging import LoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
    "WebcheckMiddleware",
]
