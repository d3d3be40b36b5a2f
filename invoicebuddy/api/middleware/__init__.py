"""API middleware."""

from invoicebuddy.api.middleware.error_handler import ErrorHandlerMiddleware
from invoicebuddy.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
