"""
Error handling for the HTTP API.

Every failure leaves the API as an ErrorResponse body:
- error: the plain message, e.g. "Customer not found"
- error_code: machine-readable code, e.g. CUSTOMER_NOT_FOUND
- hint: what the caller can do about it
"""

import traceback
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from invoicebuddy.application.dto.responses import ErrorResponse
from invoicebuddy.config import get_logger
from invoicebuddy.core.exceptions import (
    ConfigurationError,
    InvoiceBuddyError,
    RecordNotFoundError,
    ReportError,
    StorageError,
    UnknownReportError,
    ValidationError,
)

logger = get_logger(__name__)

# Checked in order, so subclasses come before their bases.
STATUS_BY_EXCEPTION: tuple[tuple[type[Exception], int], ...] = (
    (RecordNotFoundError, status.HTTP_404_NOT_FOUND),
    (UnknownReportError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ReportError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (StorageError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (ConfigurationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)

HINTS: dict[str, str] = {
    "CUSTOMER_NOT_FOUND": "GET /api/customers lists the existing customer ids.",
    "PRODUCT_NOT_FOUND": "GET /api/products lists the existing product ids.",
    "INVOICE_NOT_FOUND": "GET /api/invoices lists the existing invoice ids.",
    "REPORT_NOT_FOUND": "Export one of: sales, customers, products.",
    "UNSUPPORTED_EXPORT_FORMAT": "Pass format=pdf or format=xlsx.",
    "VALIDATION_ERROR": "Fix the listed fields and resend the request.",
    "STORAGE_WRITE_ERROR": "The data directory is not writable; nothing was saved.",
    "EXPORT_FAILED": "The report could not be rendered; see the server log.",
    "NOT_FOUND": "No such endpoint.",
}

FALLBACK_HINTS: dict[int, str] = {
    400: "The request was rejected; check its parameters.",
    404: "Nothing exists at this path.",
    500: "Unexpected server error; see the server log.",
}


def _hint(error_code: str, status_code: int) -> str | None:
    return HINTS.get(error_code) or FALLBACK_HINTS.get(status_code)


def status_for(exc: Exception) -> int:
    """HTTP status for a raised exception; unknown types are server errors."""
    for exc_type, code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _respond(
    request: Request,
    status_code: int,
    error: str,
    error_code: str,
    detail: str | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        error=error,
        error_code=error_code,
        hint=_hint(error_code, status_code),
        detail=detail,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def _exception_response(request: Request, exc: Exception) -> JSONResponse:
    status_code = status_for(exc)
    if isinstance(exc, InvoiceBuddyError):
        error, error_code = exc.message, exc.code
    else:
        error, error_code = "Internal server error", "INTERNAL_ERROR"

    event = logger.error if status_code >= 500 else logger.info
    event(
        "request_error",
        request_id=getattr(request.state, "request_id", None),
        method=request.method,
        path=request.url.path,
        status=status_code,
        error_code=error_code,
        error=str(exc),
        traceback=traceback.format_exc() if status_code >= 500 else None,
    )
    return _respond(request, status_code, error, error_code)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Last-resort handler for exceptions that escaped the routes.

    The message of an unexpected exception is logged but not sent to the
    client.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            return _exception_response(request, e)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register handlers for domain, validation and routing errors."""

    @app.exception_handler(InvoiceBuddyError)
    async def domain_error_handler(request: Request, exc: InvoiceBuddyError) -> JSONResponse:
        return _exception_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Body or query did not match the schema: 422 with one entry per field."""
        problems = []
        for error in exc.errors():
            # Drop the leading "body"/"query" segment: items.0.quantity
            field = ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0])
            problems.append(f"{field}: {error['msg']}")

        logger.info("request_invalid", path=request.url.path, problems=problems)
        return _respond(
            request,
            422,
            "Request validation failed",
            "VALIDATION_ERROR",
            detail="; ".join(problems),
        )

    @app.exception_handler(HTTPException)
    async def http_error_handler(request: Request, exc: HTTPException) -> JSONResponse:
        error_code = "NOT_FOUND" if exc.status_code == 404 else "HTTP_ERROR"
        return _respond(request, exc.status_code, str(exc.detail), error_code)
