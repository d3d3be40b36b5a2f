"""
Domain exceptions for the InvoiceBuddy application.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class InvoiceBuddyError(Exception):
    """Base exception for all InvoiceBuddy errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.message,
            "error_code": self.code,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(InvoiceBuddyError):
    """Base exception for storage operations."""

    pass


class StorageWriteError(StorageError):
    """Persisting a collection failed."""

    def __init__(self, collection: str, error: str):
        super().__init__(
            f"Failed to write collection '{collection}': {error}",
            code="STORAGE_WRITE_ERROR",
            details={"collection": collection, "error": error},
        )


class RecordNotFoundError(InvoiceBuddyError):
    """Record not found in its collection."""

    entity = "Record"

    def __init__(self, record_id: str):
        super().__init__(
            f"{self.entity} not found",
            code=f"{self.entity.upper()}_NOT_FOUND",
            details={"id": record_id},
        )
        self.record_id = record_id


class CustomerNotFoundError(RecordNotFoundError):
    """Customer not found."""

    entity = "Customer"


class ProductNotFoundError(RecordNotFoundError):
    """Product not found."""

    entity = "Product"


class InvoiceNotFoundError(RecordNotFoundError):
    """Invoice not found."""

    entity = "Invoice"


# Validation Exceptions
class ValidationError(InvoiceBuddyError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value else None,
            },
        )


# Report Exceptions
class ReportError(InvoiceBuddyError):
    """Base exception for report operations."""

    pass


class UnknownReportError(ReportError):
    """Requested report kind does not exist."""

    def __init__(self, kind: str, available: list[str]):
        super().__init__(
            f"Unknown report '{kind}'. Available: {', '.join(available)}",
            code="REPORT_NOT_FOUND",
            details={"kind": kind, "available": available},
        )


class ExportError(ReportError):
    """Rendering an export file failed."""

    def __init__(self, export_format: str, reason: str):
        super().__init__(
            f"Failed to export {export_format}: {reason}",
            code="EXPORT_FAILED",
            details={"format": export_format, "reason": reason},
        )


class UnsupportedExportFormatError(ValidationError):
    """Export format is not supported."""

    def __init__(self, export_format: str, allowed: list[str]):
        super().__init__(
            field="format",
            message=f"Unsupported export format '{export_format}'. Allowed: {', '.join(allowed)}",
            value=export_format,
        )
        self.code = "UNSUPPORTED_EXPORT_FORMAT"
        self.details.update({"allowed": allowed})


class ConfigurationError(InvoiceBuddyError):
    """Configuration error."""

    pass
