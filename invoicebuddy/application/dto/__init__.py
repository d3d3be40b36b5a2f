"""Data transfer objects."""

from invoicebuddy.application.dto.requests import (
    CustomerRequest,
    InvoiceItemRequest,
    InvoiceRequest,
    ProductRequest,
)
from invoicebuddy.application.dto.responses import (
    ErrorResponse,
    HealthResponse,
    SuccessResponse,
)

__all__ = [
    "CustomerRequest",
    "ProductRequest",
    "InvoiceRequest",
    "InvoiceItemRequest",
    "SuccessResponse",
    "HealthResponse",
    "ErrorResponse",
]
