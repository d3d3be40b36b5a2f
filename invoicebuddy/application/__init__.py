"""
Application layer - Use cases, DTOs, and service factories.

API handlers go through this layer; it coordinates the record store
with the core services.
"""

from invoicebuddy.application.dto import (
    CustomerRequest,
    ErrorResponse,
    HealthResponse,
    InvoiceItemRequest,
    InvoiceRequest,
    ProductRequest,
    SuccessResponse,
)
from invoicebuddy.application.services import (
    get_customer_service,
    get_invoice_service,
    get_product_service,
)
from invoicebuddy.application.use_cases import (
    CreateInvoiceUseCase,
    ExportReportUseCase,
    GetReportsUseCase,
    UpdateInvoiceUseCase,
)

__all__ = [
    # Request DTOs
    "CustomerRequest",
    "ProductRequest",
    "InvoiceRequest",
    "InvoiceItemRequest",
    # Response DTOs
    "SuccessResponse",
    "HealthResponse",
    "ErrorResponse",
    # Use Cases
    "CreateInvoiceUseCase",
    "UpdateInvoiceUseCase",
    "GetReportsUseCase",
    "ExportReportUseCase",
    # Service factories
    "get_customer_service",
    "get_product_service",
    "get_invoice_service",
]
