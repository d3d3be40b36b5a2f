"""Core domain entities."""

from invoicebuddy.core.entities.base import Record
from invoicebuddy.core.entities.customer import Customer
from invoicebuddy.core.entities.invoice import Invoice, InvoiceLineItem
from invoicebuddy.core.entities.product import Product
from invoicebuddy.core.entities.report import (
    CustomerStats,
    DashboardSummary,
    ProductStats,
    SalesReport,
)

__all__ = [
    "Record",
    "Customer",
    "Product",
    "Invoice",
    "InvoiceLineItem",
    "SalesReport",
    "CustomerStats",
    "ProductStats",
    "DashboardSummary",
]
