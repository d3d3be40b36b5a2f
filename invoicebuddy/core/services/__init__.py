"""Core domain services."""

from invoicebuddy.core.services.entity_service import EntityService, TimestampIdGenerator
from invoicebuddy.core.services.invoice_calculator import (
    InvoiceTotals,
    calculate_invoice,
    summarize,
)
from invoicebuddy.core.services.report_aggregator import (
    Daily,
    DateRange,
    Monthly,
    PeriodFilter,
    Unfiltered,
    Yearly,
    customer_report,
    dashboard_summary,
    product_report,
    sales_report,
)

__all__ = [
    "EntityService",
    "TimestampIdGenerator",
    "InvoiceTotals",
    "calculate_invoice",
    "summarize",
    "PeriodFilter",
    "Daily",
    "Monthly",
    "Yearly",
    "DateRange",
    "Unfiltered",
    "sales_report",
    "customer_report",
    "product_report",
    "dashboard_summary",
]
