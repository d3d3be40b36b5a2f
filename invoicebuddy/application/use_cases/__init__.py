"""Application use cases."""

from invoicebuddy.application.use_cases.export_report import (
    REPORT_KINDS,
    ExportReportUseCase,
    ReportExportResult,
)
from invoicebuddy.application.use_cases.get_reports import GetReportsUseCase
from invoicebuddy.application.use_cases.save_invoice import (
    CreateInvoiceUseCase,
    UpdateInvoiceUseCase,
)

__all__ = [
    "CreateInvoiceUseCase",
    "UpdateInvoiceUseCase",
    "GetReportsUseCase",
    "ExportReportUseCase",
    "ReportExportResult",
    "REPORT_KINDS",
]
