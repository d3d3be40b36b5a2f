"""
Export Report Use Case.

Flattens a report into rows and renders them as a PDF or XLSX file.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from invoicebuddy.application.use_cases.get_reports import GetReportsUseCase
from invoicebuddy.config import get_logger, get_settings
from invoicebuddy.core.exceptions import UnknownReportError, UnsupportedExportFormatError
from invoicebuddy.core.interfaces import IReportExporter
from invoicebuddy.core.services import PeriodFilter, Unfiltered

logger = get_logger(__name__)

SALES = "sales"
CUSTOMERS = "customers"
PRODUCTS = "products"
REPORT_KINDS = [SALES, CUSTOMERS, PRODUCTS]


@dataclass
class ReportExportResult:
    """Rendered export file and metadata."""

    content: bytes
    filename: str
    media_type: str
    rows: int


def _default_exporters() -> dict[str, IReportExporter]:
    from invoicebuddy.infrastructure.export import PdfReportExporter, XlsxReportExporter

    return {"pdf": PdfReportExporter(), "xlsx": XlsxReportExporter()}


class ExportReportUseCase:
    """
    Use case for downloadable reports.

    Flow:
    1. Build the report through GetReportsUseCase
    2. Flatten it into rows with display column names
    3. Render rows with the exporter for the requested format
    """

    def __init__(
        self,
        reports: GetReportsUseCase | None = None,
        exporters: dict[str, IReportExporter] | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self._reports = reports or GetReportsUseCase()
        self._exporters = exporters if exporters is not None else _default_exporters()
        self._clock = clock

    async def execute(
        self,
        kind: str,
        export_format: str,
        period: PeriodFilter | None = None,
    ) -> ReportExportResult:
        """
        Render a report file.

        Raises:
            UnknownReportError: kind is not sales, customers or products.
            UnsupportedExportFormatError: no exporter for export_format.
        """
        if kind not in REPORT_KINDS:
            raise UnknownReportError(kind, REPORT_KINDS)
        exporter = self._exporters.get(export_format)
        if exporter is None:
            raise UnsupportedExportFormatError(export_format, sorted(self._exporters))

        rows, summary = await self._rows(kind, period or Unfiltered())
        content = exporter.export(f"{kind.capitalize()} Report", rows, summary)
        filename = f"{kind}-report-{int(self._clock() * 1000)}.{exporter.extension}"

        logger.info(
            "report_exported",
            kind=kind,
            format=export_format,
            rows=len(rows),
            file_size=len(content),
        )

        return ReportExportResult(
            content=content,
            filename=filename,
            media_type=exporter.media_type,
            rows=len(rows),
        )

    async def _rows(
        self, kind: str, period: PeriodFilter
    ) -> tuple[list[dict[str, Any]], list[str]]:
        symbol = get_settings().report.currency_symbol

        if kind == SALES:
            report = await self._reports.sales(period)
            rows = [
                {
                    "Invoice Number": inv.invoice_number,
                    "Customer": inv.customer_name,
                    "Date": inv.invoice_date.isoformat(),
                    "Amount": inv.total,
                }
                for inv in report.invoices
            ]
            summary = [
                f"Total Revenue: {symbol}{report.total_revenue:,.2f}",
                f"Total Invoices: {report.total_invoices}",
            ]
            return rows, summary

        if kind == CUSTOMERS:
            customers = await self._reports.customers()
            rows = [
                {
                    "Customer Name": c.name,
                    "Email": c.email,
                    "Total Invoices": c.total_invoices,
                    "Total Amount": c.total_amount,
                }
                for c in customers
            ]
            return rows, []

        products = await self._reports.products()
        rows = [
            {
                "Product Name": p.name,
                "Category": p.category,
                "Total Sold": p.total_quantity,
                "Total Revenue": p.total_revenue,
            }
            for p in products
        ]
        return rows, []
