"""Report export infrastructure."""

from invoicebuddy.infrastructure.export.pdf_exporter import PdfReportExporter
from invoicebuddy.infrastructure.export.xlsx_exporter import XlsxReportExporter

__all__ = [
    "PdfReportExporter",
    "XlsxReportExporter",
]
