"""Tests for the PDF and XLSX report exporters."""

from io import BytesIO

import pytest
from openpyxl import load_workbook

from invoicebuddy.config.settings import PdfSettings, ReportSettings
from invoicebuddy.infrastructure.export import PdfReportExporter, XlsxReportExporter

ROWS = [
    {"Invoice Number": "INV-1", "Customer": "Acme", "Date": "2024-06-15", "Amount": 28.0},
    {"Invoice Number": "INV-2", "Customer": "Café Ünïcode ✓", "Date": "2024-06-16", "Amount": 12.5},
]


class TestPdfReportExporter:
    @pytest.fixture
    def exporter(self) -> PdfReportExporter:
        return PdfReportExporter(
            pdf_settings=PdfSettings(company_name="Test Co", footer_text="Test footer"),
            report_settings=ReportSettings(currency_symbol="$"),
        )

    def test_renders_pdf(self, exporter):
        content = exporter.export("Sales Report", ROWS, ["Total Revenue: $40.50"])
        assert content.startswith(b"%PDF")

    def test_renders_empty_report(self, exporter):
        assert exporter.export("Products Report", []).startswith(b"%PDF")

    def test_many_rows_paginate(self, exporter):
        rows = [{"Name": f"Customer {i}", "Total": float(i)} for i in range(200)]
        content = exporter.export("Customers Report", rows)
        assert content.startswith(b"%PDF")

    def test_metadata(self, exporter):
        assert exporter.extension == "pdf"
        assert exporter.media_type == "application/pdf"


class TestXlsxReportExporter:
    def test_single_sheet_named_report(self):
        content = XlsxReportExporter().export("Sales Report", ROWS)

        workbook = load_workbook(BytesIO(content))
        assert workbook.sheetnames == ["Report"]

    def test_header_and_rows(self):
        content = XlsxReportExporter().export("Sales Report", ROWS)

        sheet = load_workbook(BytesIO(content))["Report"]
        values = list(sheet.iter_rows(values_only=True))
        assert values[0] == ("Invoice Number", "Customer", "Date", "Amount")
        assert values[1] == ("INV-1", "Acme", "2024-06-15", 28)
        assert values[2][1] == "Café Ünïcode ✓"
        assert len(values) == 3

    def test_header_is_bold(self):
        content = XlsxReportExporter().export("Sales Report", ROWS)
        sheet = load_workbook(BytesIO(content))["Report"]
        assert sheet["A1"].font.bold

    def test_empty_rows(self):
        content = XlsxReportExporter().export("Products Report", [])
        sheet = load_workbook(BytesIO(content))["Report"]
        assert sheet.max_row == 1
        assert sheet["A1"].value is None
