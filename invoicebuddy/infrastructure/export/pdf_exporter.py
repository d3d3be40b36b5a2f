"""
Report PDF exporter using fpdf2.

Renders a titled, paginated table with alternating row shading and a
page-numbered footer.
"""

from datetime import datetime
from typing import Any

from fpdf import FPDF
from fpdf.enums import XPos, YPos
from fpdf.errors import FPDFException

from invoicebuddy.config.settings import PdfSettings, ReportSettings, get_settings
from invoicebuddy.core.exceptions import ExportError
from invoicebuddy.core.interfaces import IReportExporter


def _latin1(text: str) -> str:
    """Core PDF fonts are latin-1 only; replace anything else with '?'."""
    return text.encode("latin-1", "replace").decode("latin-1")


class _ReportPdf(FPDF):
    """FPDF subclass that renders a footer on every page."""

    def __init__(self, pdf_settings: PdfSettings) -> None:
        super().__init__()
        self._pdf_settings = pdf_settings
        self._generation_date = datetime.now().strftime("%Y-%m-%d %H:%M")

    def footer(self) -> None:
        """Render footer with page numbers and generation date."""
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.cell(0, 5, _latin1(self._pdf_settings.footer_text), align="L")
        self.set_x(-60)
        self.cell(
            0,
            5,
            f"Page {self.page_no()} of {{nb}} | {self._generation_date}",
            align="R",
        )


class PdfReportExporter(IReportExporter):
    """Renders report rows into a PDF table."""

    extension = "pdf"
    media_type = "application/pdf"

    def __init__(
        self,
        pdf_settings: PdfSettings | None = None,
        report_settings: ReportSettings | None = None,
    ) -> None:
        settings = get_settings()
        self._settings = pdf_settings or settings.pdf
        self._currency = (report_settings or settings.report).currency_symbol

    def export(
        self,
        title: str,
        rows: list[dict[str, Any]],
        summary: list[str] | None = None,
    ) -> bytes:
        try:
            pdf = _ReportPdf(self._settings)
            pdf.alias_nb_pages()
            pdf.set_auto_page_break(auto=True, margin=20)
            pdf.add_page()

            self._render_header(pdf, title, summary or [])
            self._render_table(pdf, rows)

            return bytes(pdf.output())
        except (FPDFException, ValueError) as e:
            raise ExportError("pdf", str(e)) from e

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def _render_header(self, pdf: FPDF, title: str, summary: list[str]) -> None:
        pdf.set_font("Helvetica", "B", 10)
        pdf.cell(
            0, 5, _latin1(self._settings.company_name),
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        pdf.ln(2)

        pdf.set_font("Helvetica", "B", 18)
        pdf.cell(0, 12, _latin1(title), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        pdf.set_font("Helvetica", "", 11)
        pdf.cell(
            0, 7, f"Generated on: {datetime.now():%Y-%m-%d}",
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        for line in summary:
            pdf.cell(0, 7, _latin1(line), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(4)

    def _render_table(self, pdf: FPDF, rows: list[dict[str, Any]]) -> None:
        """Render rows with a shaded header and alternating row fill."""
        if not rows:
            pdf.set_font("Helvetica", "I", 10)
            pdf.cell(0, 8, "No data", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            return

        headers = list(rows[0].keys())
        col_width = pdf.epw / len(headers)

        pdf.set_font("Helvetica", "B", 9)
        pdf.set_fill_color(70, 70, 70)
        pdf.set_text_color(255, 255, 255)
        for header in headers:
            pdf.cell(col_width, 7, _latin1(header), border=1, fill=True, align="C")
        pdf.ln()
        pdf.set_text_color(0, 0, 0)

        pdf.set_font("Helvetica", "", 8)
        for idx, row in enumerate(rows, 1):
            fill = idx % 2 == 0
            if fill:
                pdf.set_fill_color(240, 240, 240)
            for header in headers:
                value = row.get(header)
                text = self._fit(pdf, self._format(value), col_width - 2)
                align = "R" if isinstance(value, (int, float)) else "L"
                pdf.cell(col_width, 6, text, border=1, align=align, fill=fill)
            pdf.ln()

    def _format(self, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, float):
            return _latin1(f"{self._currency}{value:,.2f}")
        return _latin1(str(value))

    @staticmethod
    def _fit(pdf: FPDF, text: str, width: float) -> str:
        """Truncate text so it fits in width."""
        if pdf.get_string_width(text) <= width:
            return text
        while text and pdf.get_string_width(text + "...") > width:
            text = text[:-1]
        return text + "..."
