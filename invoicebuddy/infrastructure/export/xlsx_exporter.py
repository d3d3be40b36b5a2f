"""Report spreadsheet exporter using openpyxl."""

from io import BytesIO
from typing import Any

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from invoicebuddy.core.interfaces import IReportExporter

SHEET_NAME = "Report"


class XlsxReportExporter(IReportExporter):
    """
    Writes report rows into a single-sheet workbook.

    The first row holds the column names taken from the keys of the first
    record; summary lines are not written, the sheet holds the table only.
    """

    extension = "xlsx"
    media_type = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

    def export(
        self,
        title: str,
        rows: list[dict[str, Any]],
        summary: list[str] | None = None,
    ) -> bytes:
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = SHEET_NAME

        if rows:
            headers = list(rows[0].keys())
            sheet.append(headers)
            for cell in sheet[1]:
                cell.font = Font(bold=True)
            for row in rows:
                sheet.append([row.get(h) for h in headers])

            for idx, header in enumerate(headers, 1):
                width = max(len(str(header)), *(len(str(r.get(header, ""))) for r in rows))
                sheet.column_dimensions[get_column_letter(idx)].width = min(width + 2, 50)

        buffer = BytesIO()
        workbook.save(buffer)
        return buffer.getvalue()
