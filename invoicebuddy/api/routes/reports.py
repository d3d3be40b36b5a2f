"""Report endpoints: sales, customer and product views plus file export."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from invoicebuddy.api.dependencies import get_export_report_use_case, get_reports_use_case
from invoicebuddy.application.dto import ErrorResponse
from invoicebuddy.application.use_cases import ExportReportUseCase, GetReportsUseCase
from invoicebuddy.core.entities import CustomerStats, ProductStats, SalesReport
from invoicebuddy.core.services import PeriodFilter

router = APIRouter(prefix="/api/reports", tags=["reports"])


def get_period_filter(
    period: str | None = Query(default=None, description="daily, monthly or yearly"),
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
) -> PeriodFilter:
    """Sales window from query parameters. Unknown periods select everything."""
    return PeriodFilter.from_query(period, start_date, end_date)


@router.get("/sales", response_model=SalesReport)
async def sales(
    period: PeriodFilter = Depends(get_period_filter),
    use_case: GetReportsUseCase = Depends(get_reports_use_case),
) -> SalesReport:
    """Revenue and matching invoices for the selected window."""
    return await use_case.sales(period)


@router.get("/customers", response_model=list[CustomerStats])
async def customers(
    use_case: GetReportsUseCase = Depends(get_reports_use_case),
) -> list[CustomerStats]:
    """Invoice count, amount and invoices for every customer."""
    return await use_case.customers()


@router.get("/products", response_model=list[ProductStats])
async def products(
    use_case: GetReportsUseCase = Depends(get_reports_use_case),
) -> list[ProductStats]:
    """Quantity sold, revenue and line count for every product."""
    return await use_case.products()


@router.get(
    "/{kind}/export",
    responses={
        200: {"description": "Report file download"},
        400: {"model": ErrorResponse, "description": "Unsupported format"},
        404: {"model": ErrorResponse, "description": "Unknown report"},
    },
)
async def export_report(
    kind: str,
    export_format: str = Query(default="pdf", alias="format"),
    period: PeriodFilter = Depends(get_period_filter),
    use_case: ExportReportUseCase = Depends(get_export_report_use_case),
) -> Response:
    """Download a report as PDF or XLSX. Sales filters apply to the sales report."""
    result = await use_case.execute(kind, export_format.lower(), period)

    return Response(
        content=result.content,
        media_type=result.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{result.filename}"',
        },
    )
