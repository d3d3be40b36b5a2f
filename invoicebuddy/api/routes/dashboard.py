"""Dashboard endpoint."""

from fastapi import APIRouter, Depends

from invoicebuddy.api.dependencies import get_reports_use_case
from invoicebuddy.application.use_cases import GetReportsUseCase
from invoicebuddy.core.entities import DashboardSummary

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardSummary)
async def dashboard(
    use_case: GetReportsUseCase = Depends(get_reports_use_case),
) -> DashboardSummary:
    """Record counts, total revenue and the most recently created invoices."""
    return await use_case.dashboard()
