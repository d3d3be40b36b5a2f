"""Report Use Cases: read collections and run the aggregator."""

from invoicebuddy.application.services import (
    get_customer_service,
    get_invoice_service,
    get_product_service,
)
from invoicebuddy.config import get_logger, get_settings
from invoicebuddy.core.entities import (
    CustomerStats,
    DashboardSummary,
    ProductStats,
    SalesReport,
)
from invoicebuddy.core.interfaces import IRecordStore
from invoicebuddy.core.services import (
    PeriodFilter,
    customer_report,
    dashboard_summary,
    product_report,
    sales_report,
)

logger = get_logger(__name__)


class GetReportsUseCase:
    """Read-only report views. Nothing is persisted."""

    def __init__(self, store: IRecordStore | None = None):
        self._store = store

    async def _get_store(self) -> IRecordStore:
        if self._store is None:
            from invoicebuddy.infrastructure.storage.jsonfile import get_record_store

            self._store = await get_record_store()
        return self._store

    async def sales(self, period: PeriodFilter) -> SalesReport:
        store = await self._get_store()
        invoices = await get_invoice_service(store).list_all()
        report = sales_report(invoices, period)
        logger.info(
            "sales_report_built",
            period=type(period).__name__,
            invoices=report.total_invoices,
            revenue=report.total_revenue,
        )
        return report

    async def customers(self) -> list[CustomerStats]:
        store = await self._get_store()
        customers = await get_customer_service(store).list_all()
        invoices = await get_invoice_service(store).list_all()
        return customer_report(customers, invoices)

    async def products(self) -> list[ProductStats]:
        store = await self._get_store()
        products = await get_product_service(store).list_all()
        invoices = await get_invoice_service(store).list_all()
        return product_report(products, invoices)

    async def dashboard(self) -> DashboardSummary:
        store = await self._get_store()
        return dashboard_summary(
            customers=await get_customer_service(store).list_all(),
            products=await get_product_service(store).list_all(),
            invoices=await get_invoice_service(store).list_all(),
            recent_limit=get_settings().report.recent_invoices_limit,
        )
