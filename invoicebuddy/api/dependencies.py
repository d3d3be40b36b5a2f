"""
Dependency injection container for FastAPI.

Provides store, service and use case instances to route handlers.
Tests replace ``get_store`` through ``app.dependency_overrides``.
"""

from fastapi import Depends

from invoicebuddy.application.services import (
    get_customer_service,
    get_invoice_service,
    get_product_service,
)
from invoicebuddy.application.use_cases import (
    CreateInvoiceUseCase,
    ExportReportUseCase,
    GetReportsUseCase,
    UpdateInvoiceUseCase,
)
from invoicebuddy.core.entities import Customer, Invoice, Product
from invoicebuddy.core.interfaces import IRecordStore
from invoicebuddy.core.services import EntityService
from invoicebuddy.infrastructure.storage.jsonfile import get_record_store


async def get_store() -> IRecordStore:
    """Get the shared record store."""
    return await get_record_store()


# Entity services
def get_customers(store: IRecordStore = Depends(get_store)) -> EntityService[Customer]:
    return get_customer_service(store)


def get_products(store: IRecordStore = Depends(get_store)) -> EntityService[Product]:
    return get_product_service(store)


def get_invoices(store: IRecordStore = Depends(get_store)) -> EntityService[Invoice]:
    return get_invoice_service(store)


# Use cases
def get_create_invoice_use_case(
    store: IRecordStore = Depends(get_store),
) -> CreateInvoiceUseCase:
    return CreateInvoiceUseCase(store=store)


def get_update_invoice_use_case(
    store: IRecordStore = Depends(get_store),
) -> UpdateInvoiceUseCase:
    return UpdateInvoiceUseCase(store=store)


def get_reports_use_case(
    store: IRecordStore = Depends(get_store),
) -> GetReportsUseCase:
    return GetReportsUseCase(store=store)


def get_export_report_use_case(
    reports: GetReportsUseCase = Depends(get_reports_use_case),
) -> ExportReportUseCase:
    """Export use case with the PDF and XLSX exporters."""
    return ExportReportUseCase(reports=reports)
