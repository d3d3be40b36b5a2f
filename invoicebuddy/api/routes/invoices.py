"""Invoice endpoints."""

from fastapi import APIRouter, Depends

from invoicebuddy.api.dependencies import (
    get_create_invoice_use_case,
    get_invoices,
    get_update_invoice_use_case,
)
from invoicebuddy.application.dto import ErrorResponse, InvoiceRequest, SuccessResponse
from invoicebuddy.application.use_cases import CreateInvoiceUseCase, UpdateInvoiceUseCase
from invoicebuddy.core.entities import Invoice
from invoicebuddy.core.services import EntityService

router = APIRouter(prefix="/api/invoices", tags=["invoices"])


@router.get("", response_model=list[Invoice])
async def list_invoices(
    service: EntityService[Invoice] = Depends(get_invoices),
) -> list[Invoice]:
    """List all invoices in insertion order."""
    return await service.list_all()


@router.post(
    "",
    response_model=Invoice,
    responses={
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def create_invoice(
    request: InvoiceRequest,
    use_case: CreateInvoiceUseCase = Depends(get_create_invoice_use_case),
) -> Invoice:
    """
    Create an invoice.

    Line names and prices are snapshotted from the product catalog and the
    money fields are computed from items, taxRate and discountAmount.
    """
    return await use_case.execute(request)


@router.put(
    "/{invoice_id}",
    response_model=Invoice,
    responses={
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
async def update_invoice(
    invoice_id: str,
    request: InvoiceRequest,
    use_case: UpdateInvoiceUseCase = Depends(get_update_invoice_use_case),
) -> Invoice:
    """Partially update an invoice, recomputing totals when their inputs change."""
    return await use_case.execute(invoice_id, request)


@router.delete("/{invoice_id}", response_model=SuccessResponse)
async def delete_invoice(
    invoice_id: str,
    service: EntityService[Invoice] = Depends(get_invoices),
) -> SuccessResponse:
    await service.delete(invoice_id)
    return SuccessResponse()
