"""Create / Update Invoice Use Cases: price lines and compute totals."""

from typing import Any

from invoicebuddy.application.dto.requests import InvoiceRequest
from invoicebuddy.application.services import (
    get_customer_service,
    get_invoice_service,
    get_product_service,
)
from invoicebuddy.config import get_logger
from invoicebuddy.core.entities import Invoice, Product
from invoicebuddy.core.interfaces import IRecordStore
from invoicebuddy.core.services import InvoiceTotals, calculate_invoice, summarize

logger = get_logger(__name__)

# Computed by the server, never taken from the request body.
DERIVED_FIELDS = frozenset({"customerName", "subtotal", "tax", "discount", "total"})


def _money_fields(totals: InvoiceTotals, tax_rate: float) -> dict[str, Any]:
    return {
        "items": [item.model_dump(mode="json", by_alias=True) for item in totals.items],
        "taxRate": tax_rate,
        "subtotal": totals.subtotal,
        "tax": totals.tax,
        "discount": totals.discount,
        "total": totals.total,
    }


def _request_fields(request: InvoiceRequest) -> dict[str, Any]:
    fields = request.to_fields()
    for key in DERIVED_FIELDS | {"items", "discountAmount"}:
        fields.pop(key, None)
    return fields


class _InvoiceUseCase:
    def __init__(self, store: IRecordStore | None = None):
        self._store = store

    async def _get_store(self) -> IRecordStore:
        if self._store is None:
            from invoicebuddy.infrastructure.storage.jsonfile import get_record_store

            self._store = await get_record_store()
        return self._store

    async def _catalog(self, store: IRecordStore) -> dict[str, Product]:
        products = await get_product_service(store).list_all()
        return {p.id: p for p in products}

    async def _customer_name(self, store: IRecordStore, customer_id: str | None) -> str:
        if not customer_id:
            return ""
        for customer in await get_customer_service(store).list_all():
            if customer.id == customer_id:
                return customer.name
        logger.warning("invoice_customer_missing", customer_id=customer_id)
        return ""


class CreateInvoiceUseCase(_InvoiceUseCase):
    """Create an invoice with catalog-priced lines and computed totals."""

    async def execute(self, request: InvoiceRequest) -> Invoice:
        logger.info(
            "create_invoice_started",
            invoice_number=request.invoice_number,
            items=len(request.items or []),
        )

        store = await self._get_store()
        catalog = await self._catalog(store)
        tax_rate = request.tax_rate or 0.0

        totals = calculate_invoice(
            [(line.product_id, line.quantity) for line in request.items or []],
            tax_rate=tax_rate,
            discount=request.discount_amount or 0.0,
            catalog=catalog,
        )

        fields = _request_fields(request)
        fields.update(_money_fields(totals, tax_rate))
        fields["customerName"] = await self._customer_name(store, request.customer_id)

        invoice = await get_invoice_service(store).create(fields)

        logger.info(
            "create_invoice_complete",
            invoice_id=invoice.id,
            subtotal=invoice.subtotal,
            total=invoice.total,
        )
        return invoice


class UpdateInvoiceUseCase(_InvoiceUseCase):
    """
    Partially update an invoice.

    Totals are recomputed when items, tax_rate or discount_amount is sent.
    Without new items the stored line snapshots are kept as they are.
    """

    async def execute(self, invoice_id: str, request: InvoiceRequest) -> Invoice:
        store = await self._get_store()

        catalog = await self._catalog(store) if request.items is not None else {}
        customer_name = None
        if request.customer_id is not None:
            customer_name = await self._customer_name(store, request.customer_id)

        def prepare(existing: Invoice, fields: dict[str, Any]) -> dict[str, Any]:
            if customer_name is not None:
                fields["customerName"] = customer_name
            if not request.recalculates():
                return fields

            tax_rate = (
                request.tax_rate
                if request.tax_rate is not None
                else existing.effective_tax_rate()
            )
            discount = (
                request.discount_amount
                if request.discount_amount is not None
                else existing.discount
            )
            if request.items is not None:
                totals = calculate_invoice(
                    [(line.product_id, line.quantity) for line in request.items],
                    tax_rate=tax_rate,
                    discount=discount,
                    catalog=catalog,
                )
            else:
                totals = summarize(existing.items, tax_rate, discount)

            fields.update(_money_fields(totals, tax_rate))
            return fields

        invoice = await get_invoice_service(store).update(
            invoice_id, _request_fields(request), prepare=prepare
        )

        logger.info(
            "update_invoice_complete",
            invoice_id=invoice.id,
            recalculated=request.recalculates(),
            total=invoice.total,
        )
        return invoice
