"""
Invoice total calculation.

subtotal = sum(quantity * unit price)
tax      = subtotal * tax_rate / 100
total    = subtotal + tax - discount

Values are not rounded here and the total is not floored at zero; a
discount larger than subtotal + tax gives a negative total.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from invoicebuddy.config import get_logger
from invoicebuddy.core.entities.invoice import InvoiceLineItem
from invoicebuddy.core.entities.product import Product

logger = get_logger(__name__)


@dataclass
class InvoiceTotals:
    """Calculated money fields plus the priced line items."""

    subtotal: float
    tax: float
    discount: float
    total: float
    items: list[InvoiceLineItem] = field(default_factory=list)


def calculate_invoice(
    lines: Iterable[tuple[str, int]],
    tax_rate: float,
    discount: float,
    catalog: Mapping[str, Product],
) -> InvoiceTotals:
    """
    Price line items against the catalog and compute totals.

    Args:
        lines: (product_id, quantity) pairs in invoice order.
        tax_rate: Tax percentage applied to the subtotal.
        discount: Absolute amount subtracted from subtotal + tax.
        catalog: Products by id, used for name and unit price snapshots.

    Returns:
        InvoiceTotals. A product missing from the catalog is priced at 0.
    """
    items: list[InvoiceLineItem] = []
    for product_id, quantity in lines:
        product = catalog.get(product_id)
        if product is None:
            logger.warning("invoice_line_product_missing", product_id=product_id)
            name, price = "", 0.0
        else:
            name, price = product.name, product.price

        items.append(
            InvoiceLineItem(
                product_id=product_id,
                product_name=name,
                quantity=quantity,
                price=price,
            )
        )

    return summarize(items, tax_rate, discount)


def summarize(
    items: list[InvoiceLineItem], tax_rate: float, discount: float
) -> InvoiceTotals:
    """Totals for already priced line items."""
    subtotal = sum((item.total for item in items), 0.0)
    tax = subtotal * tax_rate / 100
    total = subtotal + tax - discount

    return InvoiceTotals(
        subtotal=subtotal,
        tax=tax,
        discount=discount,
        total=total,
        items=items,
    )
