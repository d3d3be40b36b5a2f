"""
Report aggregation over the invoice collection.

All reports are single-pass reductions over in-memory lists. Nothing
here touches storage.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from invoicebuddy.core.entities import (
    Customer,
    CustomerStats,
    DashboardSummary,
    Invoice,
    Product,
    ProductStats,
    SalesReport,
)

DAILY = "daily"
MONTHLY = "monthly"
YEARLY = "yearly"


class PeriodFilter(ABC):
    """Time window selector for the sales report."""

    @abstractmethod
    def matches(self, invoice: Invoice) -> bool:
        ...

    @staticmethod
    def from_query(
        period: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        today: date | None = None,
    ) -> "PeriodFilter":
        """
        Build the filter for the sales report query parameters.

        A named period wins over an explicit range. An unknown period with
        no complete range selects every invoice.
        """
        today = today or date.today()
        if period == DAILY:
            return Daily(today)
        if period == MONTHLY:
            return Monthly(today)
        if period == YEARLY:
            return Yearly(today)
        if start_date and end_date:
            return DateRange(start_date, end_date)
        return Unfiltered()


@dataclass(frozen=True)
class Daily(PeriodFilter):
    today: date

    def matches(self, invoice: Invoice) -> bool:
        return invoice.invoice_date == self.today


@dataclass(frozen=True)
class Monthly(PeriodFilter):
    today: date

    def matches(self, invoice: Invoice) -> bool:
        d = invoice.invoice_date
        return (d.year, d.month) == (self.today.year, self.today.month)


@dataclass(frozen=True)
class Yearly(PeriodFilter):
    today: date

    def matches(self, invoice: Invoice) -> bool:
        return invoice.invoice_date.year == self.today.year


@dataclass(frozen=True)
class DateRange(PeriodFilter):
    """Inclusive range compared as ISO date strings."""

    start: str
    end: str

    def matches(self, invoice: Invoice) -> bool:
        return self.start <= invoice.invoice_date.isoformat() <= self.end


@dataclass(frozen=True)
class Unfiltered(PeriodFilter):
    def matches(self, invoice: Invoice) -> bool:
        return True


def sales_report(invoices: Sequence[Invoice], period: PeriodFilter) -> SalesReport:
    """Invoices in the period with their revenue and count."""
    selected = [inv for inv in invoices if period.matches(inv)]
    return SalesReport(
        total_revenue=sum((inv.total for inv in selected), 0.0),
        total_invoices=len(selected),
        invoices=selected,
    )


def customer_report(
    customers: Sequence[Customer], invoices: Sequence[Invoice]
) -> list[CustomerStats]:
    """One row per customer, including customers without invoices."""
    by_customer: dict[str, list[Invoice]] = {}
    for inv in invoices:
        by_customer.setdefault(inv.customer_id, []).append(inv)

    rows = []
    for customer in customers:
        matched = by_customer.get(customer.id, [])
        rows.append(
            CustomerStats.model_validate(
                {
                    **customer.model_dump(),
                    "total_invoices": len(matched),
                    "total_amount": sum((inv.total for inv in matched), 0.0),
                    "invoices": matched,
                }
            )
        )
    return rows


def product_report(
    products: Sequence[Product], invoices: Sequence[Invoice]
) -> list[ProductStats]:
    """
    One row per product with quantity, revenue and invoice count.

    invoice_count grows once per line item, so an invoice listing the
    same product on two lines counts twice.
    """
    stats: dict[str, dict[str, float]] = {}
    for inv in invoices:
        for item in inv.items:
            entry = stats.setdefault(
                item.product_id,
                {"total_quantity": 0, "total_revenue": 0.0, "invoice_count": 0},
            )
            entry["total_quantity"] += item.quantity
            entry["total_revenue"] += item.quantity * item.price
            entry["invoice_count"] += 1

    zero = {"total_quantity": 0, "total_revenue": 0.0, "invoice_count": 0}
    return [
        ProductStats.model_validate({**product.model_dump(), **stats.get(product.id, zero)})
        for product in products
    ]


def dashboard_summary(
    customers: Sequence[Customer],
    products: Sequence[Product],
    invoices: Sequence[Invoice],
    recent_limit: int = 5,
) -> DashboardSummary:
    """Collection counts, overall revenue and the newest invoices."""

    def created(inv: Invoice) -> float:
        return inv.created_at.timestamp() if inv.created_at else float("-inf")

    recent = sorted(invoices, key=created, reverse=True)[:recent_limit]
    return DashboardSummary(
        total_invoices=len(invoices),
        total_customers=len(customers),
        total_products=len(products),
        total_revenue=sum((inv.total for inv in invoices), 0.0),
        recent_invoices=recent,
    )
