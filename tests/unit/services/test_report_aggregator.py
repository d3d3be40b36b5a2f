"""Tests for the report aggregator."""

from datetime import UTC, date, datetime

import pytest

from invoicebuddy.core.entities import Customer, Invoice, InvoiceLineItem, Product
from invoicebuddy.core.services import (
    Daily,
    DateRange,
    Monthly,
    PeriodFilter,
    Unfiltered,
    Yearly,
    customer_report,
    dashboard_summary,
    product_report,
    sales_report,
)

TODAY = date(2024, 6, 15)


def _invoice(invoice_id: str, on: date, total: float = 0.0, **kwargs) -> Invoice:
    return Invoice(id=invoice_id, invoice_date=on, total=total, **kwargs)


class TestPeriodFilters:
    def test_daily(self):
        period = Daily(TODAY)
        assert period.matches(_invoice("1", TODAY))
        assert not period.matches(_invoice("2", date(2024, 6, 14)))

    def test_monthly(self):
        period = Monthly(TODAY)
        assert period.matches(_invoice("1", date(2024, 6, 1)))
        assert period.matches(_invoice("2", date(2024, 6, 30)))
        assert not period.matches(_invoice("3", date(2023, 6, 15)))
        assert not period.matches(_invoice("4", date(2024, 7, 1)))

    def test_yearly(self):
        period = Yearly(TODAY)
        assert period.matches(_invoice("1", date(2024, 1, 1)))
        assert not period.matches(_invoice("2", date(2023, 12, 31)))

    def test_date_range_is_inclusive(self):
        period = DateRange("2024-06-01", "2024-06-30")
        assert period.matches(_invoice("1", date(2024, 6, 1)))
        assert period.matches(_invoice("2", date(2024, 6, 30)))
        assert not period.matches(_invoice("3", date(2024, 5, 31)))
        assert not period.matches(_invoice("4", date(2024, 7, 1)))

    def test_unfiltered(self):
        assert Unfiltered().matches(_invoice("1", date(1999, 1, 1)))


class TestFromQuery:
    @pytest.mark.parametrize(
        ("period", "expected"),
        [
            ("daily", Daily(TODAY)),
            ("monthly", Monthly(TODAY)),
            ("yearly", Yearly(TODAY)),
        ],
    )
    def test_named_periods(self, period, expected):
        assert PeriodFilter.from_query(period, today=TODAY) == expected

    def test_range(self):
        assert PeriodFilter.from_query(None, "2024-01-01", "2024-01-31") == DateRange(
            "2024-01-01", "2024-01-31"
        )

    def test_named_period_wins_over_range(self):
        period = PeriodFilter.from_query("yearly", "2020-01-01", "2020-12-31", today=TODAY)
        assert period == Yearly(TODAY)

    @pytest.mark.parametrize(
        ("period", "start", "end"),
        [
            (None, None, None),
            ("weekly", None, None),
            (None, "2024-01-01", None),
            (None, None, "2024-01-31"),
        ],
    )
    def test_everything_else_is_unfiltered(self, period, start, end):
        assert isinstance(PeriodFilter.from_query(period, start, end), Unfiltered)


class TestSalesReport:
    def test_totals_for_period(self):
        invoices = [
            _invoice("1", TODAY, 100.0),
            _invoice("2", TODAY, 50.5),
            _invoice("3", date(2023, 1, 1), 999.0),
        ]
        report = sales_report(invoices, Yearly(TODAY))

        assert report.total_invoices == 2
        assert report.total_revenue == 150.5
        assert [inv.id for inv in report.invoices] == ["1", "2"]

    def test_empty(self):
        report = sales_report([], Unfiltered())
        assert report.total_invoices == 0
        assert report.total_revenue == 0.0

    def test_serializes_with_camel_case(self):
        data = sales_report([_invoice("1", TODAY, 10.0)], Unfiltered()).model_dump(by_alias=True)
        assert set(data) == {"totalRevenue", "totalInvoices", "invoices"}


class TestCustomerReport:
    def test_one_row_per_customer_in_store_order(self):
        customers = [Customer(id="c1", name="Acme"), Customer(id="c2", name="Globex")]
        invoices = [
            _invoice("1", TODAY, 10.0, customer_id="c2"),
            _invoice("2", TODAY, 20.0, customer_id="c2"),
            _invoice("3", TODAY, 5.0, customer_id="unknown"),
        ]
        rows = customer_report(customers, invoices)

        assert [r.name for r in rows] == ["Acme", "Globex"]
        assert (rows[0].total_invoices, rows[0].total_amount, rows[0].invoices) == (0, 0.0, [])
        assert rows[1].total_invoices == 2
        assert rows[1].total_amount == 30.0
        assert [inv.id for inv in rows[1].invoices] == ["1", "2"]

    def test_keeps_customer_fields(self):
        customer = Customer.model_validate({"id": "c1", "name": "Acme", "vatId": "DE1"})
        row = customer_report([customer], [])[0]
        assert row.model_dump(by_alias=True)["vatId"] == "DE1"


class TestProductReport:
    def test_counts_each_line(self):
        products = [Product(id="p1", name="Widget", price=99.0), Product(id="p2", name="Idle")]
        invoice = _invoice(
            "1",
            TODAY,
            items=[
                InvoiceLineItem(product_id="p1", quantity=2, price=5.0),
                InvoiceLineItem(product_id="p1", quantity=1, price=5.0),
            ],
        )
        rows = product_report(products, [invoice])

        widget, idle = rows
        assert widget.total_quantity == 3
        assert widget.total_revenue == 15.0
        assert widget.invoice_count == 2
        assert (idle.total_quantity, idle.total_revenue, idle.invoice_count) == (0, 0.0, 0)

    def test_accumulates_across_invoices(self):
        products = [Product(id="p1", name="Widget")]
        invoices = [
            _invoice("1", TODAY, items=[InvoiceLineItem(product_id="p1", quantity=1, price=4.0)]),
            _invoice("2", TODAY, items=[InvoiceLineItem(product_id="p1", quantity=2, price=6.0)]),
        ]
        row = product_report(products, invoices)[0]

        assert row.total_quantity == 3
        assert row.total_revenue == 16.0
        assert row.invoice_count == 2


class TestDashboardSummary:
    def test_counts_and_revenue(self):
        summary = dashboard_summary(
            customers=[Customer(id="c1")],
            products=[Product(id="p1"), Product(id="p2")],
            invoices=[_invoice("1", TODAY, 10.0), _invoice("2", TODAY, 15.0)],
        )
        assert summary.total_customers == 1
        assert summary.total_products == 2
        assert summary.total_invoices == 2
        assert summary.total_revenue == 25.0

    def test_recent_invoices_newest_first(self):
        invoices = [
            _invoice(str(n), TODAY, created_at=datetime(2024, 1, n, tzinfo=UTC))
            for n in range(1, 8)
        ]
        invoices.append(_invoice("undated", TODAY))

        summary = dashboard_summary([], [], invoices, recent_limit=3)

        assert [inv.id for inv in summary.recent_invoices] == ["7", "6", "5"]

    def test_undated_invoices_last(self):
        invoices = [
            _invoice("undated", TODAY),
            _invoice("dated", TODAY, created_at=datetime(2024, 1, 1, tzinfo=UTC)),
        ]
        summary = dashboard_summary([], [], invoices)
        assert [inv.id for inv in summary.recent_invoices] == ["dated", "undated"]
