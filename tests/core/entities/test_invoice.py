"""Tests for Invoice and InvoiceLineItem entities."""

from datetime import date

from invoicebuddy.core.entities import Invoice, InvoiceLineItem


class TestInvoiceLineItem:
    def test_total_is_quantity_times_price(self):
        item = InvoiceLineItem(product_id="p1", quantity=3, price=10.0)
        assert item.total == 30.0

    def test_stored_total_is_recomputed(self):
        item = InvoiceLineItem.model_validate(
            {"productId": "p1", "productName": "Widget", "quantity": 2, "price": 5, "total": 999}
        )
        assert item.total == 10.0
        assert item.product_name == "Widget"

    def test_dump_uses_camel_case(self):
        data = InvoiceLineItem(product_id="p1", product_name="Widget", quantity=1, price=1.0).model_dump(
            by_alias=True
        )
        assert set(data) == {"productId", "productName", "quantity", "price", "total"}


class TestInvoice:
    def test_date_alias(self):
        invoice = Invoice.model_validate({"invoiceNumber": "INV-1", "date": "2024-03-05"})
        assert invoice.invoice_date == date(2024, 3, 5)
        assert invoice.to_record()["date"] == "2024-03-05"

    def test_date_defaults_to_today(self):
        assert Invoice().invoice_date == date.today()

    def test_items_parsed(self):
        invoice = Invoice.model_validate(
            {"items": [{"productId": "p1", "quantity": 2, "price": 4.5}]}
        )
        assert invoice.items[0].total == 9.0

    def test_effective_tax_rate_uses_stored_rate(self):
        invoice = Invoice(tax_rate=7.5, subtotal=100, tax=8)
        assert invoice.effective_tax_rate() == 7.5

    def test_effective_tax_rate_derived_from_legacy_amounts(self):
        invoice = Invoice(subtotal=200, tax=16)
        assert invoice.effective_tax_rate() == 8.0

    def test_effective_tax_rate_zero_subtotal(self):
        assert Invoice(subtotal=0, tax=0).effective_tax_rate() == 0.0
