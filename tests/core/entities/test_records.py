"""Tests for Customer and Product entities."""

from datetime import datetime

from invoicebuddy.core.entities import Customer, Product


class TestCustomer:
    def test_defaults(self):
        customer = Customer()
        assert customer.id == ""
        assert customer.name == ""
        assert customer.created_at is None

    def test_reads_camel_case_keys(self):
        customer = Customer.model_validate(
            {"id": "1", "name": "Acme", "createdAt": "2024-01-01T00:00:00Z"}
        )
        assert customer.id == "1"
        assert isinstance(customer.created_at, datetime)

    def test_accepts_field_names(self):
        customer = Customer(name="Acme", created_at=datetime(2024, 1, 1))
        assert customer.created_at == datetime(2024, 1, 1)

    def test_keeps_undeclared_fields(self):
        customer = Customer.model_validate({"name": "Acme", "taxNumber": "DE123"})
        record = customer.to_record()
        assert record["taxNumber"] == "DE123"
        assert record["name"] == "Acme"

    def test_to_record_uses_camel_case(self):
        record = Customer(id="1", name="Acme", created_at=datetime(2024, 1, 1)).to_record()
        assert "createdAt" in record
        assert "created_at" not in record
        assert record["createdAt"].startswith("2024-01-01T00:00:00")


class TestProduct:
    def test_price_coerced_to_float(self):
        product = Product.model_validate({"name": "Widget", "price": 10})
        assert product.price == 10.0
        assert isinstance(product.price, float)

    def test_round_trip_keeps_extras(self):
        raw = {"id": "7", "name": "Widget", "price": 2.5, "sku": "W-1", "createdAt": None}
        record = Product.model_validate(raw).to_record()
        assert record["sku"] == "W-1"
        assert record["price"] == 2.5
