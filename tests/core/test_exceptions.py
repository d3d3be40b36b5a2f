"""Unit tests for domain exceptions."""

import pytest

from invoicebuddy.core.exceptions import (
    ConfigurationError,
    CustomerNotFoundError,
    ExportError,
    InvoiceBuddyError,
    InvoiceNotFoundError,
    ProductNotFoundError,
    RecordNotFoundError,
    ReportError,
    StorageError,
    StorageWriteError,
    UnknownReportError,
    UnsupportedExportFormatError,
    ValidationError,
)


class TestInvoiceBuddyError:
    """Tests for the base exception."""

    def test_basic_initialization(self):
        error = InvoiceBuddyError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "InvoiceBuddyError"
        assert error.details == {}

    def test_with_custom_code(self):
        error = InvoiceBuddyError("Error message", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_to_dict(self):
        error = InvoiceBuddyError("Boom", code="BOOM", details={"key": "value"})
        assert error.to_dict() == {
            "error": "Boom",
            "error_code": "BOOM",
            "details": {"key": "value"},
        }

    def test_subclass_code_defaults_to_class_name(self):
        assert ConfigurationError("bad").code == "ConfigurationError"


class TestNotFoundErrors:
    @pytest.mark.parametrize(
        ("exc_type", "message", "code"),
        [
            (CustomerNotFoundError, "Customer not found", "CUSTOMER_NOT_FOUND"),
            (ProductNotFoundError, "Product not found", "PRODUCT_NOT_FOUND"),
            (InvoiceNotFoundError, "Invoice not found", "INVOICE_NOT_FOUND"),
        ],
    )
    def test_message_and_code(self, exc_type, message, code):
        error = exc_type("42")
        assert error.message == message
        assert error.code == code
        assert error.details == {"id": "42"}
        assert error.record_id == "42"

    def test_hierarchy(self):
        error = CustomerNotFoundError("1")
        assert isinstance(error, RecordNotFoundError)
        assert isinstance(error, InvoiceBuddyError)


class TestStorageErrors:
    def test_write_error(self):
        error = StorageWriteError("customers", "disk full")
        assert isinstance(error, StorageError)
        assert error.code == "STORAGE_WRITE_ERROR"
        assert "customers" in error.message
        assert error.details == {"collection": "customers", "error": "disk full"}


class TestValidationErrors:
    def test_validation_error(self):
        error = ValidationError("price", "must be positive", -1)
        assert error.code == "VALIDATION_ERROR"
        assert error.details["field"] == "price"
        assert error.details["value"] == "-1"

    def test_value_is_truncated(self):
        error = ValidationError("name", "too long", "x" * 500)
        assert len(error.details["value"]) == 100

    def test_unsupported_export_format(self):
        error = UnsupportedExportFormatError("csv", ["pdf", "xlsx"])
        assert isinstance(error, ValidationError)
        assert error.code == "UNSUPPORTED_EXPORT_FORMAT"
        assert error.details["field"] == "format"
        assert error.details["allowed"] == ["pdf", "xlsx"]
        assert "csv" in error.message


class TestReportErrors:
    def test_unknown_report(self):
        error = UnknownReportError("taxes", ["sales", "customers", "products"])
        assert isinstance(error, ReportError)
        assert error.code == "REPORT_NOT_FOUND"
        assert error.details["kind"] == "taxes"

    def test_export_error(self):
        error = ExportError("pdf", "font missing")
        assert isinstance(error, ReportError)
        assert error.code == "EXPORT_FAILED"
        assert error.details == {"format": "pdf", "reason": "font missing"}
