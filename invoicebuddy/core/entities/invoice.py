"""Invoice domain entities."""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from invoicebuddy.core.entities.base import Record, drop_declared_nulls


class InvoiceLineItem(BaseModel):
    """
    One product/quantity entry on an invoice.

    product_name and price are snapshots of the product at save time.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )

    product_id: str = ""
    product_name: str = ""
    quantity: int = 0
    price: float = 0.0
    total: float = 0.0  # quantity * price

    @model_validator(mode="before")
    @classmethod
    def ignore_nulls(cls, data: Any) -> Any:
        return drop_declared_nulls(cls, data)

    @model_validator(mode="after")
    def compute_line(self) -> "InvoiceLineItem":
        """Compute total from quantity and price."""
        self.total = self.quantity * self.price
        return self


class Invoice(Record):
    """An issued invoice with line items and derived money fields."""

    invoice_number: str = ""
    customer_id: str = ""
    customer_name: str = ""  # snapshot
    invoice_date: date = Field(default_factory=date.today, alias="date")
    items: list[InvoiceLineItem] = Field(default_factory=list)
    tax_rate: float | None = None  # percent
    subtotal: float = 0.0
    tax: float = 0.0
    discount: float = 0.0
    total: float = 0.0

    def effective_tax_rate(self) -> float:
        """Stored tax rate, or the rate implied by tax/subtotal for older records."""
        if self.tax_rate is not None:
            return self.tax_rate
        if not self.subtotal:
            return 0.0
        return self.tax / self.subtotal * 100
