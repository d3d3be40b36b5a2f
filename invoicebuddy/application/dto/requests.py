"""Request DTOs for API endpoints.

Every create/update body is partial: only the fields a caller sends are
applied. Undeclared fields are accepted and stored on the record.
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _PartialRequest(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_fields(self) -> dict[str, Any]:
        """Fields the caller actually sent, keyed as stored."""
        return self.model_dump(
            mode="json", by_alias=True, exclude_unset=True, exclude_none=True
        )


class CustomerRequest(_PartialRequest):
    """Create or update a customer."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None


class ProductRequest(_PartialRequest):
    """Create or update a product."""

    name: str | None = None
    category: str | None = None
    description: str | None = None
    price: float | None = Field(default=None, ge=0)


class InvoiceItemRequest(BaseModel):
    """One line on an invoice; name and price come from the catalog."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_id: str
    quantity: int = Field(..., gt=0)


class InvoiceRequest(_PartialRequest):
    """
    Create or update an invoice.

    Money fields are always computed server side from items, tax_rate
    and discount_amount; any subtotal/tax/total sent by the caller is
    ignored.
    """

    invoice_number: str | None = None
    customer_id: str | None = None
    invoice_date: date | None = Field(default=None, alias="date")
    items: list[InvoiceItemRequest] | None = None
    tax_rate: float | None = Field(default=None, ge=0)
    discount_amount: float | None = Field(default=None, ge=0)

    def recalculates(self) -> bool:
        """True if this request changes an input of the total calculation."""
        return bool({"items", "tax_rate", "discount_amount"} & self.model_fields_set)
