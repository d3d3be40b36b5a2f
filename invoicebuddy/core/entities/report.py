"""Report result entities.

Reports are computed on request and never persisted.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from invoicebuddy.core.entities.customer import Customer
from invoicebuddy.core.entities.invoice import Invoice
from invoicebuddy.core.entities.product import Product


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SalesReport(_CamelModel):
    """Revenue over a period filter."""

    total_revenue: float = 0.0
    total_invoices: int = 0
    invoices: list[Invoice] = Field(default_factory=list)


class CustomerStats(Customer):
    """A customer with the invoices issued to them."""

    total_invoices: int = 0
    total_amount: float = 0.0
    invoices: list[Invoice] = Field(default_factory=list)


class ProductStats(Product):
    """A product with its sales figures."""

    total_quantity: int = 0
    total_revenue: float = 0.0
    invoice_count: int = 0


class DashboardSummary(_CamelModel):
    """Headline numbers for the dashboard."""

    total_invoices: int = 0
    total_customers: int = 0
    total_products: int = 0
    total_revenue: float = 0.0
    recent_invoices: list[Invoice] = Field(default_factory=list)
