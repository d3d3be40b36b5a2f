"""Product domain entity."""

from invoicebuddy.core.entities.base import Record


class Product(Record):
    """A sellable product with its current unit price."""

    name: str = ""
    category: str = ""
    description: str = ""
    price: float = 0.0
