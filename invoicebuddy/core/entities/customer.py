"""Customer domain entity."""

from invoicebuddy.core.entities.base import Record


class Customer(Record):
    """A customer that invoices are issued to."""

    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
