"""
Service factory functions for dependency injection.

Wires the record store to one EntityService per entity type.
"""

from invoicebuddy.core.entities import Customer, Invoice, Product
from invoicebuddy.core.exceptions import (
    CustomerNotFoundError,
    InvoiceNotFoundError,
    ProductNotFoundError,
)
from invoicebuddy.core.interfaces import IRecordStore
from invoicebuddy.core.services import EntityService
from invoicebuddy.infrastructure.storage.jsonfile import CUSTOMERS, INVOICES, PRODUCTS


def get_customer_service(store: IRecordStore) -> EntityService[Customer]:
    return EntityService(store, CUSTOMERS, Customer, CustomerNotFoundError)


def get_product_service(store: IRecordStore) -> EntityService[Product]:
    return EntityService(store, PRODUCTS, Product, ProductNotFoundError)


def get_invoice_service(store: IRecordStore) -> EntityService[Invoice]:
    return EntityService(store, INVOICES, Invoice, InvoiceNotFoundError)
