"""JSON flat-file storage implementation."""

from invoicebuddy.config import get_settings
from invoicebuddy.infrastructure.storage.jsonfile.record_store import (
    COLLECTIONS,
    CUSTOMERS,
    INVOICES,
    PRODUCTS,
    JsonRecordStore,
)

# Singleton instance
_record_store: JsonRecordStore | None = None


async def get_record_store() -> JsonRecordStore:
    """Get singleton record store instance, initializing it on first use."""
    global _record_store
    if _record_store is None:
        settings = get_settings()
        store = JsonRecordStore(
            data_dir=settings.storage.data_dir,
            indent=settings.storage.indent,
        )
        await store.initialize()
        _record_store = store
    return _record_store


def reset_record_store() -> None:
    """Drop the singleton (for testing)."""
    global _record_store
    _record_store = None


__all__ = [
    "COLLECTIONS",
    "CUSTOMERS",
    "PRODUCTS",
    "INVOICES",
    "JsonRecordStore",
    "get_record_store",
    "reset_record_store",
]
