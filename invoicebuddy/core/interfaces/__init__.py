"""Core interfaces (ports) for dependency injection."""

from invoicebuddy.core.interfaces.exporter import IReportExporter
from invoicebuddy.core.interfaces.record_store import IRecordStore

__all__ = [
    "IRecordStore",
    "IReportExporter",
]
