"""
Flat JSON file record store.

Each collection lives in one file holding a top-level JSON array.
Reads and writes always cover the whole collection.
"""

import asyncio
import json
import os
import tempfile
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from invoicebuddy.config import get_logger
from invoicebuddy.core.exceptions import StorageWriteError
from invoicebuddy.core.interfaces.record_store import IRecordStore

logger = get_logger(__name__)

CUSTOMERS = "customers"
PRODUCTS = "products"
INVOICES = "invoices"
COLLECTIONS = (CUSTOMERS, PRODUCTS, INVOICES)


class JsonRecordStore(IRecordStore):
    """
    JSON file implementation of the record store.

    Reads fail open: a missing, unreadable or malformed file is reported
    as an empty collection and logged. Writes go to a temporary file that
    replaces the collection file, so a reader never sees a partial write.
    File I/O runs in a worker thread.
    """

    def __init__(
        self,
        data_dir: Path,
        collections: Iterable[str] = COLLECTIONS,
        indent: int = 2,
    ):
        self.data_dir = data_dir
        self.collections = tuple(collections)
        self.indent = indent
        self._locks: dict[str, asyncio.Lock] = {}

    def path_for(self, collection: str) -> Path:
        return self.data_dir / f"{collection}.json"

    async def initialize(self) -> None:
        """Create the data directory and write [] for missing collections."""
        await asyncio.to_thread(self._initialize_sync)

    def _initialize_sync(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        for collection in self.collections:
            path = self.path_for(collection)
            if not path.exists():
                self._write_sync(collection, [])
                logger.info("collection_initialized", collection=collection, path=str(path))

    async def load_all(self, collection: str) -> list[dict[str, Any]]:
        """Load all records; never raises for bad data."""
        return await asyncio.to_thread(self._read_sync, collection)

    def _read_sync(self, collection: str) -> list[dict[str, Any]]:
        path = self.path_for(collection)
        if not path.exists():
            return []

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(
                "collection_read_failed",
                collection=collection,
                path=str(path),
                error=str(e),
            )
            return []

        if not isinstance(data, list):
            logger.warning(
                "collection_read_failed",
                collection=collection,
                path=str(path),
                error=f"expected a JSON array, got {type(data).__name__}",
            )
            return []

        records = [r for r in data if isinstance(r, dict)]
        if len(records) != len(data):
            logger.warning(
                "collection_entries_skipped",
                collection=collection,
                skipped=len(data) - len(records),
            )
        return records

    async def save_all(self, collection: str, records: list[dict[str, Any]]) -> None:
        """Atomically replace the collection file."""
        await asyncio.to_thread(self._write_sync, collection, records)
        logger.debug("collection_saved", collection=collection, records=len(records))

    def _write_sync(self, collection: str, records: list[dict[str, Any]]) -> None:
        path = self.path_for(collection)
        tmp_name: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{collection}.",
                suffix=".tmp",
                delete=False,
            ) as fh:
                tmp_name = fh.name
                json.dump(records, fh, indent=self.indent, ensure_ascii=False)
            os.replace(tmp_name, path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            logger.error(
                "collection_write_failed",
                collection=collection,
                path=str(path),
                error=str(e),
            )
            raise StorageWriteError(collection, str(e)) from e

    @asynccontextmanager
    async def lock(self, collection: str) -> AsyncIterator[None]:
        """
        Hold the collection's lock.

        Usage:
            async with store.lock("customers"):
                records = await store.load_all("customers")
                ...
                await store.save_all("customers", records)
        """
        lock = self._locks.setdefault(collection, asyncio.Lock())
        async with lock:
            yield
