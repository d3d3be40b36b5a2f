"""
Generic CRUD service over one record collection.

Every mutation loads the whole collection, changes it in memory and
writes it back while holding the collection lock.
"""

import time
from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from pydantic import ValidationError as ModelValidationError

from invoicebuddy.config import get_logger
from invoicebuddy.core.entities.base import Record
from invoicebuddy.core.exceptions import RecordNotFoundError
from invoicebuddy.core.interfaces.record_store import IRecordStore

logger = get_logger(__name__)

T = TypeVar("T", bound=Record)

# Keys owned by the server; callers can never set or change them.
_PROTECTED_KEYS = frozenset({"id", "createdAt", "created_at"})


class TimestampIdGenerator:
    """
    Issues decimal-string millisecond epoch identifiers.

    Ids are strictly increasing within the process and skip any value
    already present in the target collection.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0

    def next_id(self, existing: Iterable[str] = ()) -> str:
        taken = set(existing)
        candidate = max(int(self._clock() * 1000), self._last + 1)
        while str(candidate) in taken:
            candidate += 1
        self._last = candidate
        return str(candidate)


_default_id_generator = TimestampIdGenerator()


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _client_fields(fields: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in fields.items() if k not in _PROTECTED_KEYS}


class EntityService(Generic[T]):
    """List, get, create, update and delete records of one entity type."""

    def __init__(
        self,
        store: IRecordStore,
        collection: str,
        model: type[T],
        not_found: type[RecordNotFoundError],
        id_generator: TimestampIdGenerator | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._store = store
        self.collection = collection
        self.model = model
        self.not_found = not_found
        self._ids = id_generator or _default_id_generator
        self._clock = clock

    def _parse(self, raw: dict[str, Any]) -> T | None:
        """Stored record as an entity, or None (logged) when it cannot be read."""
        try:
            return self.model.model_validate(raw)
        except ModelValidationError as e:
            logger.warning(
                "record_invalid",
                collection=self.collection,
                id=raw.get("id"),
                errors=e.error_count(),
                error=str(e),
            )
            return None

    async def list_all(self) -> list[T]:
        """All readable records in store order. Unreadable ones are skipped."""
        records = await self._store.load_all(self.collection)
        return [entity for entity in map(self._parse, records) if entity is not None]

    async def get(self, record_id: str) -> T:
        records = await self._store.load_all(self.collection)
        for raw in records:
            if raw.get("id") == record_id:
                entity = self._parse(raw)
                if entity is not None:
                    return entity
        raise self.not_found(record_id)

    async def create(self, fields: dict[str, Any]) -> T:
        """Assign id and createdAt, merge fields, append and persist."""
        async with self._store.lock(self.collection):
            records = await self._store.load_all(self.collection)
            record_id = self._ids.next_id(r.get("id") for r in records)

            entity = self.model.model_validate(
                {
                    **_client_fields(fields),
                    "id": record_id,
                    "createdAt": self._clock(),
                }
            )
            records.append(entity.to_record())
            await self._store.save_all(self.collection, records)

        logger.info("record_created", collection=self.collection, id=record_id)
        return entity

    async def update(
        self,
        record_id: str,
        fields: dict[str, Any],
        prepare: Callable[[T, dict[str, Any]], dict[str, Any]] | None = None,
    ) -> T:
        """
        Shallow-merge fields over an existing record.

        Args:
            record_id: Identifier of the record to change.
            fields: Fields to overwrite; absent fields keep their value.
            prepare: Optional hook called under the lock with the current
                record and fields; its return value is what gets merged.

        Raises:
            RecordNotFoundError: No record has this id, or the stored
                record cannot be read. Nothing is written.
        """
        async with self._store.lock(self.collection):
            records = await self._store.load_all(self.collection)

            for index, raw in enumerate(records):
                if raw.get("id") == record_id:
                    existing = self._parse(raw)
                    if existing is not None:
                        break
            else:
                logger.info("record_not_found", collection=self.collection, id=record_id)
                raise self.not_found(record_id)

            if prepare is not None:
                fields = prepare(existing, fields)

            entity = self.model.model_validate({**raw, **_client_fields(fields)})
            records[index] = entity.to_record()
            await self._store.save_all(self.collection, records)

        logger.info("record_updated", collection=self.collection, id=record_id)
        return entity

    async def delete(self, record_id: str) -> None:
        """Remove matching records. A missing id is not an error."""
        async with self._store.lock(self.collection):
            records = await self._store.load_all(self.collection)
            remaining = [r for r in records if r.get("id") != record_id]
            await self._store.save_all(self.collection, remaining)

        logger.info(
            "record_deleted",
            collection=self.collection,
            id=record_id,
            removed=len(records) - len(remaining),
        )
