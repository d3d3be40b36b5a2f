"""Shared base for persisted records."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


def drop_declared_nulls(model: type[BaseModel], data: Any) -> Any:
    """Remove explicit nulls for declared fields so they fall back to defaults."""
    if not isinstance(data, dict):
        return data
    declared: set[str] = set()
    for name, field in model.model_fields.items():
        declared.add(name)
        if field.alias:
            declared.add(field.alias)
    return {k: v for k, v in data.items() if v is not None or k not in declared}


class Record(BaseModel):
    """
    A persisted record.

    Keys are camelCase on disk and on the wire. Fields the caller sends
    that the model does not declare are kept on the record. Stored files
    may hold numbers where text is expected, or nulls; both are accepted.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )

    id: str = ""
    created_at: datetime | None = None

    @model_validator(mode="before")
    @classmethod
    def ignore_nulls(cls, data: Any) -> Any:
        return drop_declared_nulls(cls, data)

    def to_record(self) -> dict[str, Any]:
        """Serialize to the JSON-ready dict written to the collection file."""
        return self.model_dump(mode="json", by_alias=True)
