"""Abstract interface for report export renderers."""

from abc import ABC, abstractmethod
from typing import Any


class IReportExporter(ABC):
    """Renders a flat row set into a downloadable file."""

    #: File extension without the dot, e.g. "pdf".
    extension: str
    media_type: str

    @abstractmethod
    def export(
        self,
        title: str,
        rows: list[dict[str, Any]],
        summary: list[str] | None = None,
    ) -> bytes:
        """
        Render rows into file bytes.

        Args:
            title: Report title.
            rows: Flat key -> value records; keys of the first row are the columns.
            summary: Optional lines shown above the table.
        """
        ...
