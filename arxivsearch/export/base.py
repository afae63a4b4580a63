# arxivsearch/export/base.py
"""Base class for result exporters."""

from abc import ABC, abstractmethod
from pathlib import Path

from arxivsearch.models import SearchResult


class Exporter(ABC):
    """Base class for result exporters."""

    @abstractmethod
    def to_string(self, result: SearchResult) -> str:
        """Render the result as text."""
        ...

    def export(self, result: SearchResult, path: Path) -> None:
        path.write_text(self.to_string(result), encoding="utf-8")
