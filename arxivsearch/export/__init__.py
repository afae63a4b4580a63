# arxivsearch/export/__init__.py
from .base import Exporter
from .json import JsonExporter
from .tree import TreeExporter

EXPORTERS: dict[str, type[Exporter]] = {
    "json": JsonExporter,
    "tree": TreeExporter,
}


def get_exporter(name: str) -> Exporter:
    """Return an exporter instance for the given format name."""
    try:
        return EXPORTERS[name.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown format: {name}. Available: {', '.join(EXPORTERS)}"
        ) from None


__all__ = ["Exporter", "JsonExporter", "TreeExporter", "EXPORTERS", "get_exporter"]
