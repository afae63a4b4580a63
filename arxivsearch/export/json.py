# arxivsearch/export/json.py
import json
from dataclasses import asdict
from datetime import date

from arxivsearch.models import SearchResult

from .base import Exporter


class JsonExporter(Exporter):
    """Export results to JSON format."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def to_string(self, result: SearchResult) -> str:
        def default_serializer(obj):
            if isinstance(obj, date):
                return obj.isoformat()
            raise TypeError(f"Object of type {type(obj)} is not JSON serializable")

        data = {
            "query": result.query,
            "total_results": result.total_results,
            "start": result.start,
            "papers": [asdict(p) for p in result.papers],
            "total": len(result.papers),
        }
        if result.error is not None:
            data["error"] = str(result.error)
        return json.dumps(data, indent=self.indent, ensure_ascii=False, default=default_serializer)
