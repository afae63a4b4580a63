# arxivsearch/export/tree.py
import textwrap

from arxivsearch.models import Paper, SearchResult

from .base import Exporter


class TreeExporter(Exporter):
    """Human-readable, indented rendering of papers."""

    def __init__(self, width: int = 88, max_authors: int = 5):
        self.width = width
        self.max_authors = max_authors

    def format_paper(self, paper: Paper) -> str:
        lines = [paper.title]

        authors = ", ".join(paper.authors[: self.max_authors])
        if len(paper.authors) > self.max_authors:
            authors += f" (+{len(paper.authors) - self.max_authors} more)"
        if authors:
            lines.append(f"├── Authors: {authors}")
        if paper.published_date:
            lines.append(f"├── Published: {paper.published_date.isoformat()}")
        if paper.categories:
            lines.append(f"├── Categories: {', '.join(paper.categories)}")
        if paper.doi:
            lines.append(f"├── DOI: {paper.doi}")
        if paper.summary:
            summary = textwrap.shorten(paper.summary, width=self.width, placeholder="...")
            lines.append(f"├── Summary: {summary}")
        lines.append(f"└── URL: {paper.link}")

        return "\n".join(lines)

    def to_string(self, result: SearchResult) -> str:
        return "\n\n".join(self.format_paper(p) for p in result.papers)
