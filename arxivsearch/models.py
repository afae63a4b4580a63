# arxivsearch/models.py
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Paper:
    """A single entry of an arXiv search feed."""

    title: str
    summary: str
    authors: tuple[str, ...]
    link: str  # The entry id URL, which arXiv also uses as the paper id
    published_date: date | None = None

    categories: tuple[str, ...] = ()
    primary_category: str | None = None
    updated_date: date | None = None
    pdf_url: str | None = None
    doi: str | None = None
    journal_ref: str | None = None
    comment: str | None = None

    @property
    def id(self) -> str:
        return self.link

    @property
    def arxiv_id(self) -> str:
        """Short identifier, e.g. ``1706.03762v7``."""
        return self.link.rsplit("/abs/", 1)[-1]


@dataclass
class SearchResult:
    """Papers returned for one search request."""

    papers: list[Paper]
    query: str = ""
    total_results: int | None = None
    start: int = 0
    max_results: int = 10
    error: Exception | None = field(default=None, compare=False)

    def __len__(self) -> int:
        return len(self.papers)

    def __iter__(self) -> Iterator[Paper]:
        return iter(self.papers)

    @property
    def ok(self) -> bool:
        return self.error is None
