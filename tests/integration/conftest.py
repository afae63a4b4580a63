from __future__ import annotations

import os
from dataclasses import dataclass

import pytest

from arxivsearch.models import Paper

requires_network = pytest.mark.skipif(
    not os.environ.get("ARXIV_INTEGRATION"),
    reason="ARXIV_INTEGRATION not set",
)

BOUSSO_ZUKOWSKI_TITLE = "Vacuum Structure and the Arrow of Time"


@dataclass(frozen=True)
class QueryExpectation:
    title_contains: str | None = None
    author_contains: str | None = None
    category: str | None = None
    has_summary: bool = False


def assert_paper_satisfies(paper: Paper, expect: QueryExpectation) -> None:
    if expect.title_contains:
        assert expect.title_contains.lower() in paper.title.lower(), (
            f"Title should contain '{expect.title_contains}', got: {paper.title}"
        )

    if expect.author_contains:
        author_names = " ".join(paper.authors).lower()
        assert expect.author_contains.lower() in author_names, (
            f"Authors should contain '{expect.author_contains}', got: {list(paper.authors)}"
        )

    if expect.category:
        assert expect.category in paper.categories, (
            f"Categories should contain '{expect.category}', got: {list(paper.categories)}"
        )

    if expect.has_summary:
        assert paper.summary, f"Paper should have summary, got: {paper.summary!r}"


def assert_valid_paper(paper: Paper) -> None:
    assert paper.title, "Paper must have title"
    assert paper.authors, "Paper must have authors"
    assert paper.link.startswith("http"), f"Invalid link: {paper.link}"
    assert paper.published_date is not None, "Paper must have published date"
