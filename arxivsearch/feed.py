# arxivsearch/feed.py
"""Parse arXiv Atom feeds into :class:`SearchResult` objects."""

import logging
import xml.etree.ElementTree as ET
from datetime import date

from arxivsearch.models import Paper, SearchResult

logger = logging.getLogger(__name__)

NS = {
    "atom": "http://www.w3.org/2005/Atom",
    "arxiv": "http://arxiv.org/schemas/atom",
    "opensearch": "http://a9.com/-/spec/opensearch/1.1/",
}

ERROR_ID_MARKER = "/api/errors"


class FeedError(ValueError):
    """The response body is not a usable arXiv feed."""


def parse_feed(
    xml: str | bytes,
    *,
    query: str = "",
    start: int = 0,
    max_results: int = 10,
) -> SearchResult:
    """Parse an Atom feed returned by the arXiv query endpoint.

    Args:
        xml: Raw response body
        query: The search query that produced the feed
        start: Offset the feed was requested with
        max_results: Page size the feed was requested with

    Raises:
        FeedError: If the body is not well-formed XML, or if arXiv reported
            a query error in place of results.
    """
    try:
        root = ET.fromstring(xml)
    except ET.ParseError as e:
        raise FeedError(f"Malformed arXiv feed: {e}") from e

    entries = root.findall("atom:entry", NS)
    _raise_for_api_error(entries)

    total = _parse_int(root.findtext("opensearch:totalResults", None, NS))
    papers = [_parse_entry(entry) for entry in entries]
    logger.debug("Parsed %s entries (total results: %s)", len(papers), total)

    return SearchResult(
        papers=papers,
        query=query,
        total_results=total,
        start=start,
        max_results=max_results,
    )


def _raise_for_api_error(entries: list[ET.Element]) -> None:
    # arXiv reports bad queries as a 200 feed with a single error entry
    if len(entries) != 1:
        return
    entry_id = _text(entries[0], "atom:id")
    if ERROR_ID_MARKER in entry_id:
        raise FeedError(f"arXiv API error: {_text(entries[0], 'atom:summary')}")


def _parse_entry(entry: ET.Element) -> Paper:
    authors = tuple(
        name
        for name in (_text(a, "atom:name") for a in entry.findall("atom:author", NS))
        if name
    )
    categories = tuple(
        term for c in entry.findall("atom:category", NS) if (term := c.get("term"))
    )

    primary = entry.find("arxiv:primary_category", NS)

    pdf_url = None
    for link in entry.findall("atom:link", NS):
        if link.get("title") == "pdf" or link.get("type") == "application/pdf":
            pdf_url = link.get("href")
            break

    return Paper(
        title=" ".join(_text(entry, "atom:title").split()),
        summary=_text(entry, "atom:summary"),
        authors=authors,
        link=_text(entry, "atom:id"),
        published_date=_parse_date(_text(entry, "atom:published")),
        categories=categories,
        primary_category=primary.get("term") if primary is not None else None,
        updated_date=_parse_date(_text(entry, "atom:updated")),
        pdf_url=pdf_url,
        doi=_text(entry, "arxiv:doi") or None,
        journal_ref=_text(entry, "arxiv:journal_ref") or None,
        comment=_text(entry, "arxiv:comment") or None,
    )


def _text(element: ET.Element, path: str) -> str:
    return (element.findtext(path, "", NS) or "").strip()


def _parse_date(timestamp: str) -> date | None:
    """Calendar date from the first 10 characters of an Atom timestamp."""
    if not timestamp:
        return None
    try:
        return date.fromisoformat(timestamp[:10])
    except ValueError:
        logger.debug("Unparseable timestamp: %s", timestamp)
        return None


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None
