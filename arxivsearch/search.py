# arxivsearch/search.py
import logging
import warnings
from collections.abc import Mapping
from typing import Any, Literal

import httpx

from arxivsearch.client import Arxiv
from arxivsearch.feed import FeedError
from arxivsearch.models import SearchResult
from arxivsearch.params import (
    DEFAULT_MAX_RESULTS,
    DEFAULT_SORT_BY,
    DEFAULT_SORT_ORDER,
    DEFAULT_START,
    SearchParams,
)
from arxivsearch.query.builder import QueryBuilder

logger = logging.getLogger(__name__)

OnError = Literal["fail", "ignore", "warn"]


def _to_query(query: QueryBuilder | Mapping[str, Any] | str) -> QueryBuilder | str:
    if isinstance(query, (QueryBuilder, str)):
        return query
    return QueryBuilder.from_filters(query)


async def search(
    query: QueryBuilder | Mapping[str, Any] | str,
    *,
    start: Any = DEFAULT_START,
    max_results: Any = DEFAULT_MAX_RESULTS,
    sort_by: Any = DEFAULT_SORT_BY,
    sort_order: Any = DEFAULT_SORT_ORDER,
    on_error: OnError = "fail",
    client: Arxiv | None = None,
) -> SearchResult:
    """
    Search arXiv for papers.

    Args:
        query: QueryBuilder, filter mapping, or a rendered search query string
        start: Result offset
        max_results: Page size
        sort_by: relevance, lastUpdatedDate or submittedDate
        sort_order: descending or ascending
        on_error: Error handling mode - "fail", "ignore", or "warn"
        client: An entered Arxiv client to reuse; a new one is opened if None

    Returns:
        SearchResult. With on_error="warn" or "ignore" a failed request yields
        an empty result whose ``error`` holds the exception.

    Examples:
        result = await search({"author": "bousso", "title": "arrow of time"})

        builder = QueryBuilder().add_categories(["hep-th", "gr-qc"])
        result = await search(builder, max_results=50, sort_by="submittedDate")
    """
    q = _to_query(query)
    search_query = q.build() if isinstance(q, QueryBuilder) else q
    logger.info("Starting arXiv search: %s", search_query)

    try:
        if client is not None:
            result = await client.search(q, start, max_results, sort_by, sort_order)
        else:
            async with Arxiv() as arxiv:
                result = await arxiv.search(q, start, max_results, sort_by, sort_order)
    except (httpx.HTTPError, FeedError) as e:
        if on_error == "fail":
            raise
        if on_error == "warn":
            warnings.warn(f"arXiv search failed: {e}", stacklevel=2)
        params = SearchParams.create(start, max_results, sort_by, sort_order)
        return SearchResult(
            papers=[],
            query=search_query,
            start=params.start,
            max_results=params.max_results,
            error=e,
        )

    logger.info("Search complete: %s papers (total %s)", len(result.papers), result.total_results)
    return result
