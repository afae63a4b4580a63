# arxivsearch/client.py
import logging
import os
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote, urlencode

import httpx

from arxivsearch.feed import parse_feed
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

# "+" and ":" belong to the search_query grammar and must not be escaped
QUERY_SAFE_CHARS = "+:"


class Arxiv:
    """arXiv query API client.

    Use as an async context manager; the underlying HTTP client lives for
    the duration of the ``async with`` block.

    Examples:
        async with Arxiv() as arxiv:
            result = await arxiv.search(QueryBuilder().add_author("bousso"))
    """

    name = "arxiv"
    BASE_URL = "http://export.arxiv.org/api/query"

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        self.base_url = base_url or self._load_from_env() or self.BASE_URL
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    def _load_from_env(self) -> str | None:
        return os.getenv("ARXIV_API_URL")

    async def __aenter__(self) -> "Arxiv":
        self._client = httpx.AsyncClient(timeout=self.timeout)
        return self

    async def __aexit__(self, *_: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def build_url(self, params: Mapping[str, str | int]) -> str:
        return f"{self.base_url}?{urlencode(params, safe=QUERY_SAFE_CHARS, quote_via=quote)}"

    async def search(
        self,
        query: QueryBuilder | str,
        start: Any = DEFAULT_START,
        max_results: Any = DEFAULT_MAX_RESULTS,
        sort_by: Any = DEFAULT_SORT_BY,
        sort_order: Any = DEFAULT_SORT_ORDER,
    ) -> SearchResult:
        """Run a search and return the parsed page of results.

        Args:
            query: A builder, or an already rendered search query string
            start: Result offset; invalid values fall back to 0
            max_results: Page size; invalid values fall back to 10
            sort_by: relevance, lastUpdatedDate or submittedDate
            sort_order: descending or ascending

        Raises:
            RuntimeError: If used outside ``async with``.
            httpx.HTTPError: On network failure or a non-success response.
            FeedError: If the response is not a valid feed.
        """
        if self._client is None:
            raise RuntimeError("Client not initialized. Use 'async with Arxiv():'")

        search_query = query.build() if isinstance(query, QueryBuilder) else query
        params = SearchParams.create(start, max_results, sort_by, sort_order)
        logger.debug("Search query: %s", search_query)

        url = self.build_url(params.to_query_params(search_query))
        logger.debug("Requesting: %s", url)
        response = await self._client.get(url)
        response.raise_for_status()
        logger.debug("Response status: %s", response.status_code)

        return parse_feed(
            response.content,
            query=search_query,
            start=params.start,
            max_results=params.max_results,
        )

    async def get_papers(
        self,
        filters: Mapping[str, Any],
        start: Any = DEFAULT_START,
        max_results: Any = DEFAULT_MAX_RESULTS,
        sort_by: Any = DEFAULT_SORT_BY,
        sort_order: Any = DEFAULT_SORT_ORDER,
    ) -> SearchResult:
        """Search with a mapping of filters (see ``QueryBuilder.from_filters``)."""
        builder = QueryBuilder.from_filters(filters)
        return await self.search(builder, start, max_results, sort_by, sort_order)

    async def get_authors_papers(
        self,
        authors: Iterable[str],
        start: Any = DEFAULT_START,
        max_results: Any = DEFAULT_MAX_RESULTS,
        sort_by: Any = DEFAULT_SORT_BY,
        sort_order: Any = DEFAULT_SORT_ORDER,
    ) -> SearchResult:
        """Papers written by all of the given authors."""
        builder = QueryBuilder().add_authors(authors)
        return await self.search(builder, start, max_results, sort_by, sort_order)
