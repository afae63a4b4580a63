# arxivsearch/__init__.py
"""arxivsearch - A client for the arXiv search API."""

from arxivsearch.client import Arxiv
from arxivsearch.feed import FeedError, parse_feed
from arxivsearch.models import Paper, SearchResult
from arxivsearch.params import SearchParams
from arxivsearch.query import CATEGORIES, QueryBuilder, is_valid_category
from arxivsearch.search import OnError, search

__all__ = [
    # Query building
    "QueryBuilder",
    "CATEGORIES",
    "is_valid_category",
    "SearchParams",
    # Models
    "Paper",
    "SearchResult",
    # Transport
    "Arxiv",
    "parse_feed",
    "FeedError",
    # Search
    "search",
    "OnError",
]
