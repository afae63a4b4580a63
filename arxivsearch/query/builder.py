# arxivsearch/query/builder.py
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from arxivsearch.query.categories import is_valid_category

logger = logging.getLogger(__name__)

AND = "+AND+"


class QueryBuilder:
    """Accumulates search filters and renders them as an arXiv ``search_query``.

    Each logical query owns its own builder. Filters persist across
    ``build()`` calls until ``reset()``.

    Examples:
        >>> QueryBuilder().add_author("bousso").set_title("arrow of time").build()
        'au:bousso+AND+ti:arrow+AND+of+AND+time'
    """

    def __init__(self) -> None:
        # dict keys: insertion-ordered set with O(1) membership
        self._authors: dict[str, None] = {}
        self._categories: dict[str, None] = {}
        self._rejected: list[str] = []
        self._title = ""
        self._abstract = ""

    @classmethod
    def from_filters(cls, filters: Mapping[str, Any]) -> "QueryBuilder":
        """Create a builder from a mapping of filter values.

        Recognized keys: ``author``, ``authors``, ``category``, ``categories``,
        ``title`` and ``abstract``. Other keys are ignored. A plain string under
        ``authors`` or ``categories`` counts as a single value.
        """
        builder = cls()
        if "category" in filters:
            builder.add_category(filters["category"])
        if "categories" in filters:
            builder.add_categories(_as_list(filters["categories"]))
        if "author" in filters:
            builder.add_author(filters["author"])
        if "authors" in filters:
            builder.add_authors(_as_list(filters["authors"]))
        if "title" in filters:
            builder.set_title(filters["title"])
        if "abstract" in filters:
            builder.set_abstract(filters["abstract"])
        return builder

    @property
    def authors(self) -> tuple[str, ...]:
        return tuple(self._authors)

    @property
    def categories(self) -> tuple[str, ...]:
        return tuple(self._categories)

    @property
    def rejected_categories(self) -> tuple[str, ...]:
        """Category codes dropped by ``add_category`` because they are unknown."""
        return tuple(self._rejected)

    @property
    def title(self) -> str:
        return self._title

    @property
    def abstract(self) -> str:
        return self._abstract

    def add_author(self, name: str) -> "QueryBuilder":
        if name not in self._authors:
            self._authors[name] = None
        return self

    def add_authors(self, names: Iterable[str]) -> "QueryBuilder":
        for name in names:
            self.add_author(name)
        return self

    def add_category(self, code: str) -> "QueryBuilder":
        """Add a category code; unknown codes are dropped without error."""
        if not is_valid_category(code):
            logger.debug("Dropping unknown category: %s", code)
            self._rejected.append(code)
        elif code not in self._categories:
            self._categories[code] = None
        return self

    def add_categories(self, codes: Iterable[str]) -> "QueryBuilder":
        for code in codes:
            self.add_category(code)
        return self

    def set_title(self, text: str) -> "QueryBuilder":
        self._title = text
        return self

    def set_abstract(self, text: str) -> "QueryBuilder":
        self._abstract = text
        return self

    def reset(self) -> "QueryBuilder":
        self._authors = {}
        self._categories = {}
        self._rejected = []
        self._title = ""
        self._abstract = ""
        return self

    def is_empty(self) -> bool:
        return self.build() == ""

    def build(self) -> str:
        """Render the filters as clauses joined by ``+AND+``.

        Clause order is fixed: authors, categories, title, abstract. Every
        whitespace-separated word becomes its own term, so ``"van der Waals"``
        renders as ``au:van+AND+der+AND+Waals``.
        """
        clauses = [
            _list_clause("au:", self._authors),
            _list_clause("cat:", self._categories),
            _text_clause("ti:", self._title),
            _text_clause("abs:", self._abstract),
        ]
        return AND.join(c for c in clauses if c)

    def __repr__(self) -> str:
        return (
            f"QueryBuilder(authors={self.authors!r}, categories={self.categories!r}, "
            f"title={self._title!r}, abstract={self._abstract!r})"
        )


def _as_list(value: str | Iterable[str]) -> Iterable[str]:
    return [value] if isinstance(value, str) else value


def _text_clause(prefix: str, text: str) -> str:
    words = text.split()
    if not words:
        return ""
    return prefix + AND.join(words)


def _list_clause(prefix: str, values: Iterable[str]) -> str:
    return AND.join(t for t in (_text_clause(prefix, v) for v in values) if t)
