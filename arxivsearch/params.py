# arxivsearch/params.py
import logging
from dataclasses import dataclass
from typing import Any, Literal

logger = logging.getLogger(__name__)

SortBy = Literal["relevance", "lastUpdatedDate", "submittedDate"]
SortOrder = Literal["descending", "ascending"]

SORT_BY_VALUES: tuple[str, ...] = ("relevance", "lastUpdatedDate", "submittedDate")
SORT_ORDER_VALUES: tuple[str, ...] = ("descending", "ascending")

DEFAULT_START = 0
DEFAULT_MAX_RESULTS = 10
DEFAULT_SORT_BY: SortBy = "relevance"
DEFAULT_SORT_ORDER: SortOrder = "descending"


@dataclass(frozen=True)
class SearchParams:
    """Paging and sorting parameters sent alongside ``search_query``."""

    start: int = DEFAULT_START
    max_results: int = DEFAULT_MAX_RESULTS
    sort_by: SortBy = DEFAULT_SORT_BY
    sort_order: SortOrder = DEFAULT_SORT_ORDER

    @classmethod
    def create(
        cls,
        start: Any = DEFAULT_START,
        max_results: Any = DEFAULT_MAX_RESULTS,
        sort_by: Any = DEFAULT_SORT_BY,
        sort_order: Any = DEFAULT_SORT_ORDER,
    ) -> "SearchParams":
        """Validate raw values, substituting the default for anything invalid.

        Offsets and limits must be non-negative integers (or strings of
        digits). Sort keys must be one of the values the API recognizes.
        """
        return cls(
            start=_number_or_default("start", start, DEFAULT_START),
            max_results=_number_or_default("max_results", max_results, DEFAULT_MAX_RESULTS),
            sort_by=_choice_or_default("sort_by", sort_by, SORT_BY_VALUES, DEFAULT_SORT_BY),
            sort_order=_choice_or_default(
                "sort_order", sort_order, SORT_ORDER_VALUES, DEFAULT_SORT_ORDER
            ),
        )

    def to_query_params(self, search_query: str) -> dict[str, str | int]:
        return {
            "search_query": search_query,
            "sortBy": self.sort_by,
            "sortOrder": self.sort_order,
            "start": self.start,
            "max_results": self.max_results,
        }


def _number_or_default(name: str, value: Any, default: int) -> int:
    if isinstance(value, bool):
        number = None
    elif isinstance(value, int):
        number = value
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    elif isinstance(value, str) and value.strip().isdigit():
        # isdigit() also accepts characters such as "²" that int() rejects
        try:
            number = int(value.strip())
        except ValueError:
            number = None
    else:
        number = None

    if number is None or number < 0:
        logger.debug("Invalid %s %r, using default %s", name, value, default)
        return default
    return number


def _choice_or_default(name: str, value: Any, choices: tuple[str, ...], default: Any) -> Any:
    if value in choices:
        return value
    logger.debug("Invalid %s %r, using default %s", name, value, default)
    return default
