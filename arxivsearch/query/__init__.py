# arxivsearch/query/__init__.py
from arxivsearch.query.builder import QueryBuilder
from arxivsearch.query.categories import CATEGORIES, is_valid_category

__all__ = ["QueryBuilder", "CATEGORIES", "is_valid_category"]
