"""Built-in query parameter steps."""

from fastapi_query_filters.params.choice import ChoiceValidator
from fastapi_query_filters.params.pagination import (
    Pagination,
    PaginationExtractor,
    PaginationValidator,
)
from fastapi_query_filters.params.sort import Sort, SortExtractor, SortValidator

__all__ = [
    "ChoiceValidator",
    "Pagination",
    "PaginationExtractor",
    "PaginationValidator",
    "Sort",
    "SortExtractor",
    "SortValidator",
]
