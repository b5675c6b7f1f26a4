"""FastAPI Query Filters - composable query-parameter filters for FastAPI."""

from fastapi_query_filters.accessors import get_pagination_context, get_sort_context
from fastapi_query_filters.adapters import ExtractParam, ValidateParam
from fastapi_query_filters.context import RequestContext
from fastapi_query_filters.dependency import enrich_openapi, filter_dependency
from fastapi_query_filters.exceptions import (
    ContextNotFound,
    ExtractionFailed,
    FilterException,
    InvalidChoice,
    InvalidColumn,
    ParameterError,
    ParameterFormatError,
)
from fastapi_query_filters.params.choice import ChoiceValidator
from fastapi_query_filters.params.pagination import (
    Pagination,
    PaginationExtractor,
    PaginationValidator,
)
from fastapi_query_filters.params.sort import Sort, SortExtractor, SortValidator
from fastapi_query_filters.pipeline import Pipeline, identity, new
from fastapi_query_filters.step import FilterStep

__all__ = [
    "ChoiceValidator",
    "ContextNotFound",
    "ExtractParam",
    "ExtractionFailed",
    "FilterException",
    "FilterStep",
    "InvalidChoice",
    "InvalidColumn",
    "Pagination",
    "PaginationExtractor",
    "PaginationValidator",
    "ParameterError",
    "ParameterFormatError",
    "Pipeline",
    "RequestContext",
    "Sort",
    "SortExtractor",
    "SortValidator",
    "ValidateParam",
    "enrich_openapi",
    "filter_dependency",
    "get_pagination_context",
    "get_sort_context",
    "identity",
    "new",
]
