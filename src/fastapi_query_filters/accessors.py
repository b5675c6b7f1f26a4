"""Typed getters for data attached by the built-in extractors."""

from __future__ import annotations

from fastapi_query_filters.context import ContextKey, RequestContext
from fastapi_query_filters.exceptions import ContextNotFound
from fastapi_query_filters.params.pagination import Pagination
from fastapi_query_filters.params.sort import Sort


def get_pagination_context(ctx: RequestContext) -> Pagination:
    value = ctx.value(ContextKey.PAGINATION)
    if not isinstance(value, Pagination):
        raise ContextNotFound("No pagination was found", key=ContextKey.PAGINATION)
    return value


def get_sort_context(ctx: RequestContext) -> Sort:
    value = ctx.value(ContextKey.SORT)
    if not isinstance(value, Sort):
        raise ContextNotFound("No sort was found", key=ContextKey.SORT)
    return value
