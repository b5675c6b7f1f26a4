"""Sort steps — SortValidator, SortExtractor."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Literal

from fastapi_query_filters.adapters import ExtractParam, ValidateParam
from fastapi_query_filters.context import ContextKey, RequestContext
from fastapi_query_filters.exceptions import InvalidColumn

SortDirection = Literal["ASC", "DESC"]

# Leading marker for descending order, e.g. ``?sort=-name``.
DESC_PREFIX = "-"


@dataclass(frozen=True)
class Sort:
    column: str
    direction: SortDirection


def _split(raw: str) -> tuple[str, SortDirection]:
    if raw.startswith(DESC_PREFIX):
        return raw[len(DESC_PREFIX) :], "DESC"
    return raw, "ASC"


class SortValidator(ValidateParam):
    """Rejects ``sort`` values naming a column outside the allow-list."""

    def __init__(self, columns: Iterable[str]) -> None:
        self._columns = tuple(columns)
        self._allowed = frozenset(self._columns)
        super().__init__(self._check)

    def _check(self, ctx: RequestContext) -> None:
        raw = ctx.query_value("sort")
        if not raw:
            return
        column, _ = _split(raw)
        if column not in self._allowed:
            raise InvalidColumn(column)

    def openapi_spec(self) -> dict[str, Any] | None:
        options = [*self._columns, *(DESC_PREFIX + c for c in self._columns)]
        return {
            "parameters": [
                {
                    "name": "sort",
                    "in": "query",
                    "required": False,
                    "schema": {"type": "string", "enum": options},
                    "description": "Column to sort by, prefix with '-' for descending",
                },
            ],
            "responses": {"400": {"description": "Invalid query parameter"}},
        }


class SortExtractor(ExtractParam):
    """Attaches a Sort parsed from ``sort``, falling back to the default."""

    def __init__(self, default: Sort) -> None:
        self._default = default
        super().__init__(self._extract_sort)

    def _extract_sort(self, ctx: RequestContext) -> RequestContext:
        raw = ctx.query_value("sort")
        if raw:
            column, direction = _split(raw)
            sort = Sort(column=column, direction=direction)
        else:
            sort = Sort(column=self._default.column, direction=self._default.direction)
        return ctx.with_value(ContextKey.SORT, sort)

    def openapi_spec(self) -> dict[str, Any] | None:
        default = self._default.column
        if self._default.direction == "DESC":
            default = DESC_PREFIX + default
        return {
            "parameters": [
                {
                    "name": "sort",
                    "in": "query",
                    "required": False,
                    "schema": {"default": default},
                },
            ],
        }
