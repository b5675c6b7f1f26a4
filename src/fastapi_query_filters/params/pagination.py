"""Pagination steps — PaginationValidator, PaginationExtractor."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from fastapi_query_filters.adapters import ExtractParam, ValidateParam
from fastapi_query_filters.context import ContextKey, RequestContext
from fastapi_query_filters.exceptions import ParameterFormatError

_PARAMS = ("limit", "offset")

# ASCII digits with an optional sign; no whitespace or underscores.
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _is_integer(raw: str) -> bool:
    return _INTEGER.fullmatch(raw) is not None


def _schema_default(raw: str) -> int | str:
    return int(raw) if _is_integer(raw) else raw


@dataclass(frozen=True)
class Pagination:
    """Raw limit/offset strings; numeric shape is checked by the validator."""

    limit: str
    offset: str


class PaginationValidator(ValidateParam):
    """Rejects non-integer ``limit`` or ``offset`` query values."""

    def __init__(self) -> None:
        super().__init__(self._check)

    @staticmethod
    def _check(ctx: RequestContext) -> None:
        for param in _PARAMS:
            raw = ctx.query_value(param)
            if not raw:
                continue
            if not _is_integer(raw):
                raise ParameterFormatError(
                    param, raw, f"invalid literal for int() with base 10: {raw!r}"
                )

    def openapi_spec(self) -> dict[str, Any] | None:
        return {
            "parameters": [
                {
                    "name": param,
                    "in": "query",
                    "required": False,
                    "schema": {"type": "integer"},
                }
                for param in _PARAMS
            ],
            "responses": {"400": {"description": "Invalid query parameter"}},
        }


class PaginationExtractor(ExtractParam):
    """Attaches a Pagination built from defaults and the query string."""

    def __init__(self, default: Pagination) -> None:
        self._default = default
        super().__init__(self._extract_pagination)

    def _extract_pagination(self, ctx: RequestContext) -> RequestContext:
        pagination = Pagination(
            limit=ctx.query_value("limit") or self._default.limit,
            offset=ctx.query_value("offset") or self._default.offset,
        )
        return ctx.with_value(ContextKey.PAGINATION, pagination)

    def openapi_spec(self) -> dict[str, Any] | None:
        return {
            "parameters": [
                {
                    "name": "limit",
                    "in": "query",
                    "required": False,
                    "schema": {"default": _schema_default(self._default.limit)},
                    "description": "Max items to return",
                },
                {
                    "name": "offset",
                    "in": "query",
                    "required": False,
                    "schema": {"default": _schema_default(self._default.offset)},
                    "description": "Number of items to skip",
                },
            ],
        }
