"""RequestContext — immutable per-request carrier for extracted data."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any

from starlette.requests import Request


class ContextKey(Enum):
    """Keys reserved for data attached by the built-in extractors."""

    PAGINATION = "pagination"
    SORT = "sort"


@dataclass(frozen=True, eq=False)
class RequestContext:
    """Starlette request plus the values extracted from it so far.

    Never mutated in place: extractors call ``with_value`` and hand the new
    instance down the chain.
    """

    request: Request
    extracted: Mapping[Any, Any] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def with_value(self, key: Any, value: Any) -> RequestContext:
        merged = dict(self.extracted)
        merged[key] = value
        return replace(self, extracted=MappingProxyType(merged))

    def with_request(self, request: Request) -> RequestContext:
        return replace(self, request=request)

    def value(self, key: Any) -> Any | None:
        return self.extracted.get(key)

    def query_value(self, name: str) -> str:
        """First value of a query parameter, or ``""`` when absent."""
        values = self.request.query_params.getlist(name)
        return values[0] if values else ""
