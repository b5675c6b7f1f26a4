"""Shared pytest fixtures for fastapi-query-filters tests."""

from __future__ import annotations

from typing import Any

import pytest
from starlette.requests import Request

from fastapi_query_filters.context import RequestContext


@pytest.fixture
def make_request() -> Any:
    """Factory for creating Starlette Request objects from a raw scope."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        query_string: str = "",
    ) -> Request:
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
            ],
            "root_path": "",
        }
        return Request(scope)

    return _make


@pytest.fixture
def make_ctx(make_request: Any) -> Any:
    """Factory for creating a RequestContext around a fresh request."""

    def _make(query_string: str = "", **kwargs: Any) -> RequestContext:
        return RequestContext(request=make_request(query_string=query_string, **kwargs))

    return _make
