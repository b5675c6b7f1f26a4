"""Integration tests for filter_dependency with FastAPI."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi import Depends, FastAPI, HTTPException
from httpx import ASGITransport, AsyncClient

from fastapi_query_filters.accessors import get_pagination_context, get_sort_context
from fastapi_query_filters.adapters import ExtractParam
from fastapi_query_filters.context import RequestContext
from fastapi_query_filters.dependency import filter_dependency
from fastapi_query_filters.exceptions import ContextNotFound
from fastapi_query_filters.params.choice import ChoiceValidator
from fastapi_query_filters.params.pagination import (
    Pagination,
    PaginationExtractor,
    PaginationValidator,
)
from fastapi_query_filters.params.sort import Sort, SortExtractor, SortValidator
from fastapi_query_filters.pipeline import Pipeline, new

LIST_PIPELINE = new(
    PaginationValidator(),
    PaginationExtractor(Pagination(limit="30", offset="0")),
    SortValidator(["name", "role"]),
    SortExtractor(Sort(column="name", direction="DESC")),
    ChoiceValidator("currency", ["USD", "NIS"]),
)


def _make_app(pipeline: Pipeline) -> FastAPI:
    app = FastAPI()

    @app.get("/users")
    async def list_users(
        ctx: RequestContext = Depends(filter_dependency(pipeline)),  # noqa: B008
    ) -> dict[str, Any]:
        try:
            pagination = get_pagination_context(ctx)
            sort = get_sort_context(ctx)
        except ContextNotFound as exc:
            return {"missing": exc.detail}
        return {
            "limit": pagination.limit,
            "offset": pagination.offset,
            "column": sort.column,
            "direction": sort.direction,
        }

    return app


async def _get(app: FastAPI, path: str = "/users", **kwargs: Any) -> Any:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.get(path, **kwargs)


class TestFilterDependencyIntegration:
    async def test_defaults_applied(self) -> None:
        resp = await _get(_make_app(LIST_PIPELINE))
        assert resp.status_code == 200
        assert resp.json() == {
            "limit": "30",
            "offset": "0",
            "column": "name",
            "direction": "DESC",
        }

    async def test_query_values_extracted(self) -> None:
        resp = await _get(
            _make_app(LIST_PIPELINE), "/users?limit=34&offset=3&sort=role"
        )
        assert resp.status_code == 200
        assert resp.json() == {
            "limit": "34",
            "offset": "3",
            "column": "role",
            "direction": "ASC",
        }

    async def test_bad_pagination_returns_400(self) -> None:
        resp = await _get(_make_app(LIST_PIPELINE), "/users?limit=s200")
        assert resp.status_code == 400
        assert "s200" in resp.json()["detail"]

    async def test_unsortable_column_returns_400(self) -> None:
        resp = await _get(_make_app(LIST_PIPELINE), "/users?sort=-rank")
        assert resp.status_code == 400
        assert resp.json()["detail"] == "rank is not sortable"

    async def test_invalid_choice_returns_400(self) -> None:
        resp = await _get(_make_app(LIST_PIPELINE), "/users?currency=BLA")
        assert resp.status_code == 400
        assert resp.json()["detail"] == "BLA is an invalid option for currency"

    async def test_failing_extractor_returns_500(self) -> None:
        def broken(ctx: RequestContext) -> RequestContext:
            raise RuntimeError("boom")

        resp = await _get(_make_app(new(ExtractParam(broken))))
        assert resp.status_code == 500
        assert resp.json()["detail"] == "Internal filter error"

    async def test_handler_sees_missing_context(self) -> None:
        resp = await _get(_make_app(new(PaginationValidator())))
        assert resp.status_code == 200
        assert resp.json() == {"missing": "No pagination was found"}


class TestFilterDependencyDirect:
    async def test_returns_enriched_ctx(self, make_request: Any) -> None:
        dep = filter_dependency(LIST_PIPELINE)
        ctx = await dep(make_request(query_string="sort=-role"))
        assert get_sort_context(ctx) == Sort(column="role", direction="DESC")

    async def test_parameter_error_mapped(self, make_request: Any) -> None:
        dep = filter_dependency(LIST_PIPELINE)
        with pytest.raises(HTTPException) as exc_info:
            await dep(make_request(query_string="offset=blabla"))
        assert exc_info.value.status_code == 400

    def test_metadata_attached(self) -> None:
        dep = filter_dependency(LIST_PIPELINE)
        assert dep._filter_pipeline is LIST_PIPELINE  # type: ignore[attr-defined]
        assert "parameters" in dep._filter_openapi_metadata  # type: ignore[attr-defined]
