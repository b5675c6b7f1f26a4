"""filter_dependency() — factory producing FastAPI-compatible dependency callables."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import HTTPException
from starlette.requests import Request

from fastapi_query_filters.context import RequestContext
from fastapi_query_filters.exceptions import FilterException, ParameterError
from fastapi_query_filters.openapi import (
    collect_openapi_metadata,
    merge_openapi_specs,
)
from fastapi_query_filters.pipeline import Pipeline

logger = logging.getLogger(__name__)


def filter_dependency(pipeline: Pipeline) -> Callable[..., Awaitable[RequestContext]]:
    """Return a FastAPI-compatible dependency that runs the pipeline."""
    metadata = collect_openapi_metadata(pipeline)

    async def dependency(request: Request) -> RequestContext:
        ctx = RequestContext(request=request)
        try:
            return pipeline(ctx)
        except ParameterError as exc:
            logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc)
            raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
        except FilterException as exc:
            logger.warning(
                "Filter error on %s %s: %s", request.method, request.url.path, exc
            )
            raise HTTPException(
                status_code=500, detail="Internal filter error"
            ) from exc

    # Attach metadata for OpenAPI enrichment
    dependency._filter_openapi_metadata = metadata  # type: ignore[attr-defined]
    dependency._filter_pipeline = pipeline  # type: ignore[attr-defined]

    return dependency


def enrich_openapi(app: Any) -> None:
    """Enrich FastAPI app's OpenAPI schema with filter metadata.

    Call this after all routes are registered to inject the query parameters
    and error responses described by the pipeline steps. Filter dependencies
    are found anywhere in a route's dependency tree; when a route uses more
    than one pipeline their metadata is merged.
    """
    from fastapi import FastAPI
    from fastapi.routing import APIRoute

    if not isinstance(app, FastAPI):
        return

    for route in app.routes:
        if not isinstance(route, APIRoute):
            continue

        metadata = _find_filter_metadata(route)
        if not metadata:
            continue

        if "responses" in metadata:
            existing = route.responses or {}
            for code, resp in metadata["responses"].items():
                existing[int(code)] = resp
            route.responses = existing

        if "parameters" in metadata:
            route.openapi_extra = route.openapi_extra or {}
            route.openapi_extra["parameters"] = metadata["parameters"]


def _find_filter_metadata(route: Any) -> dict[str, Any] | None:
    """Collect filter OpenAPI metadata from the route's dependency tree."""
    found: list[dict[str, Any]] = []
    seen: set[int] = set()
    _walk_dependencies(route.dependant, found, seen)
    if not found:
        return None
    return merge_openapi_specs(found)


def _walk_dependencies(
    dependant: Any, found: list[dict[str, Any]], seen: set[int]
) -> None:
    for dep in dependant.dependencies:
        call = dep.call
        if hasattr(call, "_filter_openapi_metadata") and id(call) not in seen:
            seen.add(id(call))
            found.append(call._filter_openapi_metadata)
        _walk_dependencies(dep, found, seen)
