"""
Custom step examples.

Demonstrates:
- Writing validators and extractors as plain functions
- Wrapping them with ValidateParam / ExtractParam
- Writing a FilterStep subclass with OpenAPI metadata
"""

from datetime import date
from typing import Any

from fastapi import Depends, FastAPI

from fastapi_query_filters import (
    ExtractParam,
    FilterStep,
    ParameterFormatError,
    RequestContext,
    ValidateParam,
    enrich_openapi,
    filter_dependency,
    new,
)

app = FastAPI(title="Custom Steps Examples")


# ========== Validator: ISO date ==========


def check_since(ctx: RequestContext) -> None:
    raw = ctx.query_value("since")
    if not raw:
        return
    try:
        date.fromisoformat(raw)
    except ValueError as exc:
        raise ParameterFormatError("since", raw, str(exc)) from None


# ========== Extractor: search terms ==========

SEARCH_KEY = object()


def extract_terms(ctx: RequestContext) -> RequestContext:
    return ctx.with_value(SEARCH_KEY, ctx.query_value("q").split())


# ========== FilterStep subclass: request tagging ==========


class RequestTag(FilterStep):
    """Attaches a fixed tag, readable by the endpoint."""

    def __init__(self, tag: str) -> None:
        self._tag = tag

    def wrap(self, next_filter):
        def _filter(ctx: RequestContext) -> RequestContext:
            return next_filter(ctx.with_value("tag", self._tag))

        return _filter

    def openapi_spec(self) -> dict[str, Any] | None:
        return {
            "parameters": [
                {
                    "name": "since",
                    "in": "query",
                    "required": False,
                    "schema": {"type": "string", "format": "date"},
                },
            ],
        }


search = new(ValidateParam(check_since), ExtractParam(extract_terms), RequestTag("v1"))


@app.get("/search")
async def search_endpoint(ctx: RequestContext = Depends(filter_dependency(search))):
    return {"terms": ctx.value(SEARCH_KEY), "tag": ctx.value("tag")}


enrich_openapi(app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # curl "http://localhost:8000/search?q=foo+bar&since=2024-01-01"
    # curl "http://localhost:8000/search?since=yesterday"   # 400
