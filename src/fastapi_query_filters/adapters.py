"""ValidateParam and ExtractParam — turn plain callables into steps."""

from __future__ import annotations

from fastapi_query_filters._types import Extract, Filter, Validate
from fastapi_query_filters.context import RequestContext
from fastapi_query_filters.exceptions import ExtractionFailed, FilterException
from fastapi_query_filters.step import FilterStep


class ValidateParam(FilterStep):
    """Runs a check; forwards the original ctx unchanged when it passes."""

    def __init__(self, validate: Validate) -> None:
        self._validate = validate

    def wrap(self, next_filter: Filter) -> Filter:
        validate = self._validate

        def _filter(ctx: RequestContext) -> RequestContext:
            try:
                validate(ctx)
            except FilterException as exc:
                exc.ctx = ctx
                raise
            return next_filter(ctx)

        return _filter


class ExtractParam(FilterStep):
    """Runs an extractor; forwards the ctx it returns to the next filter."""

    def __init__(self, extract: Extract) -> None:
        self._extract = extract

    def wrap(self, next_filter: Filter) -> Filter:
        extract = self._extract

        def _filter(ctx: RequestContext) -> RequestContext:
            try:
                extracted = extract(ctx)
            except FilterException as exc:
                if exc.ctx is None:
                    exc.ctx = ctx
                raise
            except Exception as exc:
                wrapped = ExtractionFailed(f"Extraction failed: {exc}", cause=exc)
                wrapped.ctx = ctx
                raise wrapped from exc
            return next_filter(extracted)

        return _filter
