"""OpenAPI schema enrichment — collects metadata from pipeline steps."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from fastapi_query_filters.pipeline import Pipeline


def merge_openapi_specs(specs: Iterable[dict[str, Any] | None]) -> dict[str, Any]:
    """Merge step-level OpenAPI fragments into one.

    Parameters described more than once (a validator and an extractor for the
    same query value) are merged into a single entry keyed by ``(name, in)``.
    """
    parameters: dict[tuple[str, str], dict[str, Any]] = {}
    responses: dict[str, Any] = {}

    for spec in specs:
        if spec is None:
            continue

        for param in spec.get("parameters", []):
            key = (param["name"], param["in"])
            existing = parameters.get(key)
            if existing is None:
                parameters[key] = {**param, "schema": dict(param.get("schema", {}))}
                continue
            existing["schema"].update(param.get("schema", {}))
            for name, value in param.items():
                if name != "schema":
                    existing.setdefault(name, value)

        responses.update(spec.get("responses", {}))

    result: dict[str, Any] = {}
    if parameters:
        result["parameters"] = list(parameters.values())
    if responses:
        result["responses"] = responses

    return result


def collect_openapi_metadata(pipeline: Pipeline) -> dict[str, Any]:
    """Collect and merge OpenAPI metadata from all steps of a pipeline."""
    specs = []
    for step in pipeline.steps:
        openapi_spec = getattr(step, "openapi_spec", None)
        if callable(openapi_spec):
            specs.append(openapi_spec())
    return merge_openapi_specs(specs)
