"""Choice steps — ChoiceValidator."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from fastapi_query_filters.adapters import ValidateParam
from fastapi_query_filters.context import RequestContext
from fastapi_query_filters.exceptions import InvalidChoice


class ChoiceValidator(ValidateParam):
    """Rejects a query value that is not one of the permitted options."""

    def __init__(self, param: str, choices: Iterable[str]) -> None:
        self._param = param
        self._choices = frozenset(choices)
        super().__init__(self._check)

    def _check(self, ctx: RequestContext) -> None:
        value = ctx.query_value(self._param)
        if value and value not in self._choices:
            raise InvalidChoice(self._param, value)

    def openapi_spec(self) -> dict[str, Any] | None:
        return {
            "parameters": [
                {
                    "name": self._param,
                    "in": "query",
                    "required": False,
                    "schema": {"type": "string", "enum": sorted(self._choices)},
                },
            ],
            "responses": {"400": {"description": "Invalid query parameter"}},
        }
