"""FilterStep abstract base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from fastapi_query_filters._types import Filter


class FilterStep(ABC):
    """Base abstraction for pipeline steps.

    A step is a ConfigFilter: calling it with the next filter returns a new
    filter wrapping it.
    """

    @abstractmethod
    def wrap(self, next_filter: Filter) -> Filter: ...

    def __call__(self, next_filter: Filter) -> Filter:
        return self.wrap(next_filter)

    def openapi_spec(self) -> dict[str, Any] | None:
        return None
