"""FilterException hierarchy for rejected and unresolvable requests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fastapi_query_filters.context import RequestContext


class FilterException(Exception):
    """Base for all filter exceptions.

    ``ctx`` is the request value at the time of failure; the adapters fill it
    in when the exception passes through them.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail
        self.ctx: RequestContext | None = None


class ParameterError(FilterException):
    """A query parameter was rejected (400)."""

    status_code = 400


class ParameterFormatError(ParameterError):
    """A query value failed to parse as the expected primitive type."""

    def __init__(self, param: str, value: str, reason: str) -> None:
        super().__init__(f"{param}: {reason}")
        self.param = param
        self.value = value
        self.reason = reason


class InvalidColumn(ParameterError):
    """Requested sort column is not in the allow-list."""

    def __init__(self, column: str) -> None:
        super().__init__(f"{column} is not sortable")
        self.column = column


class InvalidChoice(ParameterError):
    """Requested value is not one of the permitted options."""

    def __init__(self, param: str, value: str) -> None:
        super().__init__(f"{value} is an invalid option for {param}")
        self.param = param
        self.value = value


class ExtractionFailed(FilterException):
    """A custom extractor failed for its own reasons."""

    def __init__(self, detail: str, *, cause: Exception | None = None) -> None:
        super().__init__(detail)
        self.cause = cause


class ContextNotFound(FilterException, LookupError):
    """No (or a malformed) entry was found for a context key."""

    def __init__(self, detail: str, *, key: Any = None) -> None:
        super().__init__(detail)
        self.key = key
