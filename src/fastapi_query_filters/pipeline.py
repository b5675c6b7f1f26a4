"""Pipeline — composes filter steps into a single callable."""

from __future__ import annotations

from fastapi_query_filters._types import ConfigFilter, Filter
from fastapi_query_filters.context import RequestContext


def identity(ctx: RequestContext) -> RequestContext:
    return ctx


class Pipeline:
    """Ordered chain of steps, folded into one filter at construction.

    Steps run in the order given: ``Pipeline(a, b)`` runs ``a`` first. The
    first step to raise stops the chain.
    """

    def __init__(self, *steps: ConfigFilter) -> None:
        self._steps: tuple[ConfigFilter, ...] = steps

        composed: Filter = identity
        # Wrap from the innermost step outward so the first step runs first.
        for step in reversed(steps):
            composed = step(composed)
        self._filter = composed

    @property
    def steps(self) -> tuple[ConfigFilter, ...]:
        return self._steps

    def __call__(self, ctx: RequestContext) -> RequestContext:
        return self._filter(ctx)

    def __len__(self) -> int:
        return len(self._steps)


def new(*steps: ConfigFilter) -> Pipeline:
    """Build a pipeline from configuration steps."""
    return Pipeline(*steps)
