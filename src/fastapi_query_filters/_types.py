"""Shared type aliases for pipeline building blocks."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi_query_filters.context import RequestContext

# A composed pipeline stage: takes a ctx, returns the (possibly replaced) ctx.
Filter = Callable[["RequestContext"], "RequestContext"]
# A decorator wrapping the next Filter in the chain.
ConfigFilter = Callable[[Filter], Filter]
# Non-transforming check; raises FilterException on failure.
Validate = Callable[["RequestContext"], None]
# Transforming step; may attach derived data to the ctx.
Extract = Callable[["RequestContext"], "RequestContext"]
