"""
Basic usage example of fastapi-query-filters.

Demonstrates:
- Assembling a pipeline of validators and extractors
- Using the pipeline as a FastAPI dependency
- Reading extracted pagination and sort data in endpoints
"""

from fastapi import Depends, FastAPI

from fastapi_query_filters import (
    ChoiceValidator,
    Pagination,
    PaginationExtractor,
    PaginationValidator,
    RequestContext,
    Sort,
    SortExtractor,
    SortValidator,
    enrich_openapi,
    filter_dependency,
    get_pagination_context,
    get_sort_context,
    new,
)

app = FastAPI(title="Query Filters Example")

USERS = [
    {"name": "alice", "role": "admin"},
    {"name": "bob", "role": "user"},
    {"name": "carol", "role": "user"},
]

list_users = new(
    PaginationValidator(),
    PaginationExtractor(Pagination(limit="20", offset="0")),
    SortValidator(["name", "role"]),
    SortExtractor(Sort(column="name", direction="ASC")),
)

list_prices = new(ChoiceValidator("currency", ["USD", "NIS"]))


@app.get("/users")
async def users(ctx: RequestContext = Depends(filter_dependency(list_users))):
    """List users - supports ?limit=, ?offset= and ?sort=[-]name|role."""
    pagination = get_pagination_context(ctx)
    sort = get_sort_context(ctx)

    rows = sorted(
        USERS, key=lambda u: u[sort.column], reverse=sort.direction == "DESC"
    )
    offset, limit = int(pagination.offset), int(pagination.limit)
    return {"items": rows[offset : offset + limit]}


@app.get("/prices")
async def prices(ctx: RequestContext = Depends(filter_dependency(list_prices))):
    """Prices in a supported currency."""
    currency = ctx.query_value("currency") or "USD"
    return {"currency": currency, "amount": 10}


# Document limit/offset/sort/currency in the OpenAPI schema
enrich_openapi(app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl "http://localhost:8000/users?sort=-role&limit=2"
    # curl "http://localhost:8000/users?limit=abc"        # 400
    # curl "http://localhost:8000/users?sort=email"       # 400
    # curl "http://localhost:8000/prices?currency=EUR"    # 400
