"""Orders resource handlers.

Handler functions for the order listing endpoints. Every version returns
the same logical data; they differ only in the loading strategy behind
them and therefore in the number of SQL statements per request.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_orders_v1    - entities exposed as stored (lazy, forced init)
    list_orders_v2    - entities -> OrderResponse (lazy, N+1)
    list_orders_v3    - entities -> OrderResponse (single fetch join)
    list_orders_v3_1  - entities -> OrderResponse (to-one join + IN batches, paged)
    list_orders_v4    - projection, one order-lines query per order
    list_orders_v5    - projection, one order-lines query with IN
    list_orders_v6    - flat projection, one row per order line
"""

from typing import Annotated

from fastapi import Depends, Query, Request
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError
from src.application.queries.handlers.list_order_query_dtos_handler import (
    ListOrderFlatRowsHandler,
    ListOrderQueryDtosHandler,
)
from src.application.queries.handlers.list_orders_handler import ListOrdersHandler
from src.application.queries.order_queries import (
    ListOrderFlatRows,
    ListOrderQueryDtos,
    ListOrders,
)
from src.core.config import settings
from src.core.container import (
    get_list_order_flat_rows_handler,
    get_list_order_query_dtos_handler,
    get_list_orders_handler,
)
from src.core.errors import DomainError
from src.core.result import Failure
from src.domain.enums.fetch_strategy import OrderFetchStrategy
from src.domain.enums.order_status import OrderStatus
from src.domain.protocols.order_search import OrderSearch
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.schemas.order_schemas import (
    OrderEntitySchema,
    OrderFlatResponse,
    OrderResponse,
)

MemberNameQuery = Annotated[
    str | None,
    Query(description="Case-insensitive substring of the member name"),
]
OrderStatusQuery = Annotated[
    OrderStatus | None,
    Query(description="Only orders in this status"),
]


def _error_response(error: DomainError, request: Request) -> JSONResponse:
    """Map a handler DomainError to an RFC 9457 response."""
    return ErrorResponseBuilder.from_application_error(
        error=ApplicationError.from_domain_error(error, is_command=False),
        request=request,
        trace_id=get_trace_id() or "",
    )


# =============================================================================
# Entity-backed listings
# =============================================================================


async def list_orders_v1(
    request: Request,
    member_name: MemberNameQuery = None,
    order_status: OrderStatusQuery = None,
    handler: ListOrdersHandler = Depends(get_list_orders_handler),
) -> list[OrderEntitySchema] | JSONResponse:
    """List orders by exposing the entity graph.

    GET /api/v1/orders → 200 OK

    Relations are lazily loaded one by one before serialization. Ties the
    API contract to the table layout, kept as the baseline.
    """
    result = await handler.handle(
        ListOrders(
            strategy=OrderFetchStrategy.LAZY,
            search=OrderSearch(member_name=member_name, order_status=order_status),
        )
    )
    if isinstance(result, Failure):
        return _error_response(result.error, request)

    return [OrderEntitySchema.model_validate(order) for order in result.value]


async def list_orders_v2(
    request: Request,
    member_name: MemberNameQuery = None,
    order_status: OrderStatusQuery = None,
    handler: ListOrdersHandler = Depends(get_list_orders_handler),
) -> list[OrderResponse] | JSONResponse:
    """List orders as DTOs built from lazily loaded entities (N+1).

    GET /api/v2/orders → 200 OK
    """
    result = await handler.handle(
        ListOrders(
            strategy=OrderFetchStrategy.LAZY,
            search=OrderSearch(member_name=member_name, order_status=order_status),
        )
    )
    if isinstance(result, Failure):
        return _error_response(result.error, request)

    return [OrderResponse.from_entity(order) for order in result.value]


async def list_orders_v3(
    request: Request,
    handler: ListOrdersHandler = Depends(get_list_orders_handler),
) -> list[OrderResponse] | JSONResponse:
    """List orders as DTOs from a single fetch join (1 query, not pageable).

    GET /api/v3/orders → 200 OK
    """
    result = await handler.handle(ListOrders(strategy=OrderFetchStrategy.FETCH_JOIN))
    if isinstance(result, Failure):
        return _error_response(result.error, request)

    return [OrderResponse.from_entity(order) for order in result.value]


async def list_orders_v3_1(
    request: Request,
    offset: Annotated[
        int,
        Query(ge=0, description="Orders to skip"),
    ] = 0,
    limit: Annotated[
        int,
        Query(ge=1, le=settings.max_page_limit, description="Maximum orders to return"),
    ] = settings.default_page_limit,
    handler: ListOrdersHandler = Depends(get_list_orders_handler),
) -> list[OrderResponse] | JSONResponse:
    """List one page of orders (to-one fetch join + IN batch for lines).

    GET /api/v3.1/orders?offset=0&limit=100 → 200 OK

    Args:
        request: FastAPI request object.
        offset: Orders to skip (>= 0).
        limit: Page size (1..max_page_limit).
        handler: List orders handler (injected).

    Returns:
        At most limit orders in id order.
        JSONResponse with RFC 9457 error on failure.
    """
    result = await handler.handle(
        ListOrders(
            strategy=OrderFetchStrategy.BATCH_FETCH,
            offset=offset,
            limit=limit,
        )
    )
    if isinstance(result, Failure):
        return _error_response(result.error, request)

    return [OrderResponse.from_entity(order) for order in result.value]


# =============================================================================
# Projection-backed listings
# =============================================================================


async def list_orders_v4(
    request: Request,
    handler: ListOrderQueryDtosHandler = Depends(get_list_order_query_dtos_handler),
) -> list[OrderResponse] | JSONResponse:
    """List orders from a direct projection, lines loaded per order (1 + N).

    GET /api/v4/orders → 200 OK
    """
    result = await handler.handle(
        ListOrderQueryDtos(strategy=OrderFetchStrategy.DTO_PER_ORDER)
    )
    if isinstance(result, Failure):
        return _error_response(result.error, request)

    return [OrderResponse.from_dto(dto) for dto in result.value]


async def list_orders_v5(
    request: Request,
    handler: ListOrderQueryDtosHandler = Depends(get_list_order_query_dtos_handler),
) -> list[OrderResponse] | JSONResponse:
    """List orders from a direct projection, lines loaded with IN (1 + 1).

    GET /api/v5/orders → 200 OK
    """
    result = await handler.handle(
        ListOrderQueryDtos(strategy=OrderFetchStrategy.DTO_IN_CLAUSE)
    )
    if isinstance(result, Failure):
        return _error_response(result.error, request)

    return [OrderResponse.from_dto(dto) for dto in result.value]


async def list_orders_v6(
    request: Request,
    handler: ListOrderFlatRowsHandler = Depends(get_list_order_flat_rows_handler),
) -> list[OrderFlatResponse] | JSONResponse:
    """List one flat row per order line from a single query.

    GET /api/v6/orders → 200 OK

    Cannot be paginated. Orders without lines produce no row and are
    absent, unlike every other version. Regrouping rows into orders is
    left to the client (see group_flat_rows for the server-side
    equivalent).
    """
    result = await handler.handle(ListOrderFlatRows())
    if isinstance(result, Failure):
        return _error_response(result.error, request)

    return [OrderFlatResponse.from_dto(row) for row in result.value]
