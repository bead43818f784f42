"""Simple orders resource handlers (member and delivery, no order lines).

Handlers:
    list_simple_orders_v1 - entities exposed as stored (lazy, forced init)
    list_simple_orders_v2 - entities -> SimpleOrderResponse (lazy, 1 + 2N)
    list_simple_orders_v3 - entities -> SimpleOrderResponse (fetch join, 1)
    list_simple_orders_v4 - header projection (1)
"""

from typing import Annotated

from fastapi import Depends, Query, Request
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError
from src.application.queries.handlers.list_simple_orders_handler import (
    ListSimpleOrderQueryDtosHandler,
    ListSimpleOrdersHandler,
)
from src.application.queries.order_queries import (
    ListSimpleOrderQueryDtos,
    ListSimpleOrders,
)
from src.core.container import (
    get_list_simple_order_query_dtos_handler,
    get_list_simple_orders_handler,
)
from src.core.errors import DomainError
from src.core.result import Failure
from src.domain.enums.fetch_strategy import OrderFetchStrategy
from src.domain.enums.order_status import OrderStatus
from src.domain.protocols.order_search import OrderSearch
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.schemas.order_schemas import SimpleOrderEntitySchema, SimpleOrderResponse

MemberNameQuery = Annotated[
    str | None,
    Query(description="Case-insensitive substring of the member name"),
]
OrderStatusQuery = Annotated[
    OrderStatus | None,
    Query(description="Only orders in this status"),
]


def _error_response(error: DomainError, request: Request) -> JSONResponse:
    return ErrorResponseBuilder.from_application_error(
        error=ApplicationError.from_domain_error(error, is_command=False),
        request=request,
        trace_id=get_trace_id() or "",
    )


async def list_simple_orders_v1(
    request: Request,
    member_name: MemberNameQuery = None,
    order_status: OrderStatusQuery = None,
    handler: ListSimpleOrdersHandler = Depends(get_list_simple_orders_handler),
) -> list[SimpleOrderEntitySchema] | JSONResponse:
    """List orders by exposing member and delivery entities.

    GET /api/v1/simple-orders → 200 OK
    """
    result = await handler.handle(
        ListSimpleOrders(
            strategy=OrderFetchStrategy.LAZY,
            search=OrderSearch(member_name=member_name, order_status=order_status),
        )
    )
    if isinstance(result, Failure):
        return _error_response(result.error, request)

    return [SimpleOrderEntitySchema.model_validate(order) for order in result.value]


async def list_simple_orders_v2(
    request: Request,
    member_name: MemberNameQuery = None,
    order_status: OrderStatusQuery = None,
    handler: ListSimpleOrdersHandler = Depends(get_list_simple_orders_handler),
) -> list[SimpleOrderResponse] | JSONResponse:
    """List simple orders converted from lazily loaded entities.

    GET /api/v2/simple-orders → 200 OK
    """
    result = await handler.handle(
        ListSimpleOrders(
            strategy=OrderFetchStrategy.LAZY,
            search=OrderSearch(member_name=member_name, order_status=order_status),
        )
    )
    if isinstance(result, Failure):
        return _error_response(result.error, request)

    return [SimpleOrderResponse.from_entity(order) for order in result.value]


async def list_simple_orders_v3(
    request: Request,
    handler: ListSimpleOrdersHandler = Depends(get_list_simple_orders_handler),
) -> list[SimpleOrderResponse] | JSONResponse:
    """List simple orders with member and delivery fetch-joined.

    GET /api/v3/simple-orders → 200 OK
    """
    result = await handler.handle(
        ListSimpleOrders(strategy=OrderFetchStrategy.FETCH_JOIN)
    )
    if isinstance(result, Failure):
        return _error_response(result.error, request)

    return [SimpleOrderResponse.from_entity(order) for order in result.value]


async def list_simple_orders_v4(
    request: Request,
    handler: ListSimpleOrderQueryDtosHandler = Depends(
        get_list_simple_order_query_dtos_handler
    ),
) -> list[SimpleOrderResponse] | JSONResponse:
    """List simple orders from a single projection query.

    GET /api/v4/simple-orders → 200 OK
    """
    result = await handler.handle(ListSimpleOrderQueryDtos())
    if isinstance(result, Failure):
        return _error_response(result.error, request)

    return [SimpleOrderResponse.from_dto(dto) for dto in result.value]
