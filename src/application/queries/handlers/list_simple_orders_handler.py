"""Simple order query handlers (member and delivery only).

Handlers:
    ListSimpleOrdersHandler         - entities, lazy or fetch-joined
    ListSimpleOrderQueryDtosHandler - header projection, one query
"""

from typing import TYPE_CHECKING

from src.application.queries.order_queries import (
    ListSimpleOrderQueryDtos,
    ListSimpleOrders,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums.fetch_strategy import OrderFetchStrategy
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.order_query_repository import (
    OrderSimpleQueryDto,
    OrderSimpleQueryRepository,
)
from src.domain.protocols.order_repository import OrderRepository

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.order import Order


class ListSimpleOrdersHandler:
    """Handler for ListSimpleOrders query.

    LAZY issues 1 + N (member) + N (delivery) statements, FETCH_JOIN one.
    order_items is never touched.

    Returns:
        Result[list[Order], DomainError]
    """

    def __init__(self, order_repo: OrderRepository, logger: LoggerProtocol) -> None:
        self._order_repo = order_repo
        self._logger = logger

    async def handle(
        self, query: ListSimpleOrders
    ) -> Result[list["Order"], DomainError]:
        """Handle ListSimpleOrders query.

        Args:
            query: ListSimpleOrders query.

        Returns:
            Success(list[Order]): Orders with member and delivery loaded.
            Failure(ValidationError): Strategy other than LAZY/FETCH_JOIN.
        """
        match query.strategy:
            case OrderFetchStrategy.LAZY:
                orders = await self._order_repo.find_all_by_search(query.search)
                for order in orders:
                    await order.awaitable_attrs.member
                    await order.awaitable_attrs.delivery
            case OrderFetchStrategy.FETCH_JOIN:
                orders = await self._order_repo.find_all_with_member_delivery(
                    query.search
                )
            case _:
                self._logger.warning(
                    "simple_orders_query_rejected",
                    strategy=query.strategy.value,
                    error_code=ErrorCode.UNSUPPORTED_FETCH_STRATEGY.value,
                )
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.UNSUPPORTED_FETCH_STRATEGY,
                        message=f"Strategy '{query.strategy.value}' is not supported for simple orders",
                        field="strategy",
                    )
                )

        self._logger.info(
            "simple_orders_listed",
            strategy=query.strategy.value,
            count=len(orders),
        )
        return Success(value=orders)


class ListSimpleOrderQueryDtosHandler:
    """Handler for ListSimpleOrderQueryDtos query."""

    def __init__(
        self, query_repo: OrderSimpleQueryRepository, logger: LoggerProtocol
    ) -> None:
        self._query_repo = query_repo
        self._logger = logger

    async def handle(
        self, query: ListSimpleOrderQueryDtos
    ) -> Result[list[OrderSimpleQueryDto], DomainError]:
        orders = await self._query_repo.find_order_dtos()
        self._logger.info(
            "simple_orders_listed",
            strategy=OrderFetchStrategy.DTO_SIMPLE.value,
            count=len(orders),
        )
        return Success(value=orders)
