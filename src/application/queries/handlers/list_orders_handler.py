"""ListOrders query handler.

Returns Order entities with member, delivery, order_items and
order_items.item initialized, using the loading strategy named by the
query. Serialization happens later, outside the session's async context,
so every relation the response reads must be loaded here.

Architecture:
- Application layer handler (orchestrates repository calls)
- Returns Result[list[Order], DomainError]
- Strategy and paging checks fail with ValidationError
"""

from typing import TYPE_CHECKING

from src.application.queries.order_queries import ListOrders
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums.fetch_strategy import OrderFetchStrategy
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.order_repository import OrderRepository

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.order import Order

ENTITY_STRATEGIES = frozenset(
    {
        OrderFetchStrategy.LAZY,
        OrderFetchStrategy.FETCH_JOIN,
        OrderFetchStrategy.BATCH_FETCH,
    }
)


async def initialize_order_graph(order: "Order") -> None:
    """Trigger the lazy loads of one order, one SELECT per unloaded relation.

    Already-loaded relations return immediately, so this is a no-op for
    orders that came back from a fetch join.
    """
    await order.awaitable_attrs.member
    await order.awaitable_attrs.delivery
    for order_item in await order.awaitable_attrs.order_items:
        await order_item.awaitable_attrs.item


class ListOrdersHandler:
    """Handler for ListOrders query.

    Dependencies (injected via constructor):
        - OrderRepository: Entity order queries
        - LoggerProtocol: Structured logging
        - default_page_limit / max_page_limit: Paging bounds from settings

    Returns:
        Result[list[Order], DomainError]: Success(orders) or Failure(error)
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        logger: LoggerProtocol,
        default_page_limit: int = 100,
        max_page_limit: int = 1000,
    ) -> None:
        self._order_repo = order_repo
        self._logger = logger
        self._default_page_limit = default_page_limit
        self._max_page_limit = max_page_limit

    async def handle(self, query: ListOrders) -> Result[list["Order"], DomainError]:
        """Handle ListOrders query.

        Args:
            query: ListOrders query.

        Returns:
            Success(list[Order]): Orders in id order with graph initialized.
            Failure(ValidationError): Unsupported strategy, search outside
                LAZY, paging outside BATCH_FETCH, or out-of-range paging.
        """
        error = self._validate(query)
        if error is not None:
            self._logger.warning(
                "orders_query_rejected",
                strategy=query.strategy.value,
                error_code=error.code.value,
            )
            return Failure(error=error)

        match query.strategy:
            case OrderFetchStrategy.LAZY:
                orders = await self._order_repo.find_all_by_search(query.search)
                for order in orders:
                    await initialize_order_graph(order)
            case OrderFetchStrategy.FETCH_JOIN:
                orders = await self._order_repo.find_all_with_item()
            case _:
                orders = await self._order_repo.find_all_with_member_delivery_page(
                    offset=query.offset if query.offset is not None else 0,
                    limit=(
                        query.limit
                        if query.limit is not None
                        else self._default_page_limit
                    ),
                )

        self._logger.info(
            "orders_listed",
            strategy=query.strategy.value,
            count=len(orders),
        )
        return Success(value=orders)

    def _validate(self, query: ListOrders) -> ValidationError | None:
        if query.strategy not in ENTITY_STRATEGIES:
            return ValidationError(
                code=ErrorCode.UNSUPPORTED_FETCH_STRATEGY,
                message=f"Strategy '{query.strategy.value}' does not load entities",
                field="strategy",
            )

        if not query.search.is_empty() and query.strategy is not OrderFetchStrategy.LAZY:
            return ValidationError(
                code=ErrorCode.SEARCH_NOT_SUPPORTED,
                message=f"Strategy '{query.strategy.value}' does not support search filters",
                field="member_name" if query.search.member_name else "order_status",
            )

        has_paging = query.offset is not None or query.limit is not None
        if has_paging and not query.strategy.supports_pagination:
            return ValidationError(
                code=ErrorCode.PAGINATION_NOT_SUPPORTED,
                message=f"Strategy '{query.strategy.value}' does not support pagination",
                field="offset" if query.offset is not None else "limit",
            )

        if query.offset is not None and query.offset < 0:
            return ValidationError(
                code=ErrorCode.INVALID_PAGINATION,
                message="offset must be greater than or equal to 0",
                field="offset",
            )

        if query.limit is not None and not 1 <= query.limit <= self._max_page_limit:
            return ValidationError(
                code=ErrorCode.INVALID_PAGINATION,
                message=f"limit must be between 1 and {self._max_page_limit}",
                field="limit",
            )

        return None
