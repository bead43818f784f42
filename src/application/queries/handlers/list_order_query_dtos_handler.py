"""Order projection query handlers.

Handlers for the direct-to-DTO order listings. They never load entities.

Handlers:
    ListOrderQueryDtosHandler - nested DTOs (per-order or IN lines query)
    ListOrderFlatRowsHandler  - one flat row per order line
"""

from src.application.queries.order_queries import ListOrderFlatRows, ListOrderQueryDtos
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums.fetch_strategy import OrderFetchStrategy
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.order_query_repository import (
    OrderFlatDto,
    OrderQueryDto,
    OrderQueryRepository,
)


class ListOrderQueryDtosHandler:
    """Handler for ListOrderQueryDtos query.

    Returns:
        Result[list[OrderQueryDto], DomainError]
    """

    def __init__(
        self, query_repo: OrderQueryRepository, logger: LoggerProtocol
    ) -> None:
        self._query_repo = query_repo
        self._logger = logger

    async def handle(
        self, query: ListOrderQueryDtos
    ) -> Result[list[OrderQueryDto], DomainError]:
        """Handle ListOrderQueryDtos query.

        Args:
            query: ListOrderQueryDtos query.

        Returns:
            Success(list[OrderQueryDto]): Orders in id order with lines.
            Failure(ValidationError): Strategy is not a nested projection.
        """
        match query.strategy:
            case OrderFetchStrategy.DTO_PER_ORDER:
                orders = await self._query_repo.find_order_query_dtos()
            case OrderFetchStrategy.DTO_IN_CLAUSE:
                orders = await self._query_repo.find_all_by_dto_optimization()
            case _:
                self._logger.warning(
                    "orders_query_rejected",
                    strategy=query.strategy.value,
                    error_code=ErrorCode.UNSUPPORTED_FETCH_STRATEGY.value,
                )
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.UNSUPPORTED_FETCH_STRATEGY,
                        message=f"Strategy '{query.strategy.value}' is not a nested projection",
                        field="strategy",
                    )
                )

        self._logger.info(
            "orders_listed",
            strategy=query.strategy.value,
            count=len(orders),
        )
        return Success(value=orders)


class ListOrderFlatRowsHandler:
    """Handler for ListOrderFlatRows query."""

    def __init__(
        self, query_repo: OrderQueryRepository, logger: LoggerProtocol
    ) -> None:
        self._query_repo = query_repo
        self._logger = logger

    async def handle(
        self, query: ListOrderFlatRows
    ) -> Result[list[OrderFlatDto], DomainError]:
        rows = await self._query_repo.find_all_by_dto_flat()
        self._logger.info(
            "orders_listed",
            strategy=OrderFetchStrategy.DTO_FLAT.value,
            count=len(rows),
        )
        return Success(value=rows)
