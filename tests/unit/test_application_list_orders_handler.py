"""Unit tests for ListOrdersHandler.

Tests strategy dispatch, search and paging validation, and logging.

Reference:
    - src/application/queries/handlers/list_orders_handler.py
"""

from unittest.mock import AsyncMock

import pytest

from src.application.queries.handlers.list_orders_handler import ListOrdersHandler
from src.application.queries.order_queries import ListOrders
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Success
from src.domain.enums.fetch_strategy import OrderFetchStrategy
from src.domain.enums.order_status import OrderStatus
from src.domain.protocols.order_search import OrderSearch


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_order_repo() -> AsyncMock:
    """Mock OrderRepository returning no orders."""
    repo = AsyncMock()
    repo.find_all_by_search.return_value = []
    repo.find_all_with_item.return_value = []
    repo.find_all_with_member_delivery_page.return_value = []
    return repo


@pytest.fixture
def handler(mock_order_repo, mock_logger) -> ListOrdersHandler:
    return ListOrdersHandler(
        order_repo=mock_order_repo,
        logger=mock_logger,
        default_page_limit=100,
        max_page_limit=1000,
    )


# ============================================================================
# Strategy dispatch
# ============================================================================


@pytest.mark.unit
class TestListOrdersDispatch:
    """Each entity strategy calls exactly one repository method."""

    async def test_lazy_uses_search_query(self, handler, mock_order_repo):
        search = OrderSearch(member_name="user", order_status=OrderStatus.ORDER)

        result = await handler.handle(
            ListOrders(strategy=OrderFetchStrategy.LAZY, search=search)
        )

        assert isinstance(result, Success)
        mock_order_repo.find_all_by_search.assert_awaited_once_with(search)
        mock_order_repo.find_all_with_item.assert_not_awaited()

    async def test_fetch_join_uses_single_join_query(self, handler, mock_order_repo):
        result = await handler.handle(ListOrders(strategy=OrderFetchStrategy.FETCH_JOIN))

        assert isinstance(result, Success)
        mock_order_repo.find_all_with_item.assert_awaited_once_with()
        mock_order_repo.find_all_by_search.assert_not_awaited()

    async def test_batch_fetch_applies_default_page(self, handler, mock_order_repo):
        result = await handler.handle(ListOrders(strategy=OrderFetchStrategy.BATCH_FETCH))

        assert isinstance(result, Success)
        mock_order_repo.find_all_with_member_delivery_page.assert_awaited_once_with(
            offset=0, limit=100
        )

    async def test_batch_fetch_passes_explicit_page(self, handler, mock_order_repo):
        await handler.handle(
            ListOrders(strategy=OrderFetchStrategy.BATCH_FETCH, offset=5, limit=10)
        )

        mock_order_repo.find_all_with_member_delivery_page.assert_awaited_once_with(
            offset=5, limit=10
        )

    async def test_success_is_logged_with_strategy_and_count(
        self, handler, mock_order_repo, mock_logger
    ):
        mock_order_repo.find_all_with_item.return_value = ["order-1", "order-2"]

        result = await handler.handle(ListOrders(strategy=OrderFetchStrategy.FETCH_JOIN))

        assert isinstance(result, Success)
        assert result.value == ["order-1", "order-2"]
        mock_logger.info.assert_called_once_with(
            "orders_listed", strategy="fetch_join", count=2
        )


# ============================================================================
# Validation
# ============================================================================


@pytest.mark.unit
class TestListOrdersValidation:
    """Invalid queries fail with ValidationError and never hit the repository."""

    @pytest.mark.parametrize(
        "strategy",
        [
            OrderFetchStrategy.DTO_PER_ORDER,
            OrderFetchStrategy.DTO_IN_CLAUSE,
            OrderFetchStrategy.DTO_FLAT,
            OrderFetchStrategy.DTO_SIMPLE,
        ],
    )
    async def test_projection_strategy_is_rejected(
        self, handler, mock_order_repo, strategy
    ):
        result = await handler.handle(ListOrders(strategy=strategy))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.UNSUPPORTED_FETCH_STRATEGY
        mock_order_repo.find_all_by_search.assert_not_awaited()

    async def test_search_outside_lazy_is_rejected(self, handler, mock_order_repo):
        result = await handler.handle(
            ListOrders(
                strategy=OrderFetchStrategy.FETCH_JOIN,
                search=OrderSearch(member_name="userA"),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SEARCH_NOT_SUPPORTED
        assert result.error.field == "member_name"
        mock_order_repo.find_all_with_item.assert_not_awaited()

    @pytest.mark.parametrize(
        "strategy", [OrderFetchStrategy.LAZY, OrderFetchStrategy.FETCH_JOIN]
    )
    async def test_paging_outside_batch_fetch_is_rejected(self, handler, strategy):
        result = await handler.handle(ListOrders(strategy=strategy, limit=10))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.PAGINATION_NOT_SUPPORTED
        assert result.error.field == "limit"

    async def test_negative_offset_is_rejected(self, handler):
        result = await handler.handle(
            ListOrders(strategy=OrderFetchStrategy.BATCH_FETCH, offset=-1)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_PAGINATION
        assert result.error.field == "offset"

    @pytest.mark.parametrize("limit", [0, 1001])
    async def test_limit_out_of_range_is_rejected(self, handler, limit):
        result = await handler.handle(
            ListOrders(strategy=OrderFetchStrategy.BATCH_FETCH, limit=limit)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_PAGINATION
        assert result.error.field == "limit"

    @pytest.mark.parametrize("limit", [1, 1000])
    async def test_limit_bounds_are_inclusive(self, handler, limit):
        result = await handler.handle(
            ListOrders(strategy=OrderFetchStrategy.BATCH_FETCH, limit=limit)
        )

        assert isinstance(result, Success)

    async def test_rejection_is_logged_as_warning(self, handler, mock_logger):
        await handler.handle(
            ListOrders(strategy=OrderFetchStrategy.BATCH_FETCH, offset=-1)
        )

        mock_logger.warning.assert_called_once_with(
            "orders_query_rejected",
            strategy="batch_fetch",
            error_code="invalid_pagination",
        )
        mock_logger.info.assert_not_called()
