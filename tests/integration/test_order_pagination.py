"""Integration tests for the paged order listing (BATCH_FETCH).

Seeds a larger order set so pages are observable: never more than limit
orders, offset skips in stable id order, and the statement count does
not grow with the page size.
"""

import pytest
import pytest_asyncio

from src.application.queries.handlers.list_orders_handler import ListOrdersHandler
from src.application.queries.order_queries import ListOrders
from src.core.result import Success
from src.domain.enums.fetch_strategy import OrderFetchStrategy
from src.domain.value_objects.address import Address
from src.infrastructure.persistence import QueryCounter
from src.infrastructure.persistence.models import Book, Delivery, Member, Order, OrderItem
from src.infrastructure.persistence.repositories import OrderRepository

ORDER_COUNT = 7


@pytest_asyncio.fixture
async def many_orders_database(test_database):
    """Database with ORDER_COUNT single-line orders from one member."""
    async with test_database.get_session() as session:
        member = Member(name="pager", address=Address(city="Seoul"))
        book = Book(name="PAGE BOOK", price=1000, stock_quantity=100)
        for _ in range(ORDER_COUNT):
            session.add(
                Order.create(
                    member,
                    Delivery(address=member.address),
                    OrderItem.create(book, 1000, 1),
                )
            )
            await session.flush()
    return test_database


async def _page(db, mock_logger, offset, limit):
    async with db.get_session() as session:
        handler = ListOrdersHandler(order_repo=OrderRepository(session), logger=mock_logger)
        with QueryCounter(db.engine) as counter:
            result = await handler.handle(
                ListOrders(
                    strategy=OrderFetchStrategy.BATCH_FETCH,
                    offset=offset,
                    limit=limit,
                )
            )
        assert isinstance(result, Success)
        ids = [order.id for order in result.value]
        lines = [len(order.order_items) for order in result.value]
    return ids, lines, counter.count


@pytest.mark.integration
class TestOrderPagination:
    async def test_pages_partition_the_full_listing(
        self, many_orders_database, mock_logger
    ):
        all_ids, _, _ = await _page(many_orders_database, mock_logger, 0, 100)
        first, _, _ = await _page(many_orders_database, mock_logger, 0, 3)
        second, _, _ = await _page(many_orders_database, mock_logger, 3, 3)
        last, _, _ = await _page(many_orders_database, mock_logger, 6, 3)

        assert len(all_ids) == ORDER_COUNT
        assert all_ids == sorted(all_ids)
        assert first + second + last == all_ids
        assert len(last) == 1

    @pytest.mark.parametrize("limit", [1, 2, 5])
    async def test_never_more_than_limit(self, many_orders_database, mock_logger, limit):
        ids, lines, _ = await _page(many_orders_database, mock_logger, 0, limit)

        assert len(ids) == limit
        assert lines == [1] * limit

    async def test_offset_past_end_is_empty(self, many_orders_database, mock_logger):
        ids, _, count = await _page(many_orders_database, mock_logger, 100, 10)

        assert ids == []
        # Nothing to batch-load for an empty page
        assert count == 1

    async def test_statement_count_is_independent_of_page_size(
        self, many_orders_database, mock_logger
    ):
        _, _, small = await _page(many_orders_database, mock_logger, 0, 2)
        _, _, large = await _page(many_orders_database, mock_logger, 0, ORDER_COUNT)

        assert small == large == 3
