"""Integration tests for the order loading strategies.

Runs every order listing strategy against the sample data (2 orders,
2 members, 4 items, 2 lines per order) and checks:
- the number of SQL statements each strategy issues
- that every strategy returns the same logical orders

Each test opens a fresh session, so nothing is answered from an identity
map filled by the seeder.
"""

import pytest
import pytest_asyncio

from src.application.queries.handlers.list_order_query_dtos_handler import (
    ListOrderFlatRowsHandler,
    ListOrderQueryDtosHandler,
)
from src.application.queries.handlers.list_orders_handler import ListOrdersHandler
from src.application.queries.handlers.list_simple_orders_handler import (
    ListSimpleOrderQueryDtosHandler,
    ListSimpleOrdersHandler,
)
from src.application.dtos.order_dtos import group_flat_rows
from src.application.queries.order_queries import (
    ListOrderFlatRows,
    ListOrderQueryDtos,
    ListOrders,
    ListSimpleOrderQueryDtos,
    ListSimpleOrders,
)
from src.core.result import Success
from src.domain.enums.fetch_strategy import OrderFetchStrategy
from src.domain.enums.order_status import OrderStatus
from src.domain.protocols.order_search import OrderSearch
from src.domain.value_objects.address import Address
from src.infrastructure.persistence import QueryCounter
from src.infrastructure.persistence.models import Book, Delivery, Member, Order, OrderItem
from src.infrastructure.persistence.repositories import (
    OrderQueryRepository,
    OrderRepository,
    OrderSimpleQueryRepository,
)
from src.schemas.order_schemas import OrderResponse, SimpleOrderResponse

EXPECTED_ORDERS = [
    {
        "name": "userA",
        "order_status": "order",
        "address": {"city": "Seoul", "street": "1", "zipcode": "1111"},
        "order_items": [
            {"item_name": "JPA1 BOOK", "order_price": 10000, "count": 1},
            {"item_name": "JPA2 BOOK", "order_price": 20000, "count": 2},
        ],
    },
    {
        "name": "userB",
        "order_status": "order",
        "address": {"city": "Busan", "street": "2", "zipcode": "2222"},
        "order_items": [
            {"item_name": "SPRING1 BOOK", "order_price": 20000, "count": 3},
            {"item_name": "SPRING2 BOOK", "order_price": 40000, "count": 4},
        ],
    },
]


def _without_ids_and_dates(orders: list[dict]) -> list[dict]:
    return [
        {key: value for key, value in order.items() if key not in {"order_id", "order_date"}}
        for order in orders
    ]


async def _list_entity_orders(db, mock_logger, strategy) -> tuple[list[dict], int]:
    async with db.get_session() as session:
        handler = ListOrdersHandler(order_repo=OrderRepository(session), logger=mock_logger)
        with QueryCounter(db.engine) as counter:
            result = await handler.handle(ListOrders(strategy=strategy))
        assert isinstance(result, Success)
        orders = [
            OrderResponse.from_entity(order).model_dump(mode="json")
            for order in result.value
        ]
    return orders, counter.count


async def _list_projected_orders(db, mock_logger, strategy) -> tuple[list[dict], int]:
    async with db.get_session() as session:
        handler = ListOrderQueryDtosHandler(
            query_repo=OrderQueryRepository(session), logger=mock_logger
        )
        with QueryCounter(db.engine) as counter:
            result = await handler.handle(ListOrderQueryDtos(strategy=strategy))
        assert isinstance(result, Success)
        orders = [OrderResponse.from_dto(dto).model_dump(mode="json") for dto in result.value]
    return orders, counter.count


@pytest.mark.integration
class TestOrderQueryCounts:
    """Statement counts per strategy for N=2 orders, M=4 lines."""

    async def test_lazy_loading_issues_n_plus_one(self, seeded_database, mock_logger):
        _, count = await _list_entity_orders(
            seeded_database, mock_logger, OrderFetchStrategy.LAZY
        )

        # 1 orders + 2 members + 2 deliveries + 2 order_items + 4 items
        assert count == 11

    async def test_fetch_join_issues_one_query(self, seeded_database, mock_logger):
        _, count = await _list_entity_orders(
            seeded_database, mock_logger, OrderFetchStrategy.FETCH_JOIN
        )

        assert count == 1

    async def test_batch_fetch_issues_three_queries(self, seeded_database, mock_logger):
        _, count = await _list_entity_orders(
            seeded_database, mock_logger, OrderFetchStrategy.BATCH_FETCH
        )

        assert count == 3

    async def test_dto_per_order_issues_one_plus_n(self, seeded_database, mock_logger):
        _, count = await _list_projected_orders(
            seeded_database, mock_logger, OrderFetchStrategy.DTO_PER_ORDER
        )

        assert count == 3

    async def test_dto_in_clause_issues_two_queries(self, seeded_database, mock_logger):
        _, count = await _list_projected_orders(
            seeded_database, mock_logger, OrderFetchStrategy.DTO_IN_CLAUSE
        )

        assert count == 2

    async def test_flat_projection_issues_one_query(self, seeded_database, mock_logger):
        async with seeded_database.get_session() as session:
            handler = ListOrderFlatRowsHandler(
                query_repo=OrderQueryRepository(session), logger=mock_logger
            )
            with QueryCounter(seeded_database.engine) as counter:
                result = await handler.handle(ListOrderFlatRows())

        assert isinstance(result, Success)
        assert len(result.value) == 4
        assert counter.count == 1


@pytest.mark.integration
class TestOrderStrategiesAgree:
    """Every strategy returns the same logical order set."""

    async def test_all_nested_strategies_return_same_orders(
        self, seeded_database, mock_logger
    ):
        results = {}
        for strategy in (
            OrderFetchStrategy.LAZY,
            OrderFetchStrategy.FETCH_JOIN,
            OrderFetchStrategy.BATCH_FETCH,
        ):
            results[strategy], _ = await _list_entity_orders(
                seeded_database, mock_logger, strategy
            )
        for strategy in (
            OrderFetchStrategy.DTO_PER_ORDER,
            OrderFetchStrategy.DTO_IN_CLAUSE,
        ):
            results[strategy], _ = await _list_projected_orders(
                seeded_database, mock_logger, strategy
            )

        baseline = results[OrderFetchStrategy.LAZY]
        assert _without_ids_and_dates(baseline) == EXPECTED_ORDERS
        for strategy, orders in results.items():
            assert orders == baseline, f"{strategy.value} differs from lazy loading"

    async def test_regrouped_flat_rows_match_nested_projection(
        self, seeded_database, mock_logger
    ):
        nested, _ = await _list_projected_orders(
            seeded_database, mock_logger, OrderFetchStrategy.DTO_IN_CLAUSE
        )
        async with seeded_database.get_session() as session:
            rows = await OrderQueryRepository(session).find_all_by_dto_flat()

        regrouped = [
            OrderResponse.from_dto(dto).model_dump(mode="json")
            for dto in group_flat_rows(rows)
        ]

        assert regrouped == nested


@pytest.mark.integration
class TestSimpleOrderStrategies:
    """To-one listings: lazy (1 + 2N), fetch join (1), projection (1)."""

    async def _list_simple(self, db, mock_logger, strategy, search=None):
        async with db.get_session() as session:
            handler = ListSimpleOrdersHandler(
                order_repo=OrderRepository(session), logger=mock_logger
            )
            with QueryCounter(db.engine) as counter:
                result = await handler.handle(
                    ListSimpleOrders(strategy=strategy, search=search or OrderSearch())
                )
            assert isinstance(result, Success)
            orders = [
                SimpleOrderResponse.from_entity(order).model_dump(mode="json")
                for order in result.value
            ]
        return orders, counter.count

    async def test_query_counts_and_results(self, seeded_database, mock_logger):
        lazy, lazy_count = await self._list_simple(
            seeded_database, mock_logger, OrderFetchStrategy.LAZY
        )
        joined, joined_count = await self._list_simple(
            seeded_database, mock_logger, OrderFetchStrategy.FETCH_JOIN
        )
        async with seeded_database.get_session() as session:
            handler = ListSimpleOrderQueryDtosHandler(
                query_repo=OrderSimpleQueryRepository(session), logger=mock_logger
            )
            with QueryCounter(seeded_database.engine) as counter:
                result = await handler.handle(ListSimpleOrderQueryDtos())
        projected = [
            SimpleOrderResponse.from_dto(dto).model_dump(mode="json")
            for dto in result.value
        ]

        assert lazy_count == 5
        assert joined_count == 1
        assert counter.count == 1
        assert lazy == joined == projected
        assert [order["name"] for order in lazy] == ["userA", "userB"]

    async def test_search_filters_by_member_name(self, seeded_database, mock_logger):
        search = OrderSearch(member_name="USERb")

        lazy, _ = await self._list_simple(
            seeded_database, mock_logger, OrderFetchStrategy.LAZY, search
        )
        joined, _ = await self._list_simple(
            seeded_database, mock_logger, OrderFetchStrategy.FETCH_JOIN, search
        )

        assert [order["name"] for order in lazy] == ["userB"]
        assert joined == lazy

    async def test_search_filters_by_status(self, seeded_database, mock_logger):
        orders, _ = await self._list_simple(
            seeded_database,
            mock_logger,
            OrderFetchStrategy.LAZY,
            OrderSearch(order_status=OrderStatus.CANCEL),
        )

        assert orders == []


async def _add_order(session, name: str, *lines: tuple[str, int, int]) -> None:
    """Add a member placing one order with the given (item, price, count) lines."""
    member = Member(name=name, address=Address(city="Jeju", street="3", zipcode="3333"))
    order_items = [
        OrderItem.create(Book(name=item, price=price, stock_quantity=10), price, count)
        for item, price, count in lines
    ]
    session.add(Order.create(member, Delivery(address=member.address), *order_items))
    await session.flush()


@pytest_asyncio.fixture
async def wildcard_names_database(seeded_database):
    """Sample data plus members whose names contain LIKE wildcards."""
    async with seeded_database.get_session() as session:
        await _add_order(session, "user_C", ("C BOOK", 1000, 1))
        await _add_order(session, "50%off", ("D BOOK", 2000, 1))
    return seeded_database


@pytest_asyncio.fixture
async def lineless_order_database(seeded_database):
    """Sample data plus one order (userC) without any order line."""
    async with seeded_database.get_session() as session:
        await _add_order(session, "userC")
    return seeded_database


@pytest.mark.integration
class TestMemberNameSearchIsLiteral:
    """% and _ in the search input match themselves only."""

    async def _names(self, db, mock_logger, member_name) -> list[str]:
        async with db.get_session() as session:
            handler = ListOrdersHandler(
                order_repo=OrderRepository(session), logger=mock_logger
            )
            result = await handler.handle(
                ListOrders(
                    strategy=OrderFetchStrategy.LAZY,
                    search=OrderSearch(member_name=member_name),
                )
            )
            assert isinstance(result, Success)
            return [(await order.awaitable_attrs.member).name for order in result.value]

    async def _simple_names(self, db, mock_logger, member_name) -> list[str]:
        async with db.get_session() as session:
            handler = ListSimpleOrdersHandler(
                order_repo=OrderRepository(session), logger=mock_logger
            )
            result = await handler.handle(
                ListSimpleOrders(
                    strategy=OrderFetchStrategy.FETCH_JOIN,
                    search=OrderSearch(member_name=member_name),
                )
            )
            assert isinstance(result, Success)
            return [order.member.name for order in result.value]

    async def test_underscore_matches_literally(self, wildcard_names_database, mock_logger):
        assert await self._names(wildcard_names_database, mock_logger, "_") == ["user_C"]
        assert await self._simple_names(
            wildcard_names_database, mock_logger, "_"
        ) == ["user_C"]

    async def test_percent_matches_literally(self, wildcard_names_database, mock_logger):
        assert await self._names(wildcard_names_database, mock_logger, "%") == ["50%off"]
        assert await self._simple_names(
            wildcard_names_database, mock_logger, "0%O"
        ) == ["50%off"]

    async def test_plain_substring_still_matches(self, wildcard_names_database, mock_logger):
        names = await self._names(wildcard_names_database, mock_logger, "USER")

        assert names == ["userA", "userB", "user_C"]


@pytest.mark.integration
class TestOrderWithoutLines:
    """Nested strategies keep an order without lines, the flat one drops it."""

    async def test_nested_strategies_include_it(self, lineless_order_database, mock_logger):
        lazy, _ = await _list_entity_orders(
            lineless_order_database, mock_logger, OrderFetchStrategy.LAZY
        )
        projected, _ = await _list_projected_orders(
            lineless_order_database, mock_logger, OrderFetchStrategy.DTO_IN_CLAUSE
        )

        assert [order["name"] for order in lazy] == ["userA", "userB", "userC"]
        assert lazy[-1]["order_items"] == []
        assert projected == lazy

    async def test_flat_projection_omits_it(self, lineless_order_database):
        async with lineless_order_database.get_session() as session:
            rows = await OrderQueryRepository(session).find_all_by_dto_flat()

        assert len(rows) == 4
        assert {row.name for row in rows} == {"userA", "userB"}
        assert [order.name for order in group_flat_rows(rows)] == ["userA", "userB"]
