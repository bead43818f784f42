"""API tests for order and simple-order endpoints.

Tests the HTTP request/response cycle of every listing version:
- GET /api/v1..v6/orders, /api/v3.1/orders
- GET /api/v1..v4/simple-orders

Architecture:
- Uses FastAPI TestClient with real app + dependency overrides
- Mocks handlers to test HTTP layer behavior (query building, response
  shaping, RFC 9457 error responses)
"""

from datetime import UTC, datetime
from typing import Any

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.core.container import (
    get_list_order_flat_rows_handler,
    get_list_order_query_dtos_handler,
    get_list_orders_handler,
    get_list_simple_order_query_dtos_handler,
    get_list_simple_orders_handler,
)
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Success
from src.domain.enums.fetch_strategy import OrderFetchStrategy
from src.domain.enums.order_status import OrderStatus
from src.domain.protocols.order_query_repository import (
    OrderFlatDto,
    OrderItemQueryDto,
    OrderQueryDto,
    OrderSimpleQueryDto,
)
from src.domain.value_objects.address import Address
from src.infrastructure.persistence.models import Book, Delivery, Member, Order, OrderItem
from src.main import app

ORDER_DATE = datetime(2026, 3, 1, 9, 30, tzinfo=UTC)
ADDRESS = Address(city="Seoul", street="1", zipcode="1111")


# =============================================================================
# Test Doubles
# =============================================================================


class RecordingHandler:
    """Mock handler returning a fixed result and recording the query."""

    def __init__(self, result: Success[Any] | Failure[Any]) -> None:
        self._result = result
        self.queries: list[Any] = []

    async def handle(self, query: Any) -> Success[Any] | Failure[Any]:
        self.queries.append(query)
        return self._result


def _order_entity() -> Order:
    member = Member(id=uuid7(), name="userA", address=ADDRESS)
    book = Book(id=uuid7(), name="JPA1 BOOK", price=10000, stock_quantity=99)
    return Order(
        id=uuid7(),
        member=member,
        delivery=Delivery(id=uuid7(), address=ADDRESS, status="ready"),
        order_items=[OrderItem(id=uuid7(), item=book, order_price=10000, count=1)],
        order_date=ORDER_DATE,
        status="order",
    )


def _order_dto() -> OrderQueryDto:
    order_id = uuid7()
    return OrderQueryDto(
        order_id=order_id,
        name="userA",
        order_date=ORDER_DATE,
        order_status="order",
        address=ADDRESS,
        order_items=[OrderItemQueryDto(order_id, "JPA1 BOOK", 10000, 1)],
    )


def _validation_failure(code: ErrorCode, field: str) -> Failure[ValidationError]:
    return Failure(
        error=ValidationError(code=code, message=f"{field} rejected", field=field)
    )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def client():
    """TestClient with dependency overrides cleared after each test."""
    yield TestClient(app)
    app.dependency_overrides.clear()


def _override(factory, handler: RecordingHandler) -> RecordingHandler:
    app.dependency_overrides[factory] = lambda: handler
    return handler


# =============================================================================
# Entity-backed order listings
# =============================================================================


@pytest.mark.api
class TestEntityOrderEndpoints:
    def test_v1_exposes_entity_graph(self, client):
        order = _order_entity()
        _override(get_list_orders_handler, RecordingHandler(Success(value=[order])))

        response = client.get("/api/v1/orders")

        assert response.status_code == 200
        [data] = response.json()
        assert data["id"] == str(order.id)
        assert data["member"]["name"] == "userA"
        assert "orders" not in data["member"]
        assert data["order_items"][0]["item"]["name"] == "JPA1 BOOK"

    def test_v2_builds_lazy_query_with_search(self, client):
        handler = _override(
            get_list_orders_handler, RecordingHandler(Success(value=[_order_entity()]))
        )

        response = client.get(
            "/api/v2/orders", params={"member_name": "user", "order_status": "order"}
        )

        assert response.status_code == 200
        [query] = handler.queries
        assert query.strategy == OrderFetchStrategy.LAZY
        assert query.search.member_name == "user"
        assert query.search.order_status == OrderStatus.ORDER
        assert query.offset is None and query.limit is None

        [data] = response.json()
        assert data["name"] == "userA"
        assert data["order_status"] == "order"
        assert data["address"] == {"city": "Seoul", "street": "1", "zipcode": "1111"}
        assert data["order_items"] == [
            {"item_name": "JPA1 BOOK", "order_price": 10000, "count": 1}
        ]

    def test_v3_uses_fetch_join(self, client):
        handler = _override(get_list_orders_handler, RecordingHandler(Success(value=[])))

        response = client.get("/api/v3/orders")

        assert response.status_code == 200
        assert response.json() == []
        assert handler.queries[0].strategy == OrderFetchStrategy.FETCH_JOIN

    def test_v3_1_defaults_page(self, client):
        handler = _override(get_list_orders_handler, RecordingHandler(Success(value=[])))

        response = client.get("/api/v3.1/orders")

        assert response.status_code == 200
        [query] = handler.queries
        assert query.strategy == OrderFetchStrategy.BATCH_FETCH
        assert query.offset == 0
        assert query.limit == 100

    def test_v3_1_passes_page(self, client):
        handler = _override(get_list_orders_handler, RecordingHandler(Success(value=[])))

        client.get("/api/v3.1/orders", params={"offset": 10, "limit": 5})

        assert handler.queries[0].offset == 10
        assert handler.queries[0].limit == 5

    @pytest.mark.parametrize(
        "params", [{"offset": -1}, {"limit": 0}, {"limit": 1001}, {"limit": "ten"}]
    )
    def test_v3_1_out_of_range_paging_is_422(self, client, params):
        handler = _override(get_list_orders_handler, RecordingHandler(Success(value=[])))

        response = client.get("/api/v3.1/orders", params=params)

        assert response.status_code == 422
        body = response.json()
        assert body["title"] == "Validation Failed"
        assert body["errors"][0]["field"].startswith("query.")
        assert handler.queries == []

    def test_unknown_order_status_is_422(self, client):
        _override(get_list_orders_handler, RecordingHandler(Success(value=[])))

        response = client.get("/api/v2/orders", params={"order_status": "shipped"})

        assert response.status_code == 422

    def test_handler_validation_failure_is_400(self, client):
        _override(
            get_list_orders_handler,
            RecordingHandler(
                _validation_failure(ErrorCode.INVALID_PAGINATION, "limit")
            ),
        )

        response = client.get("/api/v3.1/orders")

        assert response.status_code == 400
        body = response.json()
        assert body["status"] == 400
        assert body["instance"] == "/api/v3.1/orders"
        assert body["errors"] == [
            {"field": "limit", "code": "invalid_pagination", "message": "limit rejected"}
        ]
        assert body["trace_id"] == response.headers["X-Trace-Id"]


# =============================================================================
# Projection-backed order listings
# =============================================================================


@pytest.mark.api
class TestProjectionOrderEndpoints:
    @pytest.mark.parametrize(
        ("path", "strategy"),
        [
            ("/api/v4/orders", OrderFetchStrategy.DTO_PER_ORDER),
            ("/api/v5/orders", OrderFetchStrategy.DTO_IN_CLAUSE),
        ],
    )
    def test_nested_projection(self, client, path, strategy):
        dto = _order_dto()
        handler = _override(
            get_list_order_query_dtos_handler, RecordingHandler(Success(value=[dto]))
        )

        response = client.get(path)

        assert response.status_code == 200
        assert handler.queries[0].strategy == strategy
        [data] = response.json()
        assert data["order_id"] == str(dto.order_id)
        assert data["order_items"][0]["item_name"] == "JPA1 BOOK"

    def test_v6_returns_flat_rows(self, client):
        order_id = uuid7()
        rows = [
            OrderFlatDto(order_id, "userA", ORDER_DATE, "order", ADDRESS, "JPA1 BOOK", 10000, 1),
            OrderFlatDto(order_id, "userA", ORDER_DATE, "order", ADDRESS, "JPA2 BOOK", 20000, 2),
        ]
        _override(get_list_order_flat_rows_handler, RecordingHandler(Success(value=rows)))

        response = client.get("/api/v6/orders")

        assert response.status_code == 200
        data = response.json()
        assert [row["item_name"] for row in data] == ["JPA1 BOOK", "JPA2 BOOK"]
        assert {row["order_id"] for row in data} == {str(order_id)}
        assert "order_items" not in data[0]

    def test_v6_ignores_paging_parameters(self, client):
        _override(get_list_order_flat_rows_handler, RecordingHandler(Success(value=[])))

        response = client.get("/api/v6/orders", params={"offset": 1, "limit": 1})

        assert response.status_code == 200
        assert response.json() == []


# =============================================================================
# Simple order listings
# =============================================================================


@pytest.mark.api
class TestSimpleOrderEndpoints:
    def test_v1_exposes_member_and_delivery_only(self, client):
        _override(
            get_list_simple_orders_handler,
            RecordingHandler(Success(value=[_order_entity()])),
        )

        response = client.get("/api/v1/simple-orders")

        assert response.status_code == 200
        [data] = response.json()
        assert data["member"]["name"] == "userA"
        assert data["delivery"]["status"] == "ready"
        assert "order_items" not in data

    @pytest.mark.parametrize(
        ("path", "strategy"),
        [
            ("/api/v2/simple-orders", OrderFetchStrategy.LAZY),
            ("/api/v3/simple-orders", OrderFetchStrategy.FETCH_JOIN),
        ],
    )
    def test_entity_versions(self, client, path, strategy):
        handler = _override(
            get_list_simple_orders_handler,
            RecordingHandler(Success(value=[_order_entity()])),
        )

        response = client.get(path)

        assert response.status_code == 200
        assert handler.queries[0].strategy == strategy
        [data] = response.json()
        assert set(data) == {"order_id", "name", "order_date", "order_status", "address"}

    def test_v4_projection(self, client):
        dto = OrderSimpleQueryDto(uuid7(), "userB", ORDER_DATE, "cancel", ADDRESS)
        _override(
            get_list_simple_order_query_dtos_handler,
            RecordingHandler(Success(value=[dto])),
        )

        response = client.get("/api/v4/simple-orders")

        assert response.status_code == 200
        assert response.json()[0]["order_status"] == "cancel"

    def test_v2_forwards_search(self, client):
        handler = _override(
            get_list_simple_orders_handler, RecordingHandler(Success(value=[]))
        )

        client.get("/api/v2/simple-orders", params={"member_name": "userB"})

        assert handler.queries[0].search.member_name == "userB"
