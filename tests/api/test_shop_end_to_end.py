"""End-to-end API tests against a seeded SQLite database.

No handler is mocked: requests go through the real handlers and
repositories. Only the request session is redirected to a per-test
database file holding the sample data.

The database is prepared through the TestClient portal so the engine
lives on the same event loop that serves the requests.
"""

import pytest
from fastapi.testclient import TestClient

from src.core.container import get_db_session
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.seed import seed_sample_data
from src.main import app

NESTED_ORDER_PATHS = [
    "/api/v2/orders",
    "/api/v3/orders",
    "/api/v3.1/orders",
    "/api/v4/orders",
    "/api/v5/orders",
]


@pytest.fixture
def shop_client(tmp_path):
    """TestClient serving the sample data from a throwaway database."""
    database = Database(database_url=f"sqlite+aiosqlite:///{tmp_path}/e2e.db")

    async def override_db_session():
        async with database.get_session() as session:
            yield session

    async def prepare() -> None:
        await database.create_all()
        async with database.get_session() as session:
            await seed_sample_data(session)

    app.dependency_overrides[get_db_session] = override_db_session
    try:
        with TestClient(app) as client:
            client.portal.call(prepare)
            yield client
            client.portal.call(database.close)
    finally:
        app.dependency_overrides.clear()


@pytest.mark.api
class TestOrderListingsEndToEnd:
    def test_nested_versions_return_identical_json(self, shop_client):
        bodies = [shop_client.get(path).json() for path in NESTED_ORDER_PATHS]

        assert [order["name"] for order in bodies[0]] == ["userA", "userB"]
        for body in bodies[1:]:
            assert body == bodies[0]

    def test_flat_rows_cover_every_order_line(self, shop_client):
        nested = shop_client.get("/api/v5/orders").json()
        flat = shop_client.get("/api/v6/orders").json()

        assert [(row["order_id"], row["item_name"]) for row in flat] == [
            (order["order_id"], line["item_name"])
            for order in nested
            for line in order["order_items"]
        ]

    def test_entity_exposure_has_whole_graph(self, shop_client):
        body = shop_client.get("/api/v1/orders").json()

        assert [order["member"]["name"] for order in body] == ["userA", "userB"]
        assert [len(order["order_items"]) for order in body] == [2, 2]
        assert body[0]["order_items"][0]["item"]["item_type"] == "book"
        assert body[0]["delivery"]["status"] == "ready"

    def test_simple_versions_agree(self, shop_client):
        bodies = [
            shop_client.get(f"/api/v{version}/simple-orders").json()
            for version in (2, 3, 4)
        ]

        assert [order["name"] for order in bodies[0]] == ["userA", "userB"]
        assert bodies[1] == bodies[0]
        assert bodies[2] == bodies[0]

    def test_paging(self, shop_client):
        everything = shop_client.get("/api/v3.1/orders").json()
        second = shop_client.get("/api/v3.1/orders", params={"offset": 1, "limit": 1})
        past_end = shop_client.get("/api/v3.1/orders", params={"offset": 5})

        assert second.json() == everything[1:]
        assert past_end.status_code == 200
        assert past_end.json() == []

    def test_search_by_member_name_is_case_insensitive(self, shop_client):
        body = shop_client.get("/api/v2/orders", params={"member_name": "USERB"}).json()

        assert [order["name"] for order in body] == ["userB"]

    def test_search_by_status(self, shop_client):
        body = shop_client.get("/api/v2/orders", params={"order_status": "cancel"}).json()

        assert body == []


@pytest.mark.api
class TestMembersEndToEnd:
    def test_create_rename_and_list(self, shop_client):
        created = shop_client.post("/api/v2/members", json={"name": "  member1 "})
        assert created.status_code == 200
        member_id = created.json()["id"]

        renamed = shop_client.put(f"/api/v2/members/{member_id}", json={"name": "member2"})
        assert renamed.json() == {"id": member_id, "name": "member2"}

        listed = shop_client.get("/api/v2/members").json()
        assert listed["count"] == 3
        assert [member["name"] for member in listed["data"]] == [
            "userA",
            "userB",
            "member2",
        ]

    def test_create_with_address_is_exposed_by_v1(self, shop_client):
        shop_client.post(
            "/api/v1/members",
            json={"name": "member3", "address": {"city": "Jeju", "street": "3"}},
        )

        members = shop_client.get("/api/v1/members").json()

        assert members[-1]["name"] == "member3"
        assert members[-1]["address"] == {"city": "Jeju", "street": "3", "zipcode": None}

    def test_member_without_address_has_null_address(self, shop_client):
        shop_client.post("/api/v2/members", json={"name": "member4"})

        members = shop_client.get("/api/v1/members").json()

        assert members[-1]["name"] == "member4"
        assert members[-1]["address"] is None

    def test_duplicate_name_is_conflict(self, shop_client):
        response = shop_client.post("/api/v2/members", json={"name": "userA"})

        assert response.status_code == 409
        assert shop_client.get("/api/v2/members").json()["count"] == 2

    def test_rename_unknown_member_is_not_found(self, shop_client):
        response = shop_client.put(
            "/api/v2/members/0192b3a4-0000-7000-8000-000000000000",
            json={"name": "nobody"},
        )

        assert response.status_code == 404
