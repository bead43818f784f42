"""Sample data seeder.

Inserts two members, four books and two orders with two lines each.
Idempotent via member name check - safe to run on every startup and
after every migration.

Sample data:
    userA (Seoul)  -> order of JPA1 BOOK x1, JPA2 BOOK x2
    userB (Busan)  -> order of SPRING1 BOOK x3, SPRING2 BOOK x4
"""

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.value_objects.address import Address
from src.infrastructure.persistence.models.delivery import Delivery
from src.infrastructure.persistence.models.item import Book
from src.infrastructure.persistence.models.member import Member
from src.infrastructure.persistence.models.order import Order
from src.infrastructure.persistence.models.order_item import OrderItem

logger = structlog.get_logger(__name__)

SAMPLE_ORDERS = [
    {
        "member": "userA",
        "address": Address(city="Seoul", street="1", zipcode="1111"),
        "lines": [
            {"name": "JPA1 BOOK", "price": 10000, "count": 1},
            {"name": "JPA2 BOOK", "price": 20000, "count": 2},
        ],
    },
    {
        "member": "userB",
        "address": Address(city="Busan", street="2", zipcode="2222"),
        "lines": [
            {"name": "SPRING1 BOOK", "price": 20000, "count": 3},
            {"name": "SPRING2 BOOK", "price": 40000, "count": 4},
        ],
    },
]

INITIAL_STOCK = 100


async def seed_sample_data(session: AsyncSession) -> int:
    """Seed sample members, items and orders. Idempotent via member name check.

    Flushes but does not commit; the caller owns the transaction.

    Args:
        session: Async database session.

    Returns:
        int: Number of orders inserted (0 when the data already exists).
    """
    seeded_count = 0
    skipped_count = 0

    for order_data in SAMPLE_ORDERS:
        name = order_data["member"]

        result = await session.execute(
            select(Member.id).where(Member.name == name).limit(1)
        )
        if result.first() is not None:
            skipped_count += 1
            logger.debug("sample_member_exists", member_name=name)
            continue

        member = Member(name=name, address=order_data["address"])
        order_items = []
        for line in order_data["lines"]:
            book = Book(
                name=line["name"],
                price=line["price"],
                stock_quantity=INITIAL_STOCK,
            )
            order_items.append(OrderItem.create(book, line["price"], line["count"]))

        order = Order.create(
            member,
            Delivery(address=member.address),
            *order_items,
        )
        session.add(order)
        # Flush per order so uuid7 ids and insertion order line up
        await session.flush()
        seeded_count += 1

    logger.info(
        "sample_data_seeded",
        seeded=seeded_count,
        skipped=skipped_count,
    )
    return seeded_count
