"""OrderQueryRepository - direct-to-DTO projections for order listing.

Selects only the columns the response needs and builds dataclasses from
the rows, so no entity is ever placed in the session identity map. Three
ways to attach order lines to order headers:

    find_order_query_dtos          headers + one lines query per order (1 + N)
    find_all_by_dto_optimization   headers + one lines query with IN   (1 + 1)
    find_all_by_dto_flat           single query, one row per line      (1)
"""

from collections import defaultdict
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.protocols.order_query_repository import (
    OrderFlatDto,
    OrderItemQueryDto,
    OrderQueryDto,
)
from src.infrastructure.persistence.models.delivery import Delivery
from src.infrastructure.persistence.models.item import Item
from src.infrastructure.persistence.models.member import Member
from src.infrastructure.persistence.models.order import Order
from src.infrastructure.persistence.models.order_item import OrderItem

_ORDER_HEADER_COLUMNS = (
    Order.id,
    Member.name,
    Order.order_date,
    Order.status,
    Delivery.address,
)

_ORDER_ITEM_COLUMNS = (
    OrderItem.order_id,
    Item.name.label("item_name"),
    OrderItem.order_price,
    OrderItem.count,
)


class OrderQueryRepository:
    """SQLAlchemy implementation of OrderQueryRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_order_query_dtos(self) -> list[OrderQueryDto]:
        """Project orders, then load lines one order at a time."""
        orders = await self._find_orders()
        for order in orders:
            order.order_items = await self._find_order_items(order.order_id)
        return orders

    async def find_all_by_dto_optimization(self) -> list[OrderQueryDto]:
        """Project orders, then load all their lines with a single IN query."""
        orders = await self._find_orders()
        if not orders:
            return orders

        items_by_order = await self._find_order_item_map(
            [order.order_id for order in orders]
        )
        for order in orders:
            order.order_items = items_by_order.get(order.order_id, [])
        return orders

    async def find_all_by_dto_flat(self) -> list[OrderFlatDto]:
        """Project one denormalized row per order line.

        Inner join on order_items, so orders without lines are left out.
        """
        stmt = (
            select(*_ORDER_HEADER_COLUMNS, *_ORDER_ITEM_COLUMNS[1:])
            .select_from(Order)
            .join(Order.member)
            .join(Order.delivery)
            .join(Order.order_items)
            .join(OrderItem.item)
            .order_by(Order.id, OrderItem.id)
        )
        result = await self.session.execute(stmt)
        return [
            OrderFlatDto(
                order_id=order_id,
                name=name,
                order_date=order_date,
                order_status=status,
                address=address,
                item_name=item_name,
                order_price=order_price,
                count=count,
            )
            for (
                order_id,
                name,
                order_date,
                status,
                address,
                item_name,
                order_price,
                count,
            ) in result.all()
        ]

    async def _find_orders(self) -> list[OrderQueryDto]:
        stmt = (
            select(*_ORDER_HEADER_COLUMNS)
            .select_from(Order)
            .join(Order.member)
            .join(Order.delivery)
            .order_by(Order.id)
        )
        result = await self.session.execute(stmt)
        return [
            OrderQueryDto(
                order_id=order_id,
                name=name,
                order_date=order_date,
                order_status=status,
                address=address,
            )
            for order_id, name, order_date, status, address in result.all()
        ]

    async def _find_order_items(self, order_id: UUID) -> list[OrderItemQueryDto]:
        stmt = (
            select(*_ORDER_ITEM_COLUMNS)
            .join(OrderItem.item)
            .where(OrderItem.order_id == order_id)
            .order_by(OrderItem.id)
        )
        result = await self.session.execute(stmt)
        return [OrderItemQueryDto(*row) for row in result.all()]

    async def _find_order_item_map(
        self, order_ids: list[UUID]
    ) -> dict[UUID, list[OrderItemQueryDto]]:
        stmt = (
            select(*_ORDER_ITEM_COLUMNS)
            .join(OrderItem.item)
            .where(OrderItem.order_id.in_(order_ids))
            .order_by(OrderItem.id)
        )
        result = await self.session.execute(stmt)
        items_by_order: dict[UUID, list[OrderItemQueryDto]] = defaultdict(list)
        for row in result.all():
            item = OrderItemQueryDto(*row)
            items_by_order[item.order_id].append(item)
        return items_by_order
