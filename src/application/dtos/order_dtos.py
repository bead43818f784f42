"""Order DTO helpers.

The projection dataclasses themselves live next to their repository port
(src/domain/protocols/order_query_repository.py). This module holds what
consumers do with them afterwards.
"""

from uuid import UUID

from src.domain.protocols.order_query_repository import (
    OrderFlatDto,
    OrderItemQueryDto,
    OrderQueryDto,
)


def group_flat_rows(rows: list[OrderFlatDto]) -> list[OrderQueryDto]:
    """Regroup flat order-line rows into nested order DTOs.

    Rows sharing an order_id are merged into one OrderQueryDto, first
    occurrence decides the position, line order is preserved. Orders
    without lines never appear in flat rows and so are not recovered.

    Args:
        rows: Output of the flat projection.

    Returns:
        One OrderQueryDto per distinct order_id.

    Example:
        >>> orders = group_flat_rows(await repo.find_all_by_dto_flat())
        >>> [len(order.order_items) for order in orders]
        [2, 2]
    """
    grouped: dict[UUID, OrderQueryDto] = {}
    for row in rows:
        order = grouped.get(row.order_id)
        if order is None:
            order = OrderQueryDto(
                order_id=row.order_id,
                name=row.name,
                order_date=row.order_date,
                order_status=row.order_status,
                address=row.address,
            )
            grouped[row.order_id] = order
        order.order_items.append(
            OrderItemQueryDto(
                order_id=row.order_id,
                item_name=row.item_name,
                order_price=row.order_price,
                count=row.count,
            )
        )
    return list(grouped.values())
