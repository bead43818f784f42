"""Projection repository protocols for order listing.

These ports return flat data objects built straight from SELECT columns,
never entities. The projection dataclasses are defined here so that
application and presentation layers never touch infrastructure models
on the projection path.

Reference:
    Strategy query counts are listed in src/domain/enums/fetch_strategy.py
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.value_objects.address import Address


@dataclass
class OrderItemQueryDto:
    """One order line as projected from order_items joined to items."""

    order_id: UUID
    item_name: str
    order_price: int
    count: int


@dataclass
class OrderQueryDto:
    """Order header projection with its order lines attached afterwards.

    order_items is empty when produced by the SELECT and filled in by the
    repository with a second query (per order or with IN).
    """

    order_id: UUID
    name: str
    order_date: datetime
    order_status: str
    address: Address
    order_items: list[OrderItemQueryDto] = field(default_factory=list)


@dataclass
class OrderFlatDto:
    """One denormalized row per order line (order header repeated)."""

    order_id: UUID
    name: str
    order_date: datetime
    order_status: str
    address: Address
    item_name: str
    order_price: int
    count: int


@dataclass
class OrderSimpleQueryDto:
    """Order header projection without order lines."""

    order_id: UUID
    name: str
    order_date: datetime
    order_status: str
    address: Address


class OrderQueryRepository(Protocol):
    """Order projection repository protocol (port).

    Methods:
        find_order_query_dtos: Headers, then one lines query per order
        find_all_by_dto_optimization: Headers, then one lines query with IN
        find_all_by_dto_flat: One row per order line, single query
    """

    async def find_order_query_dtos(self) -> list[OrderQueryDto]:
        """Project orders, then load lines one order at a time (1 + N)."""
        ...

    async def find_all_by_dto_optimization(self) -> list[OrderQueryDto]:
        """Project orders, then load all lines with one IN query (1 + 1)."""
        ...

    async def find_all_by_dto_flat(self) -> list[OrderFlatDto]:
        """Project one row per order line with a single JOIN (1).

        Orders without lines do not appear (inner join on order_items).
        """
        ...


class OrderSimpleQueryRepository(Protocol):
    """Simple order projection repository protocol (port)."""

    async def find_order_dtos(self) -> list[OrderSimpleQueryDto]:
        """Project order headers joined to member and delivery (1)."""
        ...
