"""OrderRepository protocol for entity order queries.

Port (interface) for hexagonal architecture. Every method returns Order
entities in primary-key order. What differs between methods is which
relationships are already loaded on the returned objects, and therefore
how many statements the caller pays for when it walks the graph.
"""

from typing import TYPE_CHECKING, Protocol

from src.domain.protocols.order_search import OrderSearch

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.order import Order


class OrderRepository(Protocol):
    """Order repository protocol (port).

    Methods:
        find_all_by_search: Filtered orders, nothing preloaded
        find_all_with_member_delivery: Member and delivery fetch-joined
        find_all_with_item: Member, delivery, order lines and items fetch-joined
        find_all_with_member_delivery_page: Paged, to-one joined, lines batch-loaded
    """

    async def find_all_by_search(self, search: OrderSearch) -> list["Order"]:
        """Find orders matching the search, relationships left unloaded.

        Args:
            search: Member name / status filters (empty matches all).

        Returns:
            Orders in id order. Accessing member, delivery or order_items
            triggers one lazy SELECT per relation per order.
        """
        ...

    async def find_all_with_member_delivery(
        self, search: OrderSearch | None = None
    ) -> list["Order"]:
        """Find orders with member and delivery loaded in the same SELECT.

        Args:
            search: Optional member name / status filters.

        Returns:
            Orders in id order. order_items stays unloaded.
        """
        ...

    async def find_all_with_item(self) -> list["Order"]:
        """Find orders with the whole graph loaded by one JOIN statement.

        The collection join repeats each order once per order line, rows
        are de-duplicated by identity before returning. Cannot be paged.

        Returns:
            Orders in id order with member, delivery, order_items and
            order_items.item loaded.
        """
        ...

    async def find_all_with_member_delivery_page(
        self, offset: int, limit: int
    ) -> list["Order"]:
        """Find one page of orders.

        Member and delivery are joined into the paged SELECT. order_items
        and their items are loaded by one IN query each for the whole page.

        Args:
            offset: Orders to skip (>= 0).
            limit: Maximum orders to return (>= 1).

        Returns:
            At most limit orders in id order, graph fully loaded.
        """
        ...
