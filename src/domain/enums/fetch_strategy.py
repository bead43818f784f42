"""ORM loading strategies for order listing.

Each order endpoint version is backed by exactly one strategy. The enum
is the vocabulary shared by query handlers, the route registry and tests.

Query counts below assume N orders with M order lines in total. Lazy
many-to-one loads are answered from the session identity map when the
target row was already loaded, so N is an upper bound for member/item.

    LAZY             1 + N (member) + N (delivery) + N (order_items) + M (item)
    FETCH_JOIN       1 (single JOIN incl. collection, rows de-duplicated)
    BATCH_FETCH      1 (to-one JOIN, paged) + 1 (order_items IN) + 1 (items IN)
    DTO_PER_ORDER    1 + N (one order-lines projection per order)
    DTO_IN_CLAUSE    1 + 1 (order-lines projection with IN)
    DTO_FLAT         1 (one denormalized row per order line)
    DTO_SIMPLE       1 (to-one projection, no order lines)
"""

from enum import Enum


class OrderFetchStrategy(str, Enum):
    """ORM loading strategy used to assemble an order listing."""

    LAZY = "lazy"
    FETCH_JOIN = "fetch_join"
    BATCH_FETCH = "batch_fetch"
    DTO_PER_ORDER = "dto_per_order"
    DTO_IN_CLAUSE = "dto_in_clause"
    DTO_FLAT = "dto_flat"
    DTO_SIMPLE = "dto_simple"

    @property
    def supports_pagination(self) -> bool:
        """Whether the API accepts offset/limit for this strategy.

        Only BATCH_FETCH pages. A collection fetch join multiplies rows so
        paging would have to happen in memory, and the flat projection
        returns one row per order line.
        """
        return self is OrderFetchStrategy.BATCH_FETCH

    @property
    def is_projection(self) -> bool:
        """Whether the strategy reads DTOs directly instead of entities."""
        return self.value.startswith("dto_")
