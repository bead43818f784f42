"""Order queries (CQRS read operations).

Queries are immutable requests for order listings. Each one names the
loading strategy the handler must use, so the query count of an endpoint
is decided by the route, not by the handler.

Pattern:
- Queries are data containers (no logic)
- Handlers fetch and return data
- Queries never change state
"""

from dataclasses import dataclass, field

from src.domain.enums.fetch_strategy import OrderFetchStrategy
from src.domain.protocols.order_search import OrderSearch


@dataclass(frozen=True, kw_only=True)
class ListOrders:
    """List orders as entities with order lines.

    Attributes:
        strategy: LAZY, FETCH_JOIN or BATCH_FETCH.
        search: Member name / status filters (LAZY only).
        offset: Orders to skip (BATCH_FETCH only, default 0).
        limit: Page size (BATCH_FETCH only, default from settings).

    Example:
        >>> query = ListOrders(
        ...     strategy=OrderFetchStrategy.BATCH_FETCH,
        ...     offset=0,
        ...     limit=100,
        ... )
        >>> result = await handler.handle(query)
    """

    strategy: OrderFetchStrategy
    search: OrderSearch = field(default_factory=OrderSearch)
    offset: int | None = None
    limit: int | None = None


@dataclass(frozen=True, kw_only=True)
class ListOrderQueryDtos:
    """List orders through a direct-to-DTO projection.

    Attributes:
        strategy: DTO_PER_ORDER (1 + N) or DTO_IN_CLAUSE (1 + 1).
    """

    strategy: OrderFetchStrategy


@dataclass(frozen=True, kw_only=True)
class ListOrderFlatRows:
    """List one denormalized row per order line (single query, unpaged)."""


@dataclass(frozen=True, kw_only=True)
class ListSimpleOrders:
    """List orders as entities with member and delivery only.

    Attributes:
        strategy: LAZY or FETCH_JOIN.
        search: Member name / status filters.
    """

    strategy: OrderFetchStrategy
    search: OrderSearch = field(default_factory=OrderSearch)


@dataclass(frozen=True, kw_only=True)
class ListSimpleOrderQueryDtos:
    """List order headers through a single projection query."""
