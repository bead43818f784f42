"""Order handler dependency factories.

Request-scoped handler instances for the order listings:
- Entity listings (lazy, fetch join, batch fetch)
- Projection listings (per order, IN clause, flat)
- Simple listings (entities and header projection)
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.infrastructure import get_db_session, get_logger

if TYPE_CHECKING:
    from src.application.queries.handlers.list_order_query_dtos_handler import (
        ListOrderFlatRowsHandler,
        ListOrderQueryDtosHandler,
    )
    from src.application.queries.handlers.list_orders_handler import (
        ListOrdersHandler,
    )
    from src.application.queries.handlers.list_simple_orders_handler import (
        ListSimpleOrderQueryDtosHandler,
        ListSimpleOrdersHandler,
    )


# ============================================================================
# Order Query Handler Factories (Request-Scoped)
# ============================================================================


async def get_list_orders_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListOrdersHandler":
    """Get ListOrders query handler (request-scoped).

    Creates handler with:
    - OrderRepository (request-scoped)
    - Logger (app-scoped)
    - Paging bounds from settings

    Returns:
        ListOrdersHandler instance.
    """
    from src.application.queries.handlers.list_orders_handler import (
        ListOrdersHandler,
    )
    from src.infrastructure.persistence.repositories import OrderRepository

    return ListOrdersHandler(
        order_repo=OrderRepository(session=session),
        logger=get_logger(),
        default_page_limit=settings.default_page_limit,
        max_page_limit=settings.max_page_limit,
    )


async def get_list_order_query_dtos_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListOrderQueryDtosHandler":
    """Get ListOrderQueryDtos query handler (request-scoped)."""
    from src.application.queries.handlers.list_order_query_dtos_handler import (
        ListOrderQueryDtosHandler,
    )
    from src.infrastructure.persistence.repositories import OrderQueryRepository

    return ListOrderQueryDtosHandler(
        query_repo=OrderQueryRepository(session=session),
        logger=get_logger(),
    )


async def get_list_order_flat_rows_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListOrderFlatRowsHandler":
    from src.application.queries.handlers.list_order_query_dtos_handler import (
        ListOrderFlatRowsHandler,
    )
    from src.infrastructure.persistence.repositories import OrderQueryRepository

    return ListOrderFlatRowsHandler(
        query_repo=OrderQueryRepository(session=session),
        logger=get_logger(),
    )


# ============================================================================
# Simple Order Query Handler Factories (Request-Scoped)
# ============================================================================


async def get_list_simple_orders_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListSimpleOrdersHandler":
    """Get ListSimpleOrders query handler (request-scoped)."""
    from src.application.queries.handlers.list_simple_orders_handler import (
        ListSimpleOrdersHandler,
    )
    from src.infrastructure.persistence.repositories import OrderRepository

    return ListSimpleOrdersHandler(
        order_repo=OrderRepository(session=session),
        logger=get_logger(),
    )


async def get_list_simple_order_query_dtos_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListSimpleOrderQueryDtosHandler":
    from src.application.queries.handlers.list_simple_orders_handler import (
        ListSimpleOrderQueryDtosHandler,
    )
    from src.infrastructure.persistence.repositories import (
        OrderSimpleQueryRepository,
    )

    return ListSimpleOrderQueryDtosHandler(
        query_repo=OrderSimpleQueryRepository(session=session),
        logger=get_logger(),
    )
