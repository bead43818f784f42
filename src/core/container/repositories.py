"""Repository dependency factories.

Request-scoped repository instances sharing the request's session.
Each request gets fresh repositories, so the identity map (and therefore
which lazy loads hit the database) never leaks between requests.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        MemberRepository,
        OrderQueryRepository,
        OrderRepository,
        OrderSimpleQueryRepository,
    )


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_member_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "MemberRepository":
    """Get member repository (request-scoped).

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).

    Returns:
        MemberRepository instance.
    """
    from src.infrastructure.persistence.repositories import MemberRepository

    return MemberRepository(session=session)


async def get_order_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "OrderRepository":
    """Get entity order repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import OrderRepository

    return OrderRepository(session=session)


async def get_order_query_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "OrderQueryRepository":
    """Get order projection repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import OrderQueryRepository

    return OrderQueryRepository(session=session)


async def get_order_simple_query_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "OrderSimpleQueryRepository":
    from src.infrastructure.persistence.repositories import (
        OrderSimpleQueryRepository,
    )

    return OrderSimpleQueryRepository(session=session)
