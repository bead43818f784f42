"""OrderRepository - SQLAlchemy implementation of OrderRepository protocol.

Every method returns Order entities sorted by id. The loader options
decide how much of the graph comes back already populated:

    find_all_by_search                   nothing (lazy loads later)
    find_all_with_member_delivery        joinedload member, delivery
    find_all_with_item                   joinedload everything, unique()
    find_all_with_member_delivery_page   joinedload to-one + selectinload lines
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from src.domain.protocols.order_search import OrderSearch
from src.infrastructure.persistence.models.member import Member
from src.infrastructure.persistence.models.order import Order
from src.infrastructure.persistence.models.order_item import OrderItem

# Upper bound on a filtered listing, the search endpoints are not paged.
MAX_SEARCH_RESULTS = 1000


def _apply_search(stmt: Select[tuple[Order]], search: OrderSearch) -> Select[tuple[Order]]:
    if search.order_status is not None:
        stmt = stmt.where(Order.status == search.order_status.value)
    if search.member_name:
        # Plain join for filtering only, Order.member stays unloaded.
        # autoescape keeps % and _ in the input literal.
        stmt = stmt.join(Order.member).where(
            Member.name.icontains(search.member_name, autoescape=True)
        )
    return stmt


class OrderRepository:
    """SQLAlchemy implementation of OrderRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with db.get_session() as session:
        ...     repo = OrderRepository(session)
        ...     orders = await repo.find_all_with_item()
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_all_by_search(self, search: OrderSearch) -> list[Order]:
        """Find orders matching the search, relationships left unloaded.

        Args:
            search: Member name / status filters (empty matches all).

        Returns:
            At most MAX_SEARCH_RESULTS orders in id order.
        """
        stmt = _apply_search(select(Order), search)
        stmt = stmt.order_by(Order.id).limit(MAX_SEARCH_RESULTS)
        result = await self.session.scalars(stmt)
        return list(result.all())

    async def find_all_with_member_delivery(
        self, search: OrderSearch | None = None
    ) -> list[Order]:
        """Find orders with member and delivery joined into the same SELECT."""
        stmt = select(Order).options(
            joinedload(Order.member),
            joinedload(Order.delivery),
        )
        if search is not None:
            stmt = _apply_search(stmt, search)
        stmt = stmt.order_by(Order.id)
        result = await self.session.scalars(stmt)
        return list(result.all())

    async def find_all_with_item(self) -> list[Order]:
        """Find orders with the whole graph loaded by one JOIN statement.

        The collection join returns one row per order line, unique()
        collapses them back to one Order per id.
        """
        stmt = (
            select(Order)
            .options(
                joinedload(Order.member),
                joinedload(Order.delivery),
                joinedload(Order.order_items).joinedload(OrderItem.item),
            )
            .order_by(Order.id)
        )
        result = await self.session.scalars(stmt)
        return list(result.unique().all())

    async def find_all_with_member_delivery_page(
        self, offset: int, limit: int
    ) -> list[Order]:
        """Find one page of orders with the graph loaded in three statements.

        Args:
            offset: Orders to skip.
            limit: Maximum orders to return.

        Returns:
            Orders in id order; order_items and items loaded with IN.
        """
        stmt = (
            select(Order)
            .options(
                joinedload(Order.member),
                joinedload(Order.delivery),
                selectinload(Order.order_items).selectinload(OrderItem.item),
            )
            .order_by(Order.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.scalars(stmt)
        return list(result.all())
