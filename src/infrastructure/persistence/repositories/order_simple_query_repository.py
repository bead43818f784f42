"""OrderSimpleQueryRepository - order header projection (to-one only)."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.protocols.order_query_repository import OrderSimpleQueryDto
from src.infrastructure.persistence.models.delivery import Delivery
from src.infrastructure.persistence.models.member import Member
from src.infrastructure.persistence.models.order import Order


class OrderSimpleQueryRepository:
    """SQLAlchemy implementation of OrderSimpleQueryRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_order_dtos(self) -> list[OrderSimpleQueryDto]:
        """Project order headers joined to member and delivery in one query."""
        stmt = (
            select(
                Order.id,
                Member.name,
                Order.order_date,
                Order.status,
                Delivery.address,
            )
            .select_from(Order)
            .join(Order.member)
            .join(Order.delivery)
            .order_by(Order.id)
        )
        result = await self.session.execute(stmt)
        return [
            OrderSimpleQueryDto(
                order_id=order_id,
                name=name,
                order_date=order_date,
                order_status=status,
                address=address,
            )
            for order_id, name, order_date, status, address in result.all()
        ]
