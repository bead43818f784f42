"""Order database model.

An order always references exactly one member and one delivery
(member_id and delivery_id are NOT NULL) and owns zero or more order
lines. The relationships use the default lazy="select" loader, every
order endpoint chooses its own loading strategy at query time.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.domain.enums.order_status import OrderStatus
from src.infrastructure.persistence.base import BaseMutableModel
from src.infrastructure.persistence.models.delivery import Delivery
from src.infrastructure.persistence.models.member import Member
from src.infrastructure.persistence.models.order_item import OrderItem


class Order(BaseMutableModel):
    """Customer order.

    Fields:
        member_id: FK to members (NOT NULL)
        delivery_id: FK to deliveries (NOT NULL, unique)
        order_date: When the order was placed (UTC)
        status: OrderStatus value stored as lowercase string (order, cancel)

    Relationships:
        - member: Many-to-one
        - delivery: One-to-one (owning side)
        - order_items: One-to-many, ordered by order line id
    """

    __tablename__ = "orders"

    member_id: Mapped[UUID] = mapped_column(
        ForeignKey("members.id"),
        nullable=False,
        index=True,
        comment="FK to members table",
    )
    delivery_id: Mapped[UUID] = mapped_column(
        ForeignKey("deliveries.id"),
        nullable=False,
        unique=True,
        comment="FK to deliveries table",
    )
    order_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=OrderStatus.ORDER.value,
        index=True,
        comment="Order status (order, cancel)",
    )

    member: Mapped[Member] = relationship(back_populates="orders")
    delivery: Mapped[Delivery] = relationship(back_populates="order")
    order_items: Mapped[list[OrderItem]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
        order_by=OrderItem.id,
    )

    @classmethod
    def create(
        cls,
        member: Member,
        delivery: Delivery,
        *order_items: OrderItem,
        order_date: datetime | None = None,
    ) -> "Order":
        """Place an order for a member with the given lines."""
        return cls(
            member=member,
            delivery=delivery,
            order_items=list(order_items),
            status=OrderStatus.ORDER.value,
            order_date=order_date or datetime.now(UTC),
        )

    def __repr__(self) -> str:
        return f"<Order(id={self.id}, status={self.status!r})>"
