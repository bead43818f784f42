"""OrderItem database model (one order line)."""

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel
from src.infrastructure.persistence.models.item import Item

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.order import Order


class OrderItem(BaseMutableModel):
    """Line of an order: an item, the unit price paid and the quantity.

    Fields:
        order_id: FK to orders
        item_id: FK to items
        order_price: Unit price at order time
        count: Quantity ordered

    Relationships:
        - order: Many-to-one back reference, never serialized
        - item: Many-to-one, loaded per strategy
    """

    __tablename__ = "order_items"

    order_id: Mapped[UUID] = mapped_column(
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to orders table",
    )
    item_id: Mapped[UUID] = mapped_column(
        ForeignKey("items.id"),
        nullable=False,
        index=True,
        comment="FK to items table",
    )
    order_price: Mapped[int] = mapped_column(Integer, nullable=False)
    count: Mapped[int] = mapped_column(Integer, nullable=False)

    order: Mapped["Order"] = relationship(back_populates="order_items")
    item: Mapped[Item] = relationship()

    @classmethod
    def create(cls, item: Item, order_price: int, count: int) -> "OrderItem":
        """Build an order line and take the quantity out of stock.

        Raises:
            ValueError: If the item does not have count units in stock.
        """
        item.remove_stock(count)
        return cls(item=item, order_price=order_price, count=count)
