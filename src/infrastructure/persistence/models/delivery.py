"""Delivery database model.

One delivery per order. The shipping address is embedded the same way as
the member address.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, composite, mapped_column, relationship

from src.domain.enums.delivery_status import DeliveryStatus
from src.domain.value_objects.address import Address
from src.infrastructure.persistence.base import BaseMutableModel

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.order import Order


class Delivery(BaseMutableModel):
    """Shipment of a single order.

    Fields:
        address: Embedded shipping Address
        status: DeliveryStatus value stored as lowercase string (ready, comp)

    Relationships:
        - order: One-to-one back reference (orders.delivery_id), never serialized
    """

    __tablename__ = "deliveries"

    address: Mapped[Address] = composite(
        mapped_column("city", String(100), nullable=True),
        mapped_column("street", String(255), nullable=True),
        mapped_column("zipcode", String(20), nullable=True),
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=DeliveryStatus.READY.value,
        comment="Delivery status (ready, comp)",
    )

    order: Mapped["Order"] = relationship(back_populates="delivery")
