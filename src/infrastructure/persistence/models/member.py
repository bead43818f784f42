"""Member database model.

A member places orders. The postal address is embedded (city, street,
zipcode columns on the members table) through an Address composite.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, composite, mapped_column, relationship

from src.domain.value_objects.address import Address
from src.infrastructure.persistence.base import BaseMutableModel

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.order import Order


class Member(BaseMutableModel):
    """Shop member (customer).

    Fields:
        id: UUIDv7 primary key (from BaseMutableModel)
        created_at: Timestamp when member registered (from BaseMutableModel)
        updated_at: Timestamp of last change (from BaseMutableModel)
        name: Display name (indexed, uniqueness enforced by CreateMemberHandler)
        address: Embedded Address (city, street, zipcode)

    Relationships:
        - orders: One-to-many back reference, never serialized
    """

    __tablename__ = "members"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Member display name",
    )

    address: Mapped[Address] = composite(
        mapped_column("city", String(100), nullable=True),
        mapped_column("street", String(255), nullable=True),
        mapped_column("zipcode", String(20), nullable=True),
    )

    orders: Mapped[list["Order"]] = relationship(back_populates="member")

    def __repr__(self) -> str:
        return f"<Member(id={self.id}, name={self.name!r})>"
