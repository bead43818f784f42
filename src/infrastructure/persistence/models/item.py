"""Item database models (single-table inheritance).

Book, Album and Movie share the items table. The item_type column holds
the ItemType discriminator, subtype-specific columns are nullable.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.enums.item_type import ItemType
from src.infrastructure.persistence.base import BaseMutableModel


class Item(BaseMutableModel):
    """Catalogue item.

    Fields:
        name: Item name (shown on order lines)
        price: Unit price in the smallest currency unit
        stock_quantity: Units in stock
        item_type: Discriminator (book, album, movie)
    """

    __tablename__ = "items"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    item_type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="Single-table discriminator (book, album, movie)",
    )

    __mapper_args__ = {
        "polymorphic_on": "item_type",
        "polymorphic_abstract": True,
    }

    def remove_stock(self, quantity: int) -> None:
        """Take units out of stock.

        Raises:
            ValueError: If fewer than quantity units remain.
        """
        remaining = self.stock_quantity - quantity
        if remaining < 0:
            raise ValueError(f"Not enough stock for {self.name!r}")
        self.stock_quantity = remaining


class Book(Item):
    author: Mapped[str | None] = mapped_column(String(255), nullable=True)
    isbn: Mapped[str | None] = mapped_column(String(32), nullable=True)

    __mapper_args__ = {"polymorphic_identity": ItemType.BOOK.value}


class Album(Item):
    artist: Mapped[str | None] = mapped_column(String(255), nullable=True)
    etc: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": ItemType.ALBUM.value}


class Movie(Item):
    director: Mapped[str | None] = mapped_column(String(255), nullable=True)
    actor: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": ItemType.MOVIE.value}
