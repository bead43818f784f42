"""Database models for persistence layer.

SQLAlchemy models mapped to the shop tables. Importing this package
registers every mapper on BaseModel.metadata (Alembic autogenerate and
Database.create_all rely on it).

Models Organization:
    - member.py: Member (embedded Address)
    - order.py: Order (member, delivery, order_items)
    - order_item.py: OrderItem (one order line)
    - delivery.py: Delivery (embedded Address)
    - item.py: Item with Book, Album, Movie subtypes (single table)
"""

from src.infrastructure.persistence.models.delivery import Delivery
from src.infrastructure.persistence.models.item import Album, Book, Item, Movie
from src.infrastructure.persistence.models.member import Member
from src.infrastructure.persistence.models.order import Order
from src.infrastructure.persistence.models.order_item import OrderItem

__all__ = [
    "Album",
    "Book",
    "Delivery",
    "Item",
    "Member",
    "Movie",
    "Order",
    "OrderItem",
]
