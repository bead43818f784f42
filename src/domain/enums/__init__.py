"""Domain enums for business logic.

This package contains enumerations used throughout the domain layer.
Enums are centralized here for discoverability and maintainability.

Available Enums:
    - OrderStatus: Order lifecycle (order, cancel)
    - DeliveryStatus: Delivery lifecycle (ready, comp)
    - ItemType: Item catalogue discriminator (book, album, movie)
    - OrderFetchStrategy: ORM loading strategy behind each order endpoint
"""

from src.domain.enums.delivery_status import DeliveryStatus
from src.domain.enums.fetch_strategy import OrderFetchStrategy
from src.domain.enums.item_type import ItemType
from src.domain.enums.order_status import OrderStatus

__all__ = [
    "DeliveryStatus",
    "ItemType",
    "OrderFetchStrategy",
    "OrderStatus",
]
