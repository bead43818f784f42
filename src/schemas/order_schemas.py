"""Order response schemas.

Two families:

- Flat responses (OrderResponse, SimpleOrderResponse, OrderFlatResponse)
  built from either entities or projection DTOs. Every order endpoint
  that returns the same shape emits identical JSON whatever the loading
  strategy behind it.
- Entity exposure schemas (OrderEntitySchema and friends) read ORM
  attributes directly (from_attributes). They omit every back reference
  (Member.orders, Delivery.order, OrderItem.order) so serialization stays
  acyclic and never triggers a lazy load.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.protocols.order_query_repository import (
    OrderFlatDto,
    OrderItemQueryDto,
    OrderQueryDto,
    OrderSimpleQueryDto,
)
from src.schemas.common_schemas import AddressSchema, EntityAddress

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.order import Order
    from src.infrastructure.persistence.models.order_item import OrderItem


# =============================================================================
# Flat Response Schemas
# =============================================================================


class OrderItemResponse(BaseModel):
    """One order line.

    Attributes:
        item_name: Item name.
        order_price: Unit price paid.
        count: Quantity ordered.
    """

    item_name: str = Field(..., description="Item name", examples=["JPA1 BOOK"])
    order_price: int = Field(..., description="Unit price paid", examples=[10000])
    count: int = Field(..., description="Quantity ordered", examples=[1])

    @classmethod
    def from_entity(cls, order_item: "OrderItem") -> "OrderItemResponse":
        return cls(
            item_name=order_item.item.name,
            order_price=order_item.order_price,
            count=order_item.count,
        )

    @classmethod
    def from_dto(cls, dto: OrderItemQueryDto) -> "OrderItemResponse":
        return cls(
            item_name=dto.item_name,
            order_price=dto.order_price,
            count=dto.count,
        )


class SimpleOrderResponse(BaseModel):
    """Order header: id, member name, date, status, delivery address."""

    order_id: UUID = Field(..., description="Order identifier")
    name: str = Field(..., description="Member name", examples=["userA"])
    order_date: datetime = Field(..., description="When the order was placed")
    order_status: str = Field(..., description="Order status", examples=["order"])
    address: AddressSchema | None = Field(None, description="Delivery address")

    @classmethod
    def from_entity(cls, order: "Order") -> "SimpleOrderResponse":
        """Build from an Order whose member and delivery are loaded."""
        return cls(
            order_id=order.id,
            name=order.member.name,
            order_date=order.order_date,
            order_status=order.status,
            address=AddressSchema.from_address(order.delivery.address),
        )

    @classmethod
    def from_dto(cls, dto: OrderSimpleQueryDto) -> "SimpleOrderResponse":
        return cls(
            order_id=dto.order_id,
            name=dto.name,
            order_date=dto.order_date,
            order_status=dto.order_status,
            address=AddressSchema.from_address(dto.address),
        )


class OrderResponse(SimpleOrderResponse):
    """Order header with its order lines."""

    order_items: list[OrderItemResponse] = Field(
        default_factory=list, description="Order lines in line order"
    )

    @classmethod
    def from_entity(cls, order: "Order") -> "OrderResponse":
        """Build from an Order whose whole graph is loaded.

        Args:
            order: Order with member, delivery, order_items and items loaded.

        Returns:
            OrderResponse for API response.
        """
        return cls(
            order_id=order.id,
            name=order.member.name,
            order_date=order.order_date,
            order_status=order.status,
            address=AddressSchema.from_address(order.delivery.address),
            order_items=[
                OrderItemResponse.from_entity(order_item)
                for order_item in order.order_items
            ],
        )

    @classmethod
    def from_dto(cls, dto: OrderQueryDto) -> "OrderResponse":
        return cls(
            order_id=dto.order_id,
            name=dto.name,
            order_date=dto.order_date,
            order_status=dto.order_status,
            address=AddressSchema.from_address(dto.address),
            order_items=[OrderItemResponse.from_dto(item) for item in dto.order_items],
        )


class OrderFlatResponse(BaseModel):
    """One denormalized order line (order header repeated per line)."""

    order_id: UUID = Field(..., description="Order identifier")
    name: str = Field(..., description="Member name")
    order_date: datetime = Field(..., description="When the order was placed")
    order_status: str = Field(..., description="Order status")
    address: AddressSchema | None = Field(None, description="Delivery address")
    item_name: str = Field(..., description="Item name")
    order_price: int = Field(..., description="Unit price paid")
    count: int = Field(..., description="Quantity ordered")

    @classmethod
    def from_dto(cls, dto: OrderFlatDto) -> "OrderFlatResponse":
        return cls(
            order_id=dto.order_id,
            name=dto.name,
            order_date=dto.order_date,
            order_status=dto.order_status,
            address=AddressSchema.from_address(dto.address),
            item_name=dto.item_name,
            order_price=dto.order_price,
            count=dto.count,
        )


# =============================================================================
# Entity Exposure Schemas
# =============================================================================


class MemberEntitySchema(BaseModel):
    """Member entity as stored (no orders back reference)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    address: EntityAddress = None


class DeliveryEntitySchema(BaseModel):
    """Delivery entity as stored (no order back reference)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    address: EntityAddress = None
    status: str


class ItemEntitySchema(BaseModel):
    """Item entity columns shared by every item type."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    price: int
    stock_quantity: int
    item_type: str


class OrderItemEntitySchema(BaseModel):
    """OrderItem entity (no order back reference)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    order_price: int
    count: int
    item: ItemEntitySchema


class SimpleOrderEntitySchema(BaseModel):
    """Order entity with member and delivery, order lines not exposed."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    order_date: datetime
    status: str
    member: MemberEntitySchema
    delivery: DeliveryEntitySchema


class OrderEntitySchema(SimpleOrderEntitySchema):
    """Order entity with its whole graph."""

    order_items: list[OrderItemEntitySchema]
