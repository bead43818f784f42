"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from ORM models (HTTP-layer concerns only).

Usage:
    from src.schemas import OrderResponse, CreateMemberRequest
"""

from src.schemas.common_schemas import AddressSchema, CountedResponse
from src.schemas.member_schemas import (
    CreateMemberRequest,
    CreateMemberResponse,
    MemberEntityRequest,
    MemberNameResponse,
    UpdateMemberRequest,
    UpdateMemberResponse,
)
from src.schemas.order_schemas import (
    DeliveryEntitySchema,
    ItemEntitySchema,
    MemberEntitySchema,
    OrderEntitySchema,
    OrderFlatResponse,
    OrderItemEntitySchema,
    OrderItemResponse,
    OrderResponse,
    SimpleOrderEntitySchema,
    SimpleOrderResponse,
)

__all__ = [
    "AddressSchema",
    "CountedResponse",
    # Members
    "CreateMemberRequest",
    "CreateMemberResponse",
    "MemberEntityRequest",
    "MemberEntitySchema",
    "MemberNameResponse",
    "UpdateMemberRequest",
    "UpdateMemberResponse",
    # Orders
    "DeliveryEntitySchema",
    "ItemEntitySchema",
    "OrderEntitySchema",
    "OrderFlatResponse",
    "OrderItemEntitySchema",
    "OrderItemResponse",
    "OrderResponse",
    "SimpleOrderEntitySchema",
    "SimpleOrderResponse",
]
