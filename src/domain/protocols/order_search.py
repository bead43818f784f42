"""Search criteria for entity order listing."""

from dataclasses import dataclass

from src.domain.enums.order_status import OrderStatus


@dataclass(frozen=True, kw_only=True)
class OrderSearch:
    """Optional filters applied to the order listing.

    Attributes:
        member_name: Case-insensitive substring of the member name.
        order_status: Exact order status.
    """

    member_name: str | None = None
    order_status: OrderStatus | None = None

    def is_empty(self) -> bool:
        return not self.member_name and self.order_status is None
