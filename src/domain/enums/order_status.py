"""Order lifecycle states.

Usage:
    from src.domain.enums import OrderStatus

    if order.status == OrderStatus.CANCEL:
        # Order was cancelled
"""

from enum import Enum


class OrderStatus(str, Enum):
    """Order lifecycle states.

    String Enum:
        Inherits from str for easy serialization and database storage.
        Values are lowercase for consistency.
    """

    ORDER = "order"
    """Order placed."""

    CANCEL = "cancel"
    """Order cancelled by the customer."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all status values as strings.

        Returns:
            list[str]: List of status values.
        """
        return [status.value for status in cls]
