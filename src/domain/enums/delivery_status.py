"""Delivery lifecycle states."""

from enum import Enum


class DeliveryStatus(str, Enum):
    """Delivery lifecycle states.

    READY until the parcel is handed to the carrier, COMP once delivered.
    An order can only be cancelled while its delivery is READY.
    """

    READY = "ready"
    COMP = "comp"
