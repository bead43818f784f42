"""Address value object.

Embedded (not a table of its own) in both Member and Delivery. The
persistence layer maps it with SQLAlchemy composite() onto the
city/street/zipcode columns of the owning table.

Usage:
    from src.domain.value_objects import Address

    address = Address(city="Seoul", street="1 Main St", zipcode="11111")
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """Immutable postal address.

    Attributes:
        city: City name.
        street: Street line.
        zipcode: Postal code.
    """

    city: str | None = None
    street: str | None = None
    zipcode: str | None = None

    def is_empty(self) -> bool:
        """Return True when no component is set."""
        return self.city is None and self.street is None and self.zipcode is None
