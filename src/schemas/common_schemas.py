"""Common schemas used across multiple API endpoints.

Provides the embedded address schema and the countable list envelope.
"""

from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from src.domain.value_objects.address import Address

T = TypeVar("T")


class AddressSchema(BaseModel):
    """Postal address (embedded in member and delivery).

    Attributes:
        city: City name.
        street: Street line.
        zipcode: Postal code.
    """

    model_config = ConfigDict(from_attributes=True)

    city: str | None = Field(None, description="City", examples=["Seoul"])
    street: str | None = Field(None, description="Street", examples=["1 Main St"])
    zipcode: str | None = Field(None, description="Postal code", examples=["11111"])

    @classmethod
    def from_address(cls, address: Address | None) -> "AddressSchema | None":
        """Convert Address value object to schema.

        None and an address with no component set both become None.
        """
        if address is None or address.is_empty():
            return None
        return cls(city=address.city, street=address.street, zipcode=address.zipcode)

    def to_address(self) -> Address:
        return Address(city=self.city, street=self.street, zipcode=self.zipcode)


def _empty_address_to_none(value: Any) -> Any:
    if isinstance(value, Address) and value.is_empty():
        return None
    return value


# Address field read from an entity (from_attributes). The composite yields
# an Address with every component None when the columns are empty.
EntityAddress = Annotated[AddressSchema | None, BeforeValidator(_empty_address_to_none)]


class CountedResponse(BaseModel, Generic[T]):
    """List envelope carrying the element count next to the data.

    Wrapping the list in an object leaves room for more top-level fields
    without breaking clients.

    Attributes:
        count: Number of elements in data.
        data: Listed elements.
    """

    count: int = Field(..., description="Number of elements in data")
    data: list[T] = Field(..., description="Listed elements")

    @classmethod
    def of(cls, data: list[T]) -> "CountedResponse[T]":
        return cls(count=len(data), data=data)
