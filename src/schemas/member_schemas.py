"""Member request and response schemas.

Pydantic schemas for member API endpoints. Includes:
- Request schemas (client → API)
- Response schemas (API → client)
"""

from uuid import UUID

from pydantic import BaseModel, Field

from src.application.dtos.member_dtos import MemberNameResult
from src.schemas.common_schemas import AddressSchema


# =============================================================================
# Request Schemas
# =============================================================================


class MemberEntityRequest(BaseModel):
    """Member entity shape accepted by POST /api/v1/members.

    Attributes:
        name: Member name.
        address: Optional postal address.
    """

    name: str = Field(..., description="Member name", examples=["userA"])
    address: AddressSchema | None = Field(None, description="Postal address")


class CreateMemberRequest(BaseModel):
    """Body of POST /api/v2/members.

    Blank names pass schema validation and are rejected by the handler
    with a 400 Problem Details response.
    """

    name: str = Field(..., description="Member name", examples=["userA"])


class UpdateMemberRequest(BaseModel):
    """Body of PUT /api/v2/members/{id}."""

    name: str = Field(..., description="New member name", examples=["userB"])


# =============================================================================
# Response Schemas
# =============================================================================


class CreateMemberResponse(BaseModel):
    """Identifier of the created member."""

    id: UUID = Field(..., description="Member identifier")


class UpdateMemberResponse(BaseModel):
    """Identifier and stored name after a rename."""

    id: UUID = Field(..., description="Member identifier")
    name: str = Field(..., description="Member name as stored")

    @classmethod
    def from_dto(cls, dto: MemberNameResult) -> "UpdateMemberResponse":
        return cls(id=dto.id, name=dto.name)


class MemberNameResponse(BaseModel):
    """Member projection exposing only the name."""

    name: str = Field(..., description="Member name")
