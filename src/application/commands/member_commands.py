"""Member commands (CQRS write operations).

Commands represent intent to change system state.
All commands are immutable (frozen=True) and keyword-only (kw_only=True).
Validation of the name happens in the handler so the failure comes back
as a ValidationError in a Result.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects.address import Address


@dataclass(frozen=True, kw_only=True)
class CreateMember:
    """Register a new member.

    Attributes:
        name: Member name (must not be blank, must not be taken).
        address: Optional postal address.

    Example:
        >>> command = CreateMember(name="member1")
        >>> result = await handler.handle(command)
    """

    name: str
    address: Address | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateMemberName:
    """Rename an existing member.

    Attributes:
        member_id: Member to rename.
        name: New name (must not be blank).
    """

    member_id: UUID
    name: str
