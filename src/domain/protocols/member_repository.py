"""MemberRepository protocol for member persistence.

Port (interface) for hexagonal architecture.
"""

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.member import Member


class MemberRepository(Protocol):
    """Member repository protocol (port).

    Methods:
        find_all: All members in id order
        find_by_id: Member by identifier
        find_by_name: Members with exactly this name
        save: Persist a new member
        update: Flush changes of a loaded member
    """

    async def find_all(self) -> list["Member"]:
        """Find all members in id order."""
        ...

    async def find_by_id(self, member_id: UUID) -> "Member | None":
        """Find member by ID.

        Args:
            member_id: Member's unique identifier.

        Returns:
            Member if found, None otherwise.
        """
        ...

    async def find_by_name(self, name: str) -> list["Member"]:
        """Find members whose name equals name exactly."""
        ...

    async def save(self, member: "Member") -> None:
        """Persist a new member (id is assigned on save)."""
        ...

    async def update(self, member: "Member") -> None:
        """Persist changes made to a member loaded by this repository."""
        ...
