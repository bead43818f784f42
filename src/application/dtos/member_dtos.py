"""Member DTOs (handler results)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class MemberNameResult:
    """Member identifier and name read back after a rename.

    Attributes:
        id: Member identifier.
        name: Name as stored.
    """

    id: UUID
    name: str
