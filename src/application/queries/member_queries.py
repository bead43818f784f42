"""Member queries (CQRS read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ListMembers:
    """List all members in registration order."""
