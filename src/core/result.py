"""Result types for railway-oriented programming.

Handlers return a Result instead of raising for expected failures. The
route function pattern-matches and either renders the value or maps the
error to a Problem Details response.

Usage:
    async def handle(self, cmd: CreateMember) -> Result[UUID, DomainError]:
        if not cmd.name.strip():
            return Failure(error=ValidationError(...))
        ...
        return Success(value=member.id)

    match await handler.handle(cmd):
        case Success(value=member_id):
            return CreateMemberResponse(id=member_id)
        case Failure(error=error):
            return _map_member_error(error, request)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome carrying the value."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome carrying the error."""

    error: E


type Result[T, E] = Success[T] | Failure[E]
