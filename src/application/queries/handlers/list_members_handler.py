"""ListMembers query handler."""

from typing import TYPE_CHECKING

from src.application.queries.member_queries import ListMembers
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.member_repository import MemberRepository

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.member import Member


class ListMembersHandler:
    """Handler for ListMembers query.

    Returns:
        Result[list[Member], DomainError]: Always Success.
    """

    def __init__(self, member_repo: MemberRepository, logger: LoggerProtocol) -> None:
        self._member_repo = member_repo
        self._logger = logger

    async def handle(self, query: ListMembers) -> Result[list["Member"], DomainError]:
        members = await self._member_repo.find_all()
        self._logger.info("members_listed", count=len(members))
        return Success(value=members)
