"""UpdateMemberName command handler.

The response carries the id and name read back from the repository after
the change was committed, not the values from the command.
"""

from src.application.commands.member_commands import UpdateMemberName
from src.application.dtos.member_dtos import MemberNameResult
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.member_repository import MemberRepository


class UpdateMemberNameHandler:
    """Handler for UpdateMemberName command.

    Returns:
        Result[MemberNameResult, DomainError]
    """

    def __init__(self, member_repo: MemberRepository, logger: LoggerProtocol) -> None:
        self._member_repo = member_repo
        self._logger = logger

    async def handle(
        self, cmd: UpdateMemberName
    ) -> Result[MemberNameResult, DomainError]:
        """Handle UpdateMemberName command.

        Args:
            cmd: UpdateMemberName command.

        Returns:
            Success(MemberNameResult): Stored id and name after the rename.
            Failure(ValidationError): New name is empty or whitespace.
            Failure(NotFoundError): No member with this id.
        """
        name = cmd.name.strip()
        if not name:
            self._logger.warning(
                "member_update_rejected",
                member_id=str(cmd.member_id),
                reason="blank_name",
            )
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_MEMBER_NAME,
                    message="Member name cannot be empty",
                    field="name",
                )
            )

        member = await self._member_repo.find_by_id(cmd.member_id)
        if member is None:
            self._logger.warning(
                "member_update_rejected",
                member_id=str(cmd.member_id),
                reason="not_found",
            )
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.MEMBER_NOT_FOUND,
                    message=f"Member '{cmd.member_id}' not found",
                    resource_type="Member",
                    resource_id=str(cmd.member_id),
                )
            )

        member.name = name
        await self._member_repo.update(member)

        stored = await self._member_repo.find_by_id(cmd.member_id)
        if stored is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.MEMBER_NOT_FOUND,
                    message=f"Member '{cmd.member_id}' not found",
                    resource_type="Member",
                    resource_id=str(cmd.member_id),
                )
            )

        self._logger.info("member_updated", member_id=str(stored.id))
        return Success(value=MemberNameResult(id=stored.id, name=stored.name))
