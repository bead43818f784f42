"""CreateMember command handler.

Flow:
1. Reject blank names (ValidationError, field "name")
2. Reject names already registered (ConflictError)
3. Persist the member
4. Return Success(member_id)

Names are stored with surrounding whitespace removed. The duplicate check
compares the stripped name exactly.
"""

from uuid import UUID

from src.application.commands.member_commands import CreateMember
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.member_repository import MemberRepository
from src.infrastructure.persistence.models.member import Member


class CreateMemberHandler:
    """Handler for CreateMember command.

    Dependencies (injected via constructor):
        - MemberRepository: Member persistence
        - LoggerProtocol: Structured logging

    Returns:
        Result[UUID, DomainError]: Success(member_id) or Failure(error)
    """

    def __init__(self, member_repo: MemberRepository, logger: LoggerProtocol) -> None:
        self._member_repo = member_repo
        self._logger = logger

    async def handle(self, cmd: CreateMember) -> Result[UUID, DomainError]:
        """Handle CreateMember command.

        Args:
            cmd: CreateMember command.

        Returns:
            Success(UUID): Identifier of the stored member.
            Failure(ValidationError): Name is empty or whitespace.
            Failure(ConflictError): A member with this name already exists.
        """
        name = cmd.name.strip()
        if not name:
            self._logger.warning("member_create_rejected", reason="blank_name")
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_MEMBER_NAME,
                    message="Member name cannot be empty",
                    field="name",
                )
            )

        if await self._member_repo.find_by_name(name):
            self._logger.warning("member_create_rejected", reason="duplicate_name")
            return Failure(
                error=ConflictError(
                    code=ErrorCode.MEMBER_ALREADY_EXISTS,
                    message="A member with this name already exists",
                    resource_type="Member",
                    conflicting_field="name",
                )
            )

        member = Member(name=name)
        if cmd.address is not None:
            member.address = cmd.address
        await self._member_repo.save(member)

        self._logger.info("member_created", member_id=str(member.id))
        return Success(value=member.id)
