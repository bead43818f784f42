"""Member handler dependency factories.

Request-scoped handler instances for member listing, creation and rename.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session, get_logger

if TYPE_CHECKING:
    from src.application.commands.handlers.create_member_handler import (
        CreateMemberHandler,
    )
    from src.application.commands.handlers.update_member_handler import (
        UpdateMemberNameHandler,
    )
    from src.application.queries.handlers.list_members_handler import (
        ListMembersHandler,
    )


async def get_list_members_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListMembersHandler":
    """Get ListMembers query handler (request-scoped)."""
    from src.application.queries.handlers.list_members_handler import (
        ListMembersHandler,
    )
    from src.infrastructure.persistence.repositories import MemberRepository

    return ListMembersHandler(
        member_repo=MemberRepository(session=session),
        logger=get_logger(),
    )


async def get_create_member_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateMemberHandler":
    """Get CreateMember command handler (request-scoped).

    Creates handler with:
    - MemberRepository (request-scoped)
    - Logger (app-scoped)

    Returns:
        CreateMemberHandler instance.
    """
    from src.application.commands.handlers.create_member_handler import (
        CreateMemberHandler,
    )
    from src.infrastructure.persistence.repositories import MemberRepository

    return CreateMemberHandler(
        member_repo=MemberRepository(session=session),
        logger=get_logger(),
    )


async def get_update_member_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateMemberNameHandler":
    """Get UpdateMemberName command handler (request-scoped)."""
    from src.application.commands.handlers.update_member_handler import (
        UpdateMemberNameHandler,
    )
    from src.infrastructure.persistence.repositories import MemberRepository

    return UpdateMemberNameHandler(
        member_repo=MemberRepository(session=session),
        logger=get_logger(),
    )
