"""MemberRepository - SQLAlchemy implementation of MemberRepository protocol."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.persistence.models.member import Member


class MemberRepository:
    """SQLAlchemy implementation of MemberRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_all(self) -> list[Member]:
        result = await self.session.scalars(select(Member).order_by(Member.id))
        return list(result.all())

    async def find_by_id(self, member_id: UUID) -> Member | None:
        """Find member by ID.

        Args:
            member_id: Member's unique identifier.

        Returns:
            Member if found, None otherwise.
        """
        return await self.session.get(Member, member_id)

    async def find_by_name(self, name: str) -> list[Member]:
        stmt = select(Member).where(Member.name == name).order_by(Member.id)
        result = await self.session.scalars(stmt)
        return list(result.all())

    async def save(self, member: Member) -> None:
        """Create new member in database.

        Args:
            member: Member to persist. id and timestamps are populated on return.
        """
        self.session.add(member)
        await self.session.commit()
        await self.session.refresh(member)

    async def update(self, member: Member) -> None:
        """Commit pending changes on a member loaded through this session.

        Args:
            member: Member with modified fields.
        """
        await self.session.commit()
        await self.session.refresh(member)
