"""Database seeding package.

Provides idempotent seeders that run after Alembic migrations when
requested (`alembic -x seed=true upgrade head`).
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.persistence.seed import seed_sample_data

logger = structlog.get_logger(__name__)


async def run_all_seeders(session: AsyncSession) -> None:
    """Run all database seeders. Called after Alembic migrations.

    All seeders are idempotent - safe to run on every migration.

    Args:
        session: Async database session.
    """
    logger.info("seeding_started")

    await seed_sample_data(session)

    logger.info("seeding_completed")


__all__ = ["run_all_seeders"]
