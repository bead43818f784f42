"""Database connection and session management.

This module provides database connection management using SQLAlchemy's
async engine and session handling. It follows dependency injection patterns
to provide database sessions to repositories.

Supported URLs:
- postgresql+asyncpg://... (deployment, pooled)
- sqlite+aiosqlite:///./shop.db (local runs and tests)
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Database connection and session management.

    Owns the async engine and the session factory:
    - Connection pooling (PostgreSQL only, SQLite uses SQLAlchemy defaults)
    - Session lifecycle
    - Transaction management

    Usage:
        db = Database("sqlite+aiosqlite:///./shop.db")
        async with db.get_session() as session:
            # Automatically commits on success, rolls back on error
            ...
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 0,
    ) -> None:
        """Initialize database with connection parameters.

        Args:
            database_url: SQLAlchemy async URL.
            echo: If True, log all SQL statements.
            pool_size: Connections kept in the pool (PostgreSQL).
            max_overflow: Connections allowed above pool_size (PostgreSQL).
        """
        url = make_url(database_url)
        self.is_sqlite = url.get_backend_name() == "sqlite"

        engine_kwargs: dict[str, Any] = {"echo": echo}
        if not self.is_sqlite:
            engine_kwargs.update(
                pool_pre_ping=True,
                pool_size=pool_size,
                max_overflow=max_overflow,
                connect_args={
                    "server_settings": {"jit": "off"},
                    "command_timeout": 60,
                    "timeout": 30,
                },
            )

        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)

        if self.is_sqlite:
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a transactional database session.

        Commits on successful exit, rolls back on exception and always
        closes the session.

        Yields:
            AsyncSession: Database session for operations.
        """
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_all(self) -> None:
        """Create all tables defined in the models.

        Warning: Local runs and tests only. Deployments use Alembic.
        """
        from src.infrastructure.persistence import models  # noqa: F401
        from src.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop all tables defined in the models.

        Warning: This will delete all data! Only use for testing.
        """
        from src.infrastructure.persistence import models  # noqa: F401
        from src.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.drop_all)

    async def close(self) -> None:
        """Close all database connections."""
        await self.engine.dispose()

    async def check_connection(self) -> bool:
        """Check if database connection is working.

        Returns:
            bool: True if SELECT 1 succeeds, False on a database error.
        """
        try:
            async with self.get_session() as session:
                await session.execute(text("SELECT 1"))
                return True
        except (SQLAlchemyError, OSError):
            return False
