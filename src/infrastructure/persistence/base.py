"""Base model and mixins for all database entities.

This module provides:
- BaseModel: Base class for ALL models (provides id, created_at)
- TimestampMixin: Internal mixin that adds updated_at
- BaseMutableModel: Recommended base for mutable models (combines above)

The shop models double as the entities handed to route handlers. Loading
strategy (lazy, joined, select-in) is the subject of the order endpoints,
so relationships stay on the mapped classes instead of being copied into
separate domain objects.

AsyncAttrs:
    Lazy relationships cannot be loaded implicitly under asyncio. Every
    model inherits AsyncAttrs so callers can trigger the lazy SELECT
    explicitly:

        member = await order.awaitable_attrs.member

Primary keys:
    UUIDv7 (time-ordered). Ordering by id is insertion order, which gives
    every order listing a stable sort without an extra column.

Architecture:
    BaseModel (id, created_at)
        ↑
        └── BaseMutableModel (+ updated_at via TimestampMixin)
            ├── Member
            ├── Order, OrderItem, Delivery
            └── Item (Book, Album, Movie)
"""

from datetime import datetime
from typing import Any
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class BaseModel(AsyncAttrs, DeclarativeBase):
    """Base class for all database models.

    Provides common fields that ALL database models need:
    - id: UUIDv7 primary key (auto-generated, time-ordered)
    - created_at: Timestamp when record was created (UTC)
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),  # Database sets this on INSERT
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: String showing class name and ID.
        """
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging).

        Returns:
            dict: Dictionary representation of the model.
        """
        return {
            "id": str(self.id),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class TimestampMixin:
    """Mixin for mutable models that track updates.

    Note:
        Use BaseMutableModel instead of mixing TimestampMixin + BaseModel manually.
    """

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def to_dict(self) -> dict[str, Any]:
        """Extend BaseModel.to_dict() to include updated_at."""
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models.

    Provides:
        - id: UUIDv7 primary key (from BaseModel)
        - created_at: Timestamp when created (from BaseModel)
        - updated_at: Timestamp when last updated (from TimestampMixin)
    """

    __abstract__ = True
