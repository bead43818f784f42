"""Database persistence infrastructure.

This package provides:
- Base model for all database entities
- Database connection and session management
- Entity and projection repositories
- QueryCounter for observing loading strategies
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.query_counter import QueryCounter

__all__ = [
    "BaseModel",
    "Database",
    "QueryCounter",
]
