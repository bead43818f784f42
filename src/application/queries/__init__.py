"""Queries - Read operations that fetch data.

Queries are immutable dataclasses. Each has a handler in queries/handlers
that returns a Result. Queries NEVER change state.
"""

from src.application.queries.member_queries import ListMembers
from src.application.queries.order_queries import (
    ListOrderFlatRows,
    ListOrderQueryDtos,
    ListOrders,
    ListSimpleOrderQueryDtos,
    ListSimpleOrders,
)

__all__ = [
    # Member queries
    "ListMembers",
    # Order queries
    "ListOrderFlatRows",
    "ListOrderQueryDtos",
    "ListOrders",
    "ListSimpleOrderQueryDtos",
    "ListSimpleOrders",
]
