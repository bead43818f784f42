"""Data Transfer Objects (DTOs) for application layer.

DTOs are result dataclasses returned by command and query handlers.

Usage:
    from src.application.dtos import MemberNameResult, group_flat_rows

Note:
    Projection rows (OrderQueryDto, OrderFlatDto, ...) are port data types
    defined in src/domain/protocols/order_query_repository.py.
"""

from src.application.dtos.member_dtos import MemberNameResult
from src.application.dtos.order_dtos import group_flat_rows

__all__ = [
    "MemberNameResult",
    "group_flat_rows",
]
