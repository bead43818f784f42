"""Domain protocols (ports) package.

Protocol definitions the application layer depends on. Infrastructure
adapters implement them structurally, without inheritance.

Usage:
    from src.domain.protocols import OrderRepository, OrderQueryRepository
"""

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.member_repository import MemberRepository
from src.domain.protocols.order_query_repository import (
    OrderFlatDto,
    OrderItemQueryDto,
    OrderQueryDto,
    OrderQueryRepository,
    OrderSimpleQueryDto,
    OrderSimpleQueryRepository,
)
from src.domain.protocols.order_repository import OrderRepository
from src.domain.protocols.order_search import OrderSearch

__all__ = [
    "LoggerProtocol",
    "MemberRepository",
    "OrderFlatDto",
    "OrderItemQueryDto",
    "OrderQueryDto",
    "OrderQueryRepository",
    "OrderRepository",
    "OrderSearch",
    "OrderSimpleQueryDto",
    "OrderSimpleQueryRepository",
]
