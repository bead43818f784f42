"""Repository implementations (adapters for hexagonal architecture).

Concrete implementations of the repository protocols defined in
src/domain/protocols.
"""

from src.infrastructure.persistence.repositories.member_repository import (
    MemberRepository,
)
from src.infrastructure.persistence.repositories.order_query_repository import (
    OrderQueryRepository,
)
from src.infrastructure.persistence.repositories.order_repository import (
    OrderRepository,
)
from src.infrastructure.persistence.repositories.order_simple_query_repository import (
    OrderSimpleQueryRepository,
)

__all__ = [
    "MemberRepository",
    "OrderQueryRepository",
    "OrderRepository",
    "OrderSimpleQueryRepository",
]
