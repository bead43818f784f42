"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_list_orders_handler, ...

The container is organized into modules by concern:
- infrastructure: Database, session and logging
- repositories: Repository factories
- order_handlers: Order and simple order query handler factories
- member_handlers: Member query/command handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
)

# Repositories
from src.core.container.repositories import (
    get_member_repository,
    get_order_query_repository,
    get_order_repository,
    get_order_simple_query_repository,
)

# Order handlers
from src.core.container.order_handlers import (
    get_list_order_flat_rows_handler,
    get_list_order_query_dtos_handler,
    get_list_orders_handler,
    get_list_simple_order_query_dtos_handler,
    get_list_simple_orders_handler,
)

# Member handlers
from src.core.container.member_handlers import (
    get_create_member_handler,
    get_list_members_handler,
    get_update_member_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    # Repositories
    "get_member_repository",
    "get_order_query_repository",
    "get_order_repository",
    "get_order_simple_query_repository",
    # Order handlers
    "get_list_order_flat_rows_handler",
    "get_list_order_query_dtos_handler",
    "get_list_orders_handler",
    "get_list_simple_order_query_dtos_handler",
    "get_list_simple_orders_handler",
    # Member handlers
    "get_create_member_handler",
    "get_list_members_handler",
    "get_update_member_handler",
]
