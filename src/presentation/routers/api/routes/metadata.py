"""Route metadata types for the API Route Registry.

The registry is the single source of truth for all shop API routes: the
generator turns each entry into a FastAPI route, and the compliance tests
read it to check that every order endpoint names its loading strategy.

Core types:
    RouteMetadata: Complete route specification
    HTTPMethod: HTTP method enum (GET, POST, PUT)
    ErrorSpec: Error response specification for OpenAPI
    IdempotencyLevel: HTTP idempotency classification

Usage:
    from src.presentation.routers.api.routes.metadata import RouteMetadata, HTTPMethod

    metadata = RouteMetadata(
        method=HTTPMethod.GET,
        path="/v3/orders",
        handler=list_orders_v3,
        resource="orders",
        tags=["Orders"],
        version="v3",
        summary="List orders (fetch join)",
        response_model=list[OrderResponse],
        idempotency=IdempotencyLevel.SAFE,
        fetch_strategy=OrderFetchStrategy.FETCH_JOIN,
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel

from src.domain.enums.fetch_strategy import OrderFetchStrategy


class HTTPMethod(str, Enum):
    """HTTP methods used by the shop API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"


class IdempotencyLevel(str, Enum):
    """HTTP idempotency classification.

    Attributes:
        SAFE: No side effects (GET)
        IDEMPOTENT: Side effects, but repeatable (PUT)
        NON_IDEMPOTENT: Side effects, not repeatable (POST)
    """

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Examples:
        >>> ErrorSpec(status=404, description="Member not found")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for an API route.

    Identity fields:
        method: HTTP method
        path: URL path relative to the /api prefix (e.g., "/v3.1/orders")
        handler: Async function that implements the endpoint

    Grouping fields:
        resource: Resource category ("orders", "simple-orders", "members")
        tags: OpenAPI tags
        version: API version segment ("v1" ... "v6", "v3.1")

    OpenAPI documentation:
        summary, description, operation_id

    Request/Response:
        response_model: Success response type (may be list[...] or generic)
        status_code: Expected success status
        errors: Possible error responses for OpenAPI

    Behavior:
        idempotency: HTTP idempotency level
        fetch_strategy: ORM loading strategy behind an order listing
        paginated: Whether the route accepts offset/limit

    Deprecation:
        deprecated: Whether endpoint is deprecated
        replacement: Optional replacement endpoint path
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]
    version: str

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: Any = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    idempotency: IdempotencyLevel
    fetch_strategy: OrderFetchStrategy | None = None
    paginated: bool = False

    # Deprecation
    deprecated: bool = False
    replacement: str | None = None
