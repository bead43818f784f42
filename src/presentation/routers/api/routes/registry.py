"""Route registry for the shop API.

Every /api route is declared here once. Order listings carry the
fetch_strategy that backs them; the compliance tests rely on it.

Reference:
    Query counts per strategy: src/domain/enums/fetch_strategy.py
"""

from src.domain.enums.fetch_strategy import OrderFetchStrategy
from src.presentation.routers.api.members import (
    create_member_v1,
    create_member_v2,
    list_members_v1,
    list_members_v2,
    update_member_v2,
)
from src.presentation.routers.api.orders import (
    list_orders_v1,
    list_orders_v2,
    list_orders_v3,
    list_orders_v3_1,
    list_orders_v4,
    list_orders_v5,
    list_orders_v6,
)
from src.presentation.routers.api.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from src.presentation.routers.api.simple_orders import (
    list_simple_orders_v1,
    list_simple_orders_v2,
    list_simple_orders_v3,
    list_simple_orders_v4,
)
from src.schemas.common_schemas import CountedResponse
from src.schemas.member_schemas import (
    CreateMemberResponse,
    MemberNameResponse,
    UpdateMemberResponse,
)
from src.schemas.order_schemas import (
    MemberEntitySchema,
    OrderEntitySchema,
    OrderFlatResponse,
    OrderResponse,
    SimpleOrderEntitySchema,
    SimpleOrderResponse,
)

_SEARCH_ERRORS = [ErrorSpec(status=422, description="Invalid search filter")]

ORDER_ROUTES: list[RouteMetadata] = [
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/v1/orders",
        handler=list_orders_v1,
        resource="orders",
        tags=["Orders"],
        version="v1",
        summary="List orders (entity exposure)",
        description="Exposes the entity graph without back references. "
        "Every relation is lazily loaded (1 + N + N + N + M queries).",
        operation_id="list_orders_v1",
        response_model=list[OrderEntitySchema],
        errors=_SEARCH_ERRORS,
        idempotency=IdempotencyLevel.SAFE,
        fetch_strategy=OrderFetchStrategy.LAZY,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/v2/orders",
        handler=list_orders_v2,
        resource="orders",
        tags=["Orders"],
        version="v2",
        summary="List orders (lazy loading)",
        description="Entities converted to DTOs, relations loaded one "
        "SELECT at a time (1 + N + N + N + M queries).",
        operation_id="list_orders_v2",
        response_model=list[OrderResponse],
        errors=_SEARCH_ERRORS,
        idempotency=IdempotencyLevel.SAFE,
        fetch_strategy=OrderFetchStrategy.LAZY,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/v3/orders",
        handler=list_orders_v3,
        resource="orders",
        tags=["Orders"],
        version="v3",
        summary="List orders (fetch join)",
        description="Single JOIN including the order lines (1 query). "
        "Rows are de-duplicated in memory, so this cannot be paginated.",
        operation_id="list_orders_v3",
        response_model=list[OrderResponse],
        idempotency=IdempotencyLevel.SAFE,
        fetch_strategy=OrderFetchStrategy.FETCH_JOIN,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/v3.1/orders",
        handler=list_orders_v3_1,
        resource="orders",
        tags=["Orders"],
        version="v3.1",
        summary="List orders (paged, batch fetch)",
        description="Member and delivery joined into the paged query, order "
        "lines and items loaded with one IN query each (3 queries).",
        operation_id="list_orders_v3_1",
        response_model=list[OrderResponse],
        errors=[
            ErrorSpec(status=400, description="Invalid pagination"),
            ErrorSpec(status=422, description="offset/limit out of range"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        fetch_strategy=OrderFetchStrategy.BATCH_FETCH,
        paginated=True,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/v4/orders",
        handler=list_orders_v4,
        resource="orders",
        tags=["Orders"],
        version="v4",
        summary="List orders (DTO projection, per-order lines)",
        description="Order headers projected directly, then one order-lines "
        "query per order (1 + N queries).",
        operation_id="list_orders_v4",
        response_model=list[OrderResponse],
        idempotency=IdempotencyLevel.SAFE,
        fetch_strategy=OrderFetchStrategy.DTO_PER_ORDER,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/v5/orders",
        handler=list_orders_v5,
        resource="orders",
        tags=["Orders"],
        version="v5",
        summary="List orders (DTO projection, IN lines)",
        description="Order headers projected directly, then all order lines "
        "in one IN query (2 queries).",
        operation_id="list_orders_v5",
        response_model=list[OrderResponse],
        idempotency=IdempotencyLevel.SAFE,
        fetch_strategy=OrderFetchStrategy.DTO_IN_CLAUSE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/v6/orders",
        handler=list_orders_v6,
        resource="orders",
        tags=["Orders"],
        version="v6",
        summary="List order lines (flat projection)",
        description="One denormalized row per order line from a single "
        "query. Not pageable, orders without lines are absent.",
        operation_id="list_orders_v6",
        response_model=list[OrderFlatResponse],
        idempotency=IdempotencyLevel.SAFE,
        fetch_strategy=OrderFetchStrategy.DTO_FLAT,
    ),
]

SIMPLE_ORDER_ROUTES: list[RouteMetadata] = [
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/v1/simple-orders",
        handler=list_simple_orders_v1,
        resource="simple-orders",
        tags=["Simple Orders"],
        version="v1",
        summary="List simple orders (entity exposure)",
        operation_id="list_simple_orders_v1",
        response_model=list[SimpleOrderEntitySchema],
        errors=_SEARCH_ERRORS,
        idempotency=IdempotencyLevel.SAFE,
        fetch_strategy=OrderFetchStrategy.LAZY,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/v2/simple-orders",
        handler=list_simple_orders_v2,
        resource="simple-orders",
        tags=["Simple Orders"],
        version="v2",
        summary="List simple orders (lazy loading)",
        description="1 + N (member) + N (delivery) queries.",
        operation_id="list_simple_orders_v2",
        response_model=list[SimpleOrderResponse],
        errors=_SEARCH_ERRORS,
        idempotency=IdempotencyLevel.SAFE,
        fetch_strategy=OrderFetchStrategy.LAZY,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/v3/simple-orders",
        handler=list_simple_orders_v3,
        resource="simple-orders",
        tags=["Simple Orders"],
        version="v3",
        summary="List simple orders (fetch join)",
        operation_id="list_simple_orders_v3",
        response_model=list[SimpleOrderResponse],
        idempotency=IdempotencyLevel.SAFE,
        fetch_strategy=OrderFetchStrategy.FETCH_JOIN,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/v4/simple-orders",
        handler=list_simple_orders_v4,
        resource="simple-orders",
        tags=["Simple Orders"],
        version="v4",
        summary="List simple orders (DTO projection)",
        operation_id="list_simple_orders_v4",
        response_model=list[SimpleOrderResponse],
        idempotency=IdempotencyLevel.SAFE,
        fetch_strategy=OrderFetchStrategy.DTO_SIMPLE,
    ),
]

MEMBER_ROUTES: list[RouteMetadata] = [
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/v1/members",
        handler=list_members_v1,
        resource="members",
        tags=["Members"],
        version="v1",
        summary="List members (entity exposure)",
        operation_id="list_members_v1",
        response_model=list[MemberEntitySchema],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/v2/members",
        handler=list_members_v2,
        resource="members",
        tags=["Members"],
        version="v2",
        summary="List member names",
        description="Names wrapped in a {count, data} envelope.",
        operation_id="list_members_v2",
        response_model=CountedResponse[MemberNameResponse],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/v1/members",
        handler=create_member_v1,
        resource="members",
        tags=["Members"],
        version="v1",
        summary="Create member (entity body)",
        operation_id="create_member_v1",
        response_model=CreateMemberResponse,
        errors=[
            ErrorSpec(status=400, description="Blank member name"),
            ErrorSpec(status=409, description="Member name already registered"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/v2/members",
        handler=create_member_v2,
        resource="members",
        tags=["Members"],
        version="v2",
        summary="Create member",
        operation_id="create_member_v2",
        response_model=CreateMemberResponse,
        errors=[
            ErrorSpec(status=400, description="Blank member name"),
            ErrorSpec(status=409, description="Member name already registered"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/v2/members/{member_id}",
        handler=update_member_v2,
        resource="members",
        tags=["Members"],
        version="v2",
        summary="Rename member",
        operation_id="update_member_v2",
        response_model=UpdateMemberResponse,
        errors=[
            ErrorSpec(status=400, description="Blank member name"),
            ErrorSpec(status=404, description="Member not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
]

ROUTE_REGISTRY: list[RouteMetadata] = [
    *ORDER_ROUTES,
    *SIMPLE_ORDER_ROUTES,
    *MEMBER_ROUTES,
]
