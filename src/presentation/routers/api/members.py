"""Members resource handlers.

Handler functions for member endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_members_v1   - Member entities as stored
    list_members_v2   - {count, data: [{name}]}
    create_member_v1  - Body in entity shape, returns {id}
    create_member_v2  - Body {name}, returns {id}
    update_member_v2  - Rename, returns {id, name}
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.create_member_handler import (
    CreateMemberHandler,
)
from src.application.commands.handlers.update_member_handler import (
    UpdateMemberNameHandler,
)
from src.application.commands.member_commands import CreateMember, UpdateMemberName
from src.application.errors import ApplicationError
from src.application.queries.handlers.list_members_handler import ListMembersHandler
from src.application.queries.member_queries import ListMembers
from src.core.container import (
    get_create_member_handler,
    get_list_members_handler,
    get_update_member_handler,
)
from src.core.errors import DomainError
from src.core.result import Failure
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.schemas.common_schemas import CountedResponse
from src.schemas.member_schemas import (
    CreateMemberRequest,
    CreateMemberResponse,
    MemberEntityRequest,
    MemberNameResponse,
    UpdateMemberRequest,
    UpdateMemberResponse,
)
from src.schemas.order_schemas import MemberEntitySchema


def _error_response(
    error: DomainError, request: Request, *, is_command: bool = True
) -> JSONResponse:
    """Map a handler DomainError to an RFC 9457 response.

    ValidationError → 400, NotFoundError → 404, ConflictError → 409.
    """
    return ErrorResponseBuilder.from_application_error(
        error=ApplicationError.from_domain_error(error, is_command=is_command),
        request=request,
        trace_id=get_trace_id() or "",
    )


# =============================================================================
# Queries
# =============================================================================


async def list_members_v1(
    request: Request,
    handler: ListMembersHandler = Depends(get_list_members_handler),
) -> list[MemberEntitySchema] | JSONResponse:
    """List members as stored.

    GET /api/v1/members → 200 OK
    """
    result = await handler.handle(ListMembers())
    if isinstance(result, Failure):
        return _error_response(result.error, request, is_command=False)

    return [MemberEntitySchema.model_validate(member) for member in result.value]


async def list_members_v2(
    request: Request,
    handler: ListMembersHandler = Depends(get_list_members_handler),
) -> CountedResponse[MemberNameResponse] | JSONResponse:
    """List member names wrapped in a countable envelope.

    GET /api/v2/members → 200 OK
    """
    result = await handler.handle(ListMembers())
    if isinstance(result, Failure):
        return _error_response(result.error, request, is_command=False)

    return CountedResponse[MemberNameResponse].of(
        [MemberNameResponse(name=member.name) for member in result.value]
    )


# =============================================================================
# Commands
# =============================================================================


async def create_member_v1(
    request: Request,
    data: MemberEntityRequest,
    handler: CreateMemberHandler = Depends(get_create_member_handler),
) -> CreateMemberResponse | JSONResponse:
    """Register a member from a body in entity shape.

    POST /api/v1/members → 200 OK

    Args:
        request: FastAPI request object.
        data: Member name and optional address.
        handler: Create member handler (injected).

    Returns:
        CreateMemberResponse with the new member id.
        JSONResponse with RFC 9457 error (400 blank name, 409 duplicate).
    """
    result = await handler.handle(
        CreateMember(
            name=data.name,
            address=data.address.to_address() if data.address else None,
        )
    )
    if isinstance(result, Failure):
        return _error_response(result.error, request)

    return CreateMemberResponse(id=result.value)


async def create_member_v2(
    request: Request,
    data: CreateMemberRequest,
    handler: CreateMemberHandler = Depends(get_create_member_handler),
) -> CreateMemberResponse | JSONResponse:
    """Register a member from a dedicated request body.

    POST /api/v2/members → 200 OK
    """
    result = await handler.handle(CreateMember(name=data.name))
    if isinstance(result, Failure):
        return _error_response(result.error, request)

    return CreateMemberResponse(id=result.value)


async def update_member_v2(
    request: Request,
    member_id: Annotated[UUID, Path(description="Member UUID")],
    data: UpdateMemberRequest,
    handler: UpdateMemberNameHandler = Depends(get_update_member_handler),
) -> UpdateMemberResponse | JSONResponse:
    """Rename a member and return the stored id and name.

    PUT /api/v2/members/{id} → 200 OK

    Returns:
        UpdateMemberResponse read back after the change.
        JSONResponse with RFC 9457 error (400 blank name, 404 unknown id).
    """
    result = await handler.handle(UpdateMemberName(member_id=member_id, name=data.name))
    if isinstance(result, Failure):
        return _error_response(result.error, request)

    return UpdateMemberResponse.from_dto(result.value)
