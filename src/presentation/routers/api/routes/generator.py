"""Route generator for the API Route Registry.

register_routes_from_registry() turns RouteMetadata entries into FastAPI
routes at application startup.

Usage:
    from src.presentation.routers.api.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.routes.generator import register_routes_from_registry

    api_router = APIRouter(prefix="/api")
    register_routes_from_registry(api_router, ROUTE_REGISTRY)
"""

from typing import Any

from fastapi import APIRouter

from src.presentation.routers.api.errors.problem_details import ProblemDetails
from src.presentation.routers.api.routes.metadata import ErrorSpec, RouteMetadata


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Args:
        router: FastAPI APIRouter to register routes on
        registry: RouteMetadata entries to convert into routes
    """
    for metadata in registry:
        responses = _build_responses(metadata.errors) if metadata.errors else None

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=_build_description(metadata),
            operation_id=metadata.operation_id,
            responses=responses,
            deprecated=metadata.deprecated,
        )


def _build_description(metadata: RouteMetadata) -> str | None:
    """Append the loading strategy to the OpenAPI description."""
    if metadata.fetch_strategy is None:
        return metadata.description
    strategy_line = f"Loading strategy: `{metadata.fetch_strategy.value}`."
    if metadata.description:
        return f"{metadata.description}\n\n{strategy_line}"
    return strategy_line


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build OpenAPI responses dict from error specifications.

    Example:
        >>> _build_responses([ErrorSpec(status=404, description="Member not found")])
        {404: {"description": "Member not found", "model": ProblemDetails}}
    """
    return {
        error.status: {
            "description": error.description,
            "model": error.model or ProblemDetails,
        }
        for error in errors
    }
