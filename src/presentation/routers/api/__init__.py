"""Shop API router.

Builds api_router (prefix /api) from ROUTE_REGISTRY.
"""

from fastapi import APIRouter

from src.presentation.routers.api.routes import (
    ROUTE_REGISTRY,
    register_routes_from_registry,
)

api_router = APIRouter(prefix="/api")
register_routes_from_registry(api_router, ROUTE_REGISTRY)

__all__ = ["api_router"]
