"""API Route Registry.

Exports:
    ROUTE_REGISTRY: All /api route declarations
    register_routes_from_registry: RouteMetadata -> FastAPI routes
"""

from src.presentation.routers.api.routes.generator import register_routes_from_registry
from src.presentation.routers.api.routes.registry import ROUTE_REGISTRY

__all__ = ["ROUTE_REGISTRY", "register_routes_from_registry"]
