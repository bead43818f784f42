"""Application routers.

- system_router: non-versioned endpoints (/, /health)
- api_router: shop endpoints under /api, generated from ROUTE_REGISTRY
"""

from src.presentation.routers.api import api_router
from src.presentation.routers.system import system_router

__all__ = ["api_router", "system_router"]
