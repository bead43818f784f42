"""Presentation layer - API endpoints and HTTP concerns.

FastAPI routers and endpoint functions. The presentation layer is thin:
it builds queries/commands, dispatches them to application handlers and
translates results to HTTP responses.

Structure:
- routers/system.py: Root and health endpoints
- routers/api/: Versioned shop endpoints (/api/v1 ... /api/v6)

Depends on the application layer but contains NO business logic.
"""
