"""Test suite for the Shop API.

Test structure follows the test pyramid:
- unit/: Unit tests - handlers, errors, schemas and enums in isolation
- integration/: Integration tests - repositories and loading strategies
  against a temporary SQLite database
- api/: API endpoint tests - HTTP layer through FastAPI TestClient
"""
