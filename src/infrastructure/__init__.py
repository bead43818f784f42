"""Infrastructure layer - Adapters for domain protocols.

Structure:
- persistence/: SQLAlchemy models, repositories, projections, seeding
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure at runtime.
"""
