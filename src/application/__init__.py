"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations that change state (create/rename member)
- Queries: Read operations (order listings, member listings)

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- dtos/: Handler results and projection helpers
- errors/: ApplicationError wrapping domain errors for the API layer
"""
