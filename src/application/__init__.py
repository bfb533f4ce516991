"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations that change state (login, refresh, logout,
  registration, role assignment)
- Queries: Read operations that fetch data (user roles, role list)
- Event Handlers: React to domain events after commit

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- dtos/: Result dataclasses returned by handlers
- event_handlers/: Post-commit reactions (token cleanup, cache invalidation)

The application layer orchestrates domain logic but contains no business rules.
"""
