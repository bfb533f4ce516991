"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):

Structure:
- persistence/: SQLAlchemy models, repositories, unit of work
- cache/: Redis and in-memory cache adapters
- security/: bcrypt, JWT, refresh token generation
- authorization/: permission resolution with caching
- events/: in-memory event bus and security logging handler
- jobs/: expired refresh token sweeper
- logging/: structlog console adapter
- clock/: system clock

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
