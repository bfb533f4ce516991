"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_login_user_handler, ...

The container is organized into modules by concern:
- infrastructure: Core services (logging, clock, db, cache, security, uow,
  rate limiting)
- events: Event bus and subscriptions
- authorization: Permission resolution
- auth_handlers: Authentication handler factories
- user_handlers: Registration and role handler factories
- jobs: Background jobs
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_cache,
    get_cache_keys,
    get_clock,
    get_database,
    get_logger,
    get_password_service,
    get_rate_limiter,
    get_refresh_token_generator,
    get_token_service,
    get_uow_factory,
)

# Event bus
from src.core.container.events import get_event_bus

# Authorization
from src.core.container.authorization import get_permission_service

# Auth handlers
from src.core.container.auth_handlers import (
    get_login_user_handler,
    get_refresh_token_handler,
    get_revoke_refresh_token_handler,
)

# User and role handlers
from src.core.container.user_handlers import (
    get_list_roles_handler,
    get_register_user_handler,
    get_set_user_roles_handler,
    get_user_roles_handler,
)

# Background jobs
from src.core.container.jobs import get_expired_token_sweeper

__all__ = [
    # Infrastructure
    "get_cache",
    "get_cache_keys",
    "get_clock",
    "get_database",
    "get_logger",
    "get_password_service",
    "get_rate_limiter",
    "get_refresh_token_generator",
    "get_token_service",
    "get_uow_factory",
    # Events
    "get_event_bus",
    # Authorization
    "get_permission_service",
    # Auth handlers
    "get_login_user_handler",
    "get_refresh_token_handler",
    "get_revoke_refresh_token_handler",
    # User handlers
    "get_list_roles_handler",
    "get_register_user_handler",
    "get_set_user_roles_handler",
    "get_user_roles_handler",
    # Jobs
    "get_expired_token_sweeper",
]
