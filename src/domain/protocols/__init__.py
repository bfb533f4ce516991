"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import PasswordHashingProtocol, UnitOfWorkFactory
"""

# Service protocols
from src.domain.protocols.authorization_protocol import AuthorizationProtocol
from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.clock_protocol import ClockProtocol
from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.rate_limit_protocol import RateLimitProtocol
from src.domain.protocols.refresh_token_generator_protocol import (
    RefreshTokenGeneratorProtocol,
)
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# Repository protocols
from src.domain.protocols.refresh_token_repository import RefreshTokenRepository
from src.domain.protocols.role_repository import RoleRepository
from src.domain.protocols.unit_of_work_protocol import (
    UnitOfWorkFactory,
    UnitOfWorkProtocol,
)
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "AuthorizationProtocol",
    "CacheProtocol",
    "ClockProtocol",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "RateLimitProtocol",
    "RefreshTokenGeneratorProtocol",
    "TokenGenerationProtocol",
    # Repository protocols
    "RefreshTokenRepository",
    "RoleRepository",
    "UnitOfWorkFactory",
    "UnitOfWorkProtocol",
    "UserRepository",
]
