"""Domain value objects with validation.

Immutable value objects that raise ValueError on construction when a
business constraint is violated.
"""

from src.domain.value_objects.email import Email
from src.domain.value_objects.password import Password
from src.domain.value_objects.rate_limit_rule import RateLimitResult, RateLimitRule
from src.domain.value_objects.username import Username

__all__ = [
    "Email",
    "Password",
    "RateLimitResult",
    "RateLimitRule",
    "Username",
]
