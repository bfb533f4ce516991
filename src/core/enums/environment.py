"""Runtime environments for the Tokenwarden service.

Settings use the environment to pick the log renderer, to refuse insecure
defaults in production and to decide whether the debug config endpoint
is exposed.
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
