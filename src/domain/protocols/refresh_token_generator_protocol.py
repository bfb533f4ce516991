"""Refresh token generator protocol for domain layer.

Refresh tokens are opaque random strings. Only a deterministic hash of the
raw value is stored, so lookups are an indexed equality match on the hash.

Implementations:
    - RefreshTokenGenerator: src/infrastructure/security/refresh_token_generator.py
"""

from datetime import datetime
from typing import Protocol


class RefreshTokenGeneratorProtocol(Protocol):
    """Generation, hashing and expiry calculation for refresh tokens."""

    def generate(self) -> tuple[str, str]:
        """Generate a new refresh token.

        Returns:
            Tuple of (raw_token, token_hash). The raw token goes to the
            client and is never persisted; the hash is stored.
        """
        ...

    def compute_hash(self, raw_token: str) -> str:
        """Hash a raw token presented by a client.

        Deterministic: the same input always yields the same hash.
        """
        ...

    def expires_at(self, now: datetime) -> datetime:
        """Absolute expiry for a token issued at ``now``."""
        ...
