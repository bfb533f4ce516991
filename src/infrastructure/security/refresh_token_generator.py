"""Opaque refresh token generator (adapter).

Implements RefreshTokenGeneratorProtocol.

Format:
    - Raw token: 64 random bytes from ``secrets``, urlsafe base64
    - Stored hash: SHA-256 of the raw token, standard base64

A fast deterministic hash (not bcrypt) is correct here: the raw token has
512 bits of entropy, and the hash is the indexed lookup key.
"""

import base64
import hashlib
import secrets
from datetime import datetime, timedelta

TOKEN_BYTES = 64


class RefreshTokenGenerator:
    """Generates refresh tokens and computes their lookup hashes.

    Usage:
        generator = RefreshTokenGenerator(ttl=timedelta(days=7))
        raw, token_hash = generator.generate()
        assert generator.compute_hash(raw) == token_hash
    """

    def __init__(self, ttl: timedelta) -> None:
        if ttl <= timedelta(0):
            msg = "Refresh token lifetime must be positive"
            raise ValueError(msg)
        self._ttl = ttl

    def generate(self) -> tuple[str, str]:
        raw = base64.urlsafe_b64encode(secrets.token_bytes(TOKEN_BYTES)).decode("ascii")
        return raw, self.compute_hash(raw)

    def compute_hash(self, raw_token: str) -> str:
        digest = hashlib.sha256(raw_token.encode("utf-8")).digest()
        return base64.b64encode(digest).decode("ascii")

    def expires_at(self, now: datetime) -> datetime:
        return now + self._ttl
