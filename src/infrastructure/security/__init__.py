"""Security infrastructure adapters.

- Password hashing (bcrypt)
- JWT access token generation/validation
- Opaque refresh token generation with SHA-256 lookup hashes
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.refresh_token_generator import RefreshTokenGenerator

__all__ = [
    "BcryptPasswordService",
    "JWTService",
    "RefreshTokenGenerator",
]
