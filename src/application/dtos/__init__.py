"""Application DTOs."""

from src.application.dtos.auth_dtos import AuthTokens, RegisteredUser, RoleDTO

__all__ = ["AuthTokens", "RegisteredUser", "RoleDTO"]
