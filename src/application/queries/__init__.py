"""Queries (CQRS read operations) and their handlers."""

from src.application.queries.user_queries import GetUserRoles, ListRoles

__all__ = ["GetUserRoles", "ListRoles"]
