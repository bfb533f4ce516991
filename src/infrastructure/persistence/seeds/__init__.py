"""Reference data seeders, run by Alembic after each upgrade.

Usage:
    from src.infrastructure.persistence.seeds import seed_roles
"""

from src.infrastructure.persistence.seeds.role_seeder import ROLE_PERMISSIONS, seed_roles

__all__ = ["ROLE_PERMISSIONS", "seed_roles"]
