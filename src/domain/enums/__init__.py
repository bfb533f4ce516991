"""Domain enums.

Available Enums:
    - RefreshTokenStatus: refresh token lifecycle states
    - RevocationReason: why an Active token was revoked
    - RoleChangeActor: origin of a role change (self, administrator, system)
    - SystemRole: seeded roles with stable IDs
    - Permission: permission codes checked by routes
"""

from src.domain.enums.permission import Permission
from src.domain.enums.refresh_token_status import RefreshTokenStatus
from src.domain.enums.revocation_reason import RevocationReason
from src.domain.enums.role_change_actor import RoleChangeActor
from src.domain.enums.user_role import SystemRole

__all__ = [
    "Permission",
    "RefreshTokenStatus",
    "RevocationReason",
    "RoleChangeActor",
    "SystemRole",
]
