"""Role reference data."""

from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class Role:
    """Named bundle of permission codes.

    Roles are seeded reference data; the service reads them but never
    creates them.

    Attributes:
        id: Stable integer ID (see SystemRole for the seeded ones).
        name: Display name.
        permissions: Permission codes granted by the role.
    """

    id: int
    name: str
    permissions: frozenset[str] = field(default_factory=frozenset)
