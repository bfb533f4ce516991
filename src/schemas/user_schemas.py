"""User and role request/response schemas.

Endpoints:
    POST /api/v1/users                - Register a user
    GET  /api/v1/users/{id}/roles     - Roles of a user
    PUT  /api/v1/users/{id}/roles     - Replace roles of a user
    GET  /api/v1/roles                - All roles
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreateRequest(BaseModel):
    """Request schema for user creation (registration).

    POST /api/v1/users
    Returns: 201 Created
    """

    email: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["user@example.com"],
    )
    username: str = Field(
        ...,
        min_length=3,
        max_length=50,
        description="Username (3-50 chars: letters, digits, '_' or '-')",
        examples=["jane_doe"],
    )
    password: str = Field(
        ...,
        min_length=8,
        max_length=128,
        description="Password (8-128 chars, mixed case, number, special char)",
        examples=["SecurePass123!"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "username": "jane_doe",
                "password": "SecurePass123!",
            }
        }
    )


class UserCreateResponse(BaseModel):
    """Response schema for user creation (201 Created)."""

    id: UUID = Field(..., description="Created user's ID")
    email: str = Field(..., description="Normalized email address")
    username: str = Field(..., description="Username")


class RoleResponse(BaseModel):
    """One role with its permission codes."""

    id: int = Field(..., description="Stable role ID", examples=[1])
    name: str = Field(..., description="Role name", examples=["Member"])
    permissions: list[str] = Field(
        ...,
        description="Permission codes granted by the role",
        examples=[["users:read"]],
    )


class UserRolesResponse(BaseModel):
    """Roles assigned to a user."""

    user_id: UUID
    roles: list[RoleResponse]


class RoleListResponse(BaseModel):
    """All roles defined in the system."""

    roles: list[RoleResponse]
    total_count: int


class SetUserRolesRequest(BaseModel):
    """Request schema for replacing a user's roles.

    PUT /api/v1/users/{user_id}/roles
    Returns: 204 No Content
    """

    role_ids: list[int] = Field(
        ...,
        description="Full set of role IDs (order and duplicates ignored)",
        examples=[[1, 2]],
    )
    actor: str = Field(
        ...,
        description="Who requests the change: self, administrator or system",
        examples=["administrator"],
    )
