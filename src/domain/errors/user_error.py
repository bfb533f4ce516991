"""User and role domain error messages.

Constants used by handlers when building ValidationError / NotFoundError
values. Not exceptions.
"""


class UserError:
    """User/role error messages."""

    INVALID_CREDENTIALS = "Invalid email or password"
    USER_NOT_FOUND = "User not found"
    ROLES_NOT_FOUND = "One or more roles were not found"
    ROLE_IDS_REQUIRED = "At least one role is required"
    INVALID_ACTOR = "Actor must be one of: self, administrator, system"
    EMAIL_ALREADY_EXISTS = "A user with this email already exists"
