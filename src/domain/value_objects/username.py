"""Username value object."""

import re
from dataclasses import dataclass

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
_USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_\-]+$")


@dataclass(frozen=True)
class Username:
    """Display handle made of letters, digits, underscores and hyphens.

    Attributes:
        value: The username (3 to 50 characters).

    Raises:
        ValueError: If the username is blank, too short, too long or
            contains other characters.
    """

    value: str

    def __post_init__(self) -> None:
        raw = self.value or ""
        if not raw.strip():
            raise ValueError("Username is required")
        if len(raw) < USERNAME_MIN_LENGTH:
            raise ValueError(
                f"Username must be at least {USERNAME_MIN_LENGTH} characters"
            )
        if len(raw) > USERNAME_MAX_LENGTH:
            raise ValueError(
                f"Username must be at most {USERNAME_MAX_LENGTH} characters"
            )
        if not _USERNAME_PATTERN.match(raw):
            raise ValueError(
                "Username may only contain letters, digits, underscores and hyphens"
            )

    def __str__(self) -> str:
        return self.value
