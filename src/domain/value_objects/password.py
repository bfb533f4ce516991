"""Password value object with strength validation.

Only used at registration. Login compares the submitted string against the
stored hash and never re-validates strength, so weak legacy passwords still
authenticate.
"""

import re
from dataclasses import dataclass

PASSWORD_MIN_LENGTH = 8


@dataclass(frozen=True)
class Password:
    """Plaintext password that meets the strength policy.

    Requirements:
        - At least 8 characters
        - At least one uppercase letter
        - At least one lowercase letter
        - At least one digit
        - At least one non-alphanumeric character

    Attributes:
        value: The plaintext password. Never logged; ``str()`` masks it.

    Raises:
        ValueError: If a requirement is not met.
    """

    value: str

    def __post_init__(self) -> None:
        if len(self.value) < PASSWORD_MIN_LENGTH:
            raise ValueError(
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
            )
        if not re.search(r"[A-Z]", self.value):
            raise ValueError("Password must contain an uppercase letter")
        if not re.search(r"[a-z]", self.value):
            raise ValueError("Password must contain a lowercase letter")
        if not re.search(r"\d", self.value):
            raise ValueError("Password must contain a digit")
        if not re.search(r"[^a-zA-Z0-9]", self.value):
            raise ValueError("Password must contain a non-alphanumeric character")

    def __str__(self) -> str:
        return "*" * len(self.value)

    def __repr__(self) -> str:
        return f"Password('{'*' * len(self.value)}')"
