"""Email value object with validation.

Immutable value object that validates and normalizes email addresses.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

EMAIL_MAX_LENGTH = 256


@dataclass(frozen=True)
class Email:
    """Email value object with format validation.

    Uses the email-validator library for syntax checks (no DNS lookups) and
    stores the normalized form so that lookups by email are case-insensitive.

    Attributes:
        value: The normalized email address.

    Raises:
        ValueError: If the address is blank, longer than 256 characters or
            syntactically invalid.

    Example:
        >>> Email("User@Example.com").value
        'User@example.com'
        >>> Email("not-an-email")
        Traceback (most recent call last):
        ...
        ValueError: Invalid email: ...
    """

    value: str

    def __post_init__(self) -> None:
        raw = (self.value or "").strip()
        if not raw:
            raise ValueError("Email is required")
        if len(raw) > EMAIL_MAX_LENGTH:
            raise ValueError(f"Email must be at most {EMAIL_MAX_LENGTH} characters")
        try:
            validated = validate_email(raw, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e
        # Frozen dataclass: store the normalized form
        object.__setattr__(self, "value", validated.normalized)

    def __str__(self) -> str:
        return self.value
