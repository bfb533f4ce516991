"""Refresh token domain errors.

Two kinds live here:

- ``RefreshTokenError``: message constants for the expected rejection
  outcomes. Handlers wrap them in ``AuthenticationError`` values and
  return them inside ``Failure``.
- ``InvalidTokenTransitionError``: raised by the aggregate when code asks
  for a transition the state machine forbids (rotating a rotated token,
  reactivating anything). This is a programming error, never a user
  outcome, so it is an exception.
"""

from src.domain.enums.refresh_token_status import RefreshTokenStatus


class RefreshTokenError:
    """Refresh rejection messages (internal, observability only).

    The HTTP layer replaces all of them with one generic message.
    """

    INVALID = "Refresh token not recognized"
    EXPIRED = "Refresh token has expired"
    REUSED = "Refresh token was already used; all sessions of the user were revoked"
    DEVICE_MISMATCH = "Refresh token presented from a different device"


class InvalidTokenTransitionError(Exception):
    """Illegal refresh token state transition.

    Attributes:
        current: Status the token had.
        attempted: Transition that was requested.
    """

    def __init__(self, current: RefreshTokenStatus, attempted: str) -> None:
        self.current = current
        self.attempted = attempted
        super().__init__(f"cannot {attempted} a refresh token in status {current.value}")
