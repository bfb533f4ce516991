"""Reasons recorded when an Active refresh token is revoked."""

from enum import Enum


class RevocationReason(str, Enum):
    """Why an Active refresh token was revoked."""

    DEVICE_MISMATCH = "device_mismatch"
    CHAIN_COMPROMISED = "chain_compromised"
    LOGOUT = "logout"
