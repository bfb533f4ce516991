"""Security logging handler for refresh token events.

Writes one structured log line per refresh token lifecycle event so that
theft signals are visible to whoever watches the logs.

Log Levels:
    - INFO: rotation, creation, explicit revocation
    - WARNING: expired token use, device mismatch, token reuse
    - CRITICAL: refresh token chain compromised (all sessions revoked)

Structured Fields:
    - event_id, occurred_at
    - refresh_token_id, user_id (never the raw token or its hash)
"""

from src.domain.events.refresh_token_events import (
    RefreshTokenChainCompromised,
    RefreshTokenCreated,
    RefreshTokenDeviceMismatchDetected,
    RefreshTokenExpiredUsage,
    RefreshTokenReuseDetected,
    RefreshTokenRevoked,
    RefreshTokenRotated,
)
from src.domain.protocols.logger_protocol import LoggerProtocol


class SecurityLoggingHandler:
    """Event handler for structured logging of refresh token events.

    Example:
        >>> handler = SecurityLoggingHandler(logger=get_logger())
        >>> event_bus.subscribe(RefreshTokenReuseDetected, handler.handle_reuse_detected)
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def handle_refresh_token_created(self, event: RefreshTokenCreated) -> None:
        self._logger.info(
            "refresh_token_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            refresh_token_id=str(event.refresh_token_id),
            user_id=str(event.user_id),
        )

    async def handle_refresh_token_rotated(self, event: RefreshTokenRotated) -> None:
        self._logger.info(
            "refresh_token_rotated",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            old_refresh_token_id=str(event.old_refresh_token_id),
            new_refresh_token_id=str(event.new_refresh_token_id),
            user_id=str(event.user_id),
            device_id=event.device_id,
        )

    async def handle_refresh_token_revoked(self, event: RefreshTokenRevoked) -> None:
        self._logger.info(
            "refresh_token_revoked",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            refresh_token_id=str(event.refresh_token_id),
            user_id=str(event.user_id),
            reason=event.reason,
        )

    async def handle_expired_usage(self, event: RefreshTokenExpiredUsage) -> None:
        self._logger.warning(
            "refresh_token_expired_usage",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            refresh_token_id=str(event.refresh_token_id),
            user_id=str(event.user_id),
            expires_at=event.expires_at.isoformat(),
            attempted_at=event.attempted_at.isoformat(),
        )

    async def handle_device_mismatch(
        self, event: RefreshTokenDeviceMismatchDetected
    ) -> None:
        self._logger.warning(
            "refresh_token_device_mismatch",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            refresh_token_id=str(event.refresh_token_id),
            user_id=str(event.user_id),
            expected_device_id=event.expected_device_id,
            actual_device_id=event.actual_device_id,
        )

    async def handle_reuse_detected(self, event: RefreshTokenReuseDetected) -> None:
        self._logger.warning(
            "refresh_token_reuse_detected",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            refresh_token_id=str(event.refresh_token_id),
            user_id=str(event.user_id),
            device_id=event.device_id,
            previous_status=event.previous_status.value,
        )

    async def handle_chain_compromised(
        self, event: RefreshTokenChainCompromised
    ) -> None:
        self._logger.critical(
            "refresh_token_chain_compromised",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
        )
