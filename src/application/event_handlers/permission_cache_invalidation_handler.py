"""Permission cache invalidation on role changes.

Subscribes to UserRolesChanged and drops the user's cached permission set so
the next request resolves permissions from the role store. Dispatched after
the role change committed, once per event.

Only the local cache is invalidated. Instances sharing Redis see the change
immediately; instances with an in-memory cache keep the stale set until its
TTL runs out. Fanning the event out through an outbox or message broker would
hook in here.
"""

from src.domain.events import UserRolesChanged
from src.domain.protocols import AuthorizationProtocol, LoggerProtocol


class PermissionCacheInvalidationHandler:
    """Invalidates cached permissions when a user's roles change.

    App-scoped singleton, subscribed at container startup.
    """

    def __init__(
        self,
        authorization: AuthorizationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._authorization = authorization
        self._logger = logger

    async def handle_user_roles_changed(self, event: UserRolesChanged) -> None:
        """Drop the cached permission set of the affected user.

        Args:
            event: UserRolesChanged with user_id and old/new role IDs.
        """
        self._logger.debug(
            "user_roles_changed_invalidating_permissions",
            user_id=str(event.user_id),
            old_role_ids=sorted(event.old_role_ids),
            new_role_ids=sorted(event.new_role_ids),
            actor=event.actor.value,
        )
        # Never raises; failures are logged by the service
        await self._authorization.invalidate_permissions_cache(event.user_id)
