"""Local-then-remote account provisioning.

There is no transaction spanning the local store and the identity service.
The local row is written first because deleting it is cheap; the remote
registration follows, and a refused or failed registration is compensated
by deleting the local row. A remote registration without a local row is
never produced.
"""

import asyncio

import logfire

from desk.domain.error import (
    IdentityServiceError,
    NotFoundError,
    PersistenceError,
    RemoteRegistrationError,
)
from desk.domain.model import UserAccount
from desk.domain.service import IdentityService, UserService


class AccountProvisioning:
    """Two-step provisioning workflow with one compensating action."""

    def __init__(
        self, user_service: UserService, identity_service: IdentityService
    ) -> None:
        """Initialize provisioning workflow.

        Args:
            user_service: User domain service (local store)
            identity_service: Identity domain service (remote registration)
        """
        self.user_service = user_service
        self.identity_service = identity_service

    async def run(self, user: UserAccount) -> UserAccount:
        """Provision an account locally and remotely.

        Args:
            user: Account to create; ``uuid`` must already be generated

        Returns:
            The stored account, with its row id

        Raises:
            PersistenceError: If the local write fails (nothing to undo)
            RemoteRegistrationError: If remote registration fails for any
                reason; the local row has been deleted (best-effort) before
                this is raised

        A cancelled or timed-out run also deletes the local row; the
        cancellation itself is re-raised unchanged.
        """
        with logfire.span(
            "account_provisioning.run",
            user_uuid=str(user.uuid),
            is_admin=user.is_admin,
        ):
            stored = await self.persist_local(user)

            try:
                await self.register_remote(stored)
            except BaseException as e:
                # Cancellation must not interrupt the delete
                await asyncio.shield(self.compensate(stored))
                if not isinstance(e, Exception):
                    raise
                if not isinstance(e, IdentityServiceError):
                    logfire.error(
                        "Unexpected failure during remote registration",
                        user_uuid=str(stored.uuid),
                        error=repr(e),
                    )
                raise RemoteRegistrationError(str(e), stored.uuid, stored.id) from e

            logfire.info(
                "Account provisioned", user_uuid=str(stored.uuid), user_id=stored.id
            )
            return stored

    async def persist_local(self, user: UserAccount) -> UserAccount:
        """Write the local row and re-read it to obtain its row id.

        Raises:
            PersistenceError: If the store rejects the row or loses it
        """
        await self.user_service.create(user)
        try:
            return await self.user_service.get_by_uuid(user.uuid)
        except NotFoundError as e:
            raise PersistenceError(f"user {user.uuid} missing after create") from e

    async def register_remote(self, user: UserAccount) -> None:
        """Register the account's UUID with the identity service.

        The remote face URL is left empty; avatars are served locally.

        Raises:
            IdentityServiceError: If the call fails or is refused
        """
        await self.identity_service.register(user.uuid, user.nickname, face_url="")

    async def compensate(self, user: UserAccount) -> None:
        """Delete the local row after a failed remote registration.

        Best-effort: the caller is told registration failed either way, so a
        failed delete is logged for reconciliation and not raised.
        """
        try:
            await self.user_service.delete(user)
        except Exception as e:
            logfire.error(
                "Compensating delete failed, local account orphaned",
                user_uuid=str(user.uuid),
                user_id=user.id,
                email=user.email,
                error=str(e),
            )
            return

        logfire.warn(
            "Local account removed after failed remote registration",
            user_uuid=str(user.uuid),
            user_id=user.id,
        )
