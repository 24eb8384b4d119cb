"""
Resolve Identity Use Case

Maps a verified external identity to the internal User record.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError

from libs.result import Error, Result, Return
from src.app.services.identity_provider import VerifiedIdentity
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, GlobalRole, User
from src.domain.super_admin import global_role_for, normalize_email

from .dtos import AuthenticatedUser

logger = logging.getLogger(__name__)
security_logger = logging.getLogger("security")


class ResolveIdentityUseCase:
    """
    Use case for resolving (and on first sight creating) the caller's User.

    Business Rules:
    - Subject id and email must be non-empty
    - Unknown subject: create user, global role derived from the super-admin email
    - Known subject: super-admin status is re-derived on every call
      (promote on match, demote with a security audit entry on mismatch)
    - Display name and email drift from the provider is applied, unless the new
      email already belongs to another user (EMAIL_ALREADY_LINKED)
    - A first sign-in that loses an insert race continues with the winner's row
    - Deactivated users are rejected
    """

    def __init__(self, uow: UnitOfWork, super_admin_email: Optional[str]):
        self.uow = uow
        self.super_admin_email = super_admin_email

    async def execute(self, identity: VerifiedIdentity) -> Result[AuthenticatedUser]:
        """
        Execute resolve identity use case.

        Args:
            identity: Identity asserted by the external provider

        Returns:
            Result with the AuthenticatedUser, or Error
        """
        email = normalize_email(identity.email)
        subject_id = (identity.subject_id or "").strip()
        if not subject_id or not email:
            return Return.err(
                Error("UNAUTHENTICATED", "Please sign in again to continue")
            )

        expected_role = global_role_for(email, self.super_admin_email)

        async with self.uow:
            user = await self.uow.users.get_by_subject_id(subject_id)
            created = False

            if user is None:
                linked = await self.uow.users.get_by_email(email)
                if linked is not None:
                    return Return.err(_email_already_linked())

                try:
                    user = await self._create_user(subject_id, email, identity, expected_role)
                    created = True
                except IntegrityError:
                    # A concurrent first sign-in inserted the same subject or email
                    await self.uow.rollback()
                    user = await self.uow.users.get_by_subject_id(subject_id)
                    if user is None:
                        return Return.err(_email_already_linked())
                    logger.info(f"User {user.id} was created by a concurrent sign-in")

            if not created:
                error = await self._sync_existing_user(user, email, identity, expected_role)
                if error is not None:
                    return Return.err(error)

            await self.uow.commit()

            return Return.ok(AuthenticatedUser.from_user(user))

    async def _create_user(
        self,
        subject_id: str,
        email: str,
        identity: VerifiedIdentity,
        expected_role: GlobalRole,
    ) -> User:
        user = User(
            subject_id=subject_id,
            email=email,
            name=identity.display_name or email.split("@")[0],
            global_role=expected_role,
            last_login_at=utcnow(),
        )
        user = await self.uow.users.create(user)
        logger.info(f"Created user {user.id} with role {user.global_role.value}")

        await self.uow.audit_events.create(
            AuditEvent(
                user_id=user.id,
                action="user_created",
                event_metadata={
                    "email": email,
                    "global_role": user.global_role.value,
                },
            )
        )
        return user

    async def _sync_existing_user(
        self,
        user: User,
        email: str,
        identity: VerifiedIdentity,
        expected_role: GlobalRole,
    ) -> Optional[Error]:
        if not user.is_active:
            return Error("USER_DISABLED", "Your account has been deactivated")

        if email != user.email:
            linked = await self.uow.users.get_by_email(email)
            if linked is not None and linked.id != user.id:
                return _email_already_linked()

        await self._reconcile_global_role(user, email, expected_role)

        if identity.display_name and identity.display_name != user.name:
            user.name = identity.display_name
        if email != user.email:
            user.email = email

        user.last_login_at = utcnow()
        await self.uow.users.update(user)
        return None

    async def _reconcile_global_role(
        self, user: User, email: str, expected_role: GlobalRole
    ) -> None:
        if user.global_role == expected_role:
            return

        previous_role = user.global_role
        user.global_role = expected_role

        if expected_role == GlobalRole.super_admin:
            action = "super_admin_promoted"
            logger.info(f"Promoted user {user.id} to super_admin")
        else:
            action = "super_admin_demoted"
            security_logger.warning(
                f"SECURITY: removing super_admin role from {email} - not the authorized email"
            )

        await self.uow.audit_events.create(
            AuditEvent(
                user_id=user.id,
                action=action,
                event_metadata={
                    "email": email,
                    "old_role": previous_role.value,
                    "new_role": expected_role.value,
                },
            )
        )


def _email_already_linked() -> Error:
    return Error("EMAIL_ALREADY_LINKED", "This email is already linked to another account")
