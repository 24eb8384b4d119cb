"""
Use Case: Deactivate / Reactivate User

Super-admin console operations. A deactivated user keeps their memberships
but is refused at identity resolution (USER_DISABLED).
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import AuthenticatedUser
from src.domain.entities import AuditEvent

from .dtos import SetUserActiveResponse

logger = logging.getLogger(__name__)


class _SetUserActiveUseCase:
    is_active: bool
    action: str

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, admin: AuthenticatedUser, target_user_id: UUID
    ) -> Result[SetUserActiveResponse]:
        """
        Args:
            admin: Super admin performing the operation
            target_user_id: User to (de)activate

        Returns:
            Result[SetUserActiveResponse], or Error
        """
        if not self.is_active and admin.id == target_user_id:
            return Return.err(
                Error("SELF_DEACTIVATION_DENIED", "You cannot deactivate your own account")
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(target_user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if user.is_active != self.is_active:
                user.is_active = self.is_active
                await self.uow.users.update(user)

                await self.uow.audit_events.create(
                    AuditEvent(
                        company_id=None,
                        user_id=admin.id,
                        action=self.action,
                        event_metadata={
                            "target_user_id": str(target_user_id),
                            "email": user.email,
                        },
                    )
                )

                await self.uow.commit()

                logger.info(f"Super admin {admin.id}: {self.action} {target_user_id}")

            return Return.ok(
                SetUserActiveResponse(user_id=str(target_user_id), is_active=self.is_active)
            )


class DeactivateUserUseCase(_SetUserActiveUseCase):
    """Idempotent: deactivating an inactive user succeeds without a new audit event"""

    is_active = False
    action = "user_deactivated"


class ReactivateUserUseCase(_SetUserActiveUseCase):
    is_active = True
    action = "user_reactivated"
