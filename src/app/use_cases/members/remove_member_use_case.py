"""
Remove Member from Company Use Case

Handles removing (soft delete) members from a company.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access import (
    CallerContext,
    authorize_company_admin,
    require_active_company,
)
from src.domain.entities import AuditEvent, Capability

from .dtos import RemoveMemberResponse

logger = logging.getLogger(__name__)


class RemoveMemberUseCase:
    """
    Use case for removing members from a company.

    Business Rules:
    - Nobody may remove themselves (SELF_REMOVAL_DENIED), whatever their role
    - Only company_admin (or the super admin) may remove members
    - Soft delete: membership is_active=False, row kept for history
    - Creates audit event
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: CallerContext, target_user_id: UUID
    ) -> Result[RemoveMemberResponse]:
        """
        Execute remove member use case.

        Args:
            actor: Resolved caller context
            target_user_id: User ID of the member to remove

        Returns:
            Result with RemoveMemberResponse DTO, or Error
        """
        if actor.user_id == target_user_id:
            return Return.err(
                Error(
                    "SELF_REMOVAL_DENIED",
                    "You cannot remove yourself from the company",
                )
            )

        company_check = require_active_company(actor)
        if company_check.is_err():
            return company_check

        authorized = authorize_company_admin(actor, Capability.manage_roles)
        if authorized.is_err():
            return authorized

        async with self.uow:
            target_membership = await self.uow.memberships.get_active(
                target_user_id, actor.company_id, for_update=True
            )
            if target_membership is None:
                return Return.err(
                    Error(
                        "MEMBERSHIP_NOT_FOUND",
                        "User is not a member of this company",
                    )
                )

            target_membership.is_active = False
            await self.uow.memberships.update(target_membership)

            await self.uow.audit_events.create(
                AuditEvent(
                    company_id=actor.company_id,
                    user_id=actor.user_id,
                    action="member_removed",
                    event_metadata={
                        "removed_user_id": str(target_user_id),
                        "removed_user_role": target_membership.role.value,
                    },
                )
            )

            await self.uow.commit()

            logger.info(
                f"User {actor.user_id} removed {target_user_id} from company {actor.company_id}"
            )

            return Return.ok(RemoveMemberResponse(status="removed"))
