"""
Update Member Role Use Case

Handles changing a member's role within a company.
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
from src.domain.entities import AuditEvent, Capability, CompanyRole

from .dtos import UpdatedMembership, UpdateRoleResponse

logger = logging.getLogger(__name__)


class UpdateRoleUseCase:
    """
    Use case for changing a member's role within a company.

    Business Rules:
    - Nobody may change their own role (SELF_MODIFICATION_DENIED), whatever their role
    - Only company_admin with manageRoles (or the super admin) may change roles
    - Role must be one of company_admin, manager, employee, client
    - Target must hold an active membership in the company
    - Membership row is locked while it is updated
    - Creates audit event for compliance tracking
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: CallerContext, target_user_id: UUID, new_role: str
    ) -> Result[UpdateRoleResponse]:
        """
        Execute update role use case.

        Args:
            actor: Resolved caller context
            target_user_id: User ID whose role is being changed
            new_role: New role to assign

        Returns:
            Result with updated membership info, or Error
        """
        if actor.user_id == target_user_id:
            return Return.err(
                Error("SELF_MODIFICATION_DENIED", "You cannot change your own role")
            )

        company_check = require_active_company(actor)
        if company_check.is_err():
            return company_check

        authorized = authorize_company_admin(actor, Capability.manage_roles)
        if authorized.is_err():
            return authorized

        try:
            membership_role = CompanyRole(new_role)
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_ROLE",
                    f"Invalid role: {new_role}. Must be one of: "
                    + ", ".join(r.value for r in CompanyRole),
                )
            )

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

            old_role = target_membership.role
            target_membership.role = membership_role
            await self.uow.memberships.update(target_membership)

            await self.uow.audit_events.create(
                AuditEvent(
                    company_id=actor.company_id,
                    user_id=actor.user_id,
                    action="role_changed",
                    event_metadata={
                        "target_user_id": str(target_user_id),
                        "old_role": old_role.value,
                        "new_role": membership_role.value,
                    },
                )
            )

            await self.uow.commit()

            logger.info(
                f"User {actor.user_id} changed role of {target_user_id} in company "
                f"{actor.company_id}: {old_role.value} -> {membership_role.value}"
            )

            return Return.ok(
                UpdateRoleResponse(
                    status="updated",
                    membership=UpdatedMembership(
                        user_id=str(target_user_id), role=membership_role
                    ),
                )
            )
