"""
Get Roles And Permissions Use Case

Describes the role table together with the company's current members.
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access import (
    CallerContext,
    authorize_company_admin,
    require_active_company,
)
from src.domain.entities import Capability
from src.domain.role_permissions import describe_roles

from .dtos import MemberInfo, RolesAndPermissionsResponse


class GetRolesAndPermissionsUseCase:
    """
    Use case for the roles-and-permissions admin view.

    Business Rules:
    - Only company_admin (or super admin) may read it
    - Members are the active members of the active company
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: CallerContext) -> Result[RolesAndPermissionsResponse]:
        company_check = require_active_company(actor)
        if company_check.is_err():
            return company_check

        authorized = authorize_company_admin(actor, Capability.manage_roles)
        if authorized.is_err():
            return authorized

        async with self.uow:
            rows = await self.uow.memberships.list_active_members(actor.company_id)

            return Return.ok(
                RolesAndPermissionsResponse(
                    members=[
                        MemberInfo(
                            user_id=str(user.id),
                            name=user.name or "No Name",
                            email=user.email,
                            role=membership.role,
                            joined_at=membership.joined_at,
                        )
                        for membership, user in rows
                    ],
                    role_permissions=describe_roles(),
                )
            )
