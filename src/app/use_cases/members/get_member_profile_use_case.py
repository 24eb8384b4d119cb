"""
Get Member Profile Use Case

Loads one member of the caller's company.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access import CallerContext, require_active_company
from src.domain.role_permissions import ROLE_PERMISSIONS

from .dtos import MemberInfo, MemberProfileResponse


class GetMemberProfileUseCase:
    """
    Use case for reading a member profile within the active company.

    Business Rules:
    - Caller needs manageEmployees (checked by the access guard)
    - Target must hold an active membership in the same company
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: CallerContext, target_user_id: UUID
    ) -> Result[MemberProfileResponse]:
        company_check = require_active_company(actor)
        if company_check.is_err():
            return company_check

        async with self.uow:
            membership = await self.uow.memberships.get_active(
                target_user_id, actor.company_id
            )
            user = await self.uow.users.get_by_id(target_user_id)
            if membership is None or user is None or not user.is_active:
                return Return.err(
                    Error(
                        "MEMBERSHIP_NOT_FOUND",
                        "User is not a member of this company",
                    )
                )

            permissions = ROLE_PERMISSIONS[membership.role].permissions
            return Return.ok(
                MemberProfileResponse(
                    member=MemberInfo(
                        user_id=str(user.id),
                        name=user.name or "No Name",
                        email=user.email,
                        role=membership.role,
                        joined_at=membership.joined_at,
                    ),
                    permissions={c.value: allowed for c, allowed in permissions.items()},
                )
            )
