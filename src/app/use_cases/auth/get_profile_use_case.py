"""
Get Profile Use Case

Loads the user together with all company memberships.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import MembershipInfo, UserProfileResponse


class GetProfileUseCase:
    """
    Use case for loading the caller's profile and memberships.

    Business Rules:
    - Memberships are returned in join order, inactive ones included
    - Company names are resolved for display
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserProfileResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            memberships = await self.uow.memberships.get_by_user_id(user_id)
            companies = await self.uow.companies.get_by_ids(
                list({m.company_id for m in memberships})
            )
            names = {c.id: c.name for c in companies}

            return Return.ok(
                UserProfileResponse(
                    id=str(user.id),
                    email=user.email,
                    name=user.name,
                    global_role=user.global_role,
                    companies=[
                        MembershipInfo(
                            company_id=str(m.company_id),
                            company_name=names.get(m.company_id),
                            role=m.role,
                            joined_at=m.joined_at,
                            is_active=m.is_active,
                        )
                        for m in memberships
                    ],
                )
            )
