"""
List Members Use Case

Lists the active members of a company.
"""

from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import ListMembersResponse, MemberInfo


class ListMembersUseCase:
    """
    Use case for listing company members.

    Business Rules:
    - Only active memberships of active users are returned
    - Ordered by join time
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: UUID) -> Result[ListMembersResponse]:
        async with self.uow:
            rows = await self.uow.memberships.list_active_members(company_id)

            return Return.ok(
                ListMembersResponse(
                    members=[
                        MemberInfo(
                            user_id=str(user.id),
                            name=user.name or "No Name",
                            email=user.email,
                            role=membership.role,
                            joined_at=membership.joined_at,
                        )
                        for membership, user in rows
                    ]
                )
            )
