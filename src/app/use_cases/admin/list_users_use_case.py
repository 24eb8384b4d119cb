"""
Use Case: List Users

Super-admin directory of every user with their active memberships.
"""

from collections import defaultdict

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import ListUsersResponse, PlatformUserInfo, UserCompanyInfo


class ListUsersUseCase:
    """
    Use case for listing platform users.

    Business Rules:
    - Deactivated users are hidden unless include_inactive is set
    - Newest users first, memberships oldest first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, include_inactive: bool = False) -> Result[ListUsersResponse]:
        async with self.uow:
            users = await self.uow.users.list_all(include_inactive=include_inactive)
            memberships = await self.uow.memberships.get_active_by_user_ids(
                [user.id for user in users]
            )
            companies = await self.uow.companies.get_by_ids(
                list({membership.company_id for membership in memberships})
            )
            company_names = {company.id: company.name for company in companies}

            by_user = defaultdict(list)
            for membership in memberships:
                by_user[membership.user_id].append(
                    UserCompanyInfo(
                        company_id=str(membership.company_id),
                        company_name=company_names.get(membership.company_id),
                        role=membership.role,
                        joined_at=membership.joined_at,
                    )
                )

            return Return.ok(
                ListUsersResponse(
                    users=[
                        PlatformUserInfo(
                            id=str(user.id),
                            email=user.email,
                            name=user.name,
                            global_role=user.global_role,
                            is_active=user.is_active,
                            companies=by_user[user.id],
                            created_at=user.created_at,
                        )
                        for user in users
                    ]
                )
            )
