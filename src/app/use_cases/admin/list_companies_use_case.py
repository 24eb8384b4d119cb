"""
Use Case: List Companies

Super-admin directory of companies with their creator and member count.
"""

from typing import Optional

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Company, User

from .dtos import CompanyAdminInfo, ListCompaniesResponse, PlatformCompanyInfo


def build_company_info(
    company: Company, admin: Optional[User], member_count: int
) -> PlatformCompanyInfo:
    return PlatformCompanyInfo(
        id=str(company.id),
        name=company.name,
        domain=company.domain,
        is_active=company.is_active,
        admin=CompanyAdminInfo(
            id=str(company.admin_id),
            name=admin.name if admin else None,
            email=admin.email if admin else None,
        ),
        member_count=member_count,
        created_at=company.created_at,
    )


class ListCompaniesUseCase:
    """
    Use case for listing companies.

    Business Rules:
    - Deactivated companies are hidden unless include_inactive is set
    - Newest companies first
    - member_count counts active members of active users
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, include_inactive: bool = False) -> Result[ListCompaniesResponse]:
        async with self.uow:
            companies = await self.uow.companies.list_all(include_inactive=include_inactive)
            company_ids = [company.id for company in companies]

            admins = await self.uow.users.get_by_ids(
                list({company.admin_id for company in companies})
            )
            admins_by_id = {admin.id: admin for admin in admins}
            member_counts = await self.uow.memberships.count_active_by_company_ids(company_ids)

            return Return.ok(
                ListCompaniesResponse(
                    companies=[
                        build_company_info(
                            company,
                            admins_by_id.get(company.admin_id),
                            member_counts.get(company.id, 0),
                        )
                        for company in companies
                    ]
                )
            )
