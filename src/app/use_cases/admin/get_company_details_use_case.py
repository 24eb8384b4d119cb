"""
Use Case: Get Company Details

Super-admin view of one company and its active members, active or not.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.members.dtos import MemberInfo

from .dtos import CompanyDetailsResponse
from .list_companies_use_case import build_company_info


class GetCompanyDetailsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_id: UUID) -> Result[CompanyDetailsResponse]:
        async with self.uow:
            company = await self.uow.companies.get_by_id(company_id)
            if company is None:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            admin = await self.uow.users.get_by_id(company.admin_id)
            rows = await self.uow.memberships.list_active_members(company_id)

            members = [
                MemberInfo(
                    user_id=str(user.id),
                    name=user.name or "No Name",
                    email=user.email,
                    role=membership.role,
                    joined_at=membership.joined_at,
                )
                for membership, user in rows
            ]

            return Return.ok(
                CompanyDetailsResponse(
                    company=build_company_info(company, admin, len(members)),
                    members=members,
                )
            )
