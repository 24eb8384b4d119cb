"""
List My Companies Use Case
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access import suggest_default_company
from src.app.use_cases.auth.dtos import AuthenticatedUser

from .dtos import CompanyInfo, ListMyCompaniesResponse


class ListMyCompaniesUseCase:
    """
    Use case for listing the caller's companies.

    Business Rules:
    - Only active memberships in active companies are listed
    - default_company_id is a suggestion for the client, never an authorization
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user: AuthenticatedUser) -> Result[ListMyCompaniesResponse]:
        async with self.uow:
            memberships = await self.uow.memberships.get_by_user_id(user.id)
            companies = await self.uow.companies.get_by_ids(
                list({m.company_id for m in memberships})
            )
            by_id = {c.id: c for c in companies if c.is_active}

            listed = []
            for membership in memberships:
                company = by_id.get(membership.company_id)
                if not membership.is_active or company is None:
                    continue
                listed.append(
                    CompanyInfo(
                        id=str(company.id),
                        name=company.name,
                        domain=company.domain,
                        role=membership.role,
                        joined_at=membership.joined_at,
                    )
                )

            default_company_id = suggest_default_company(
                [m for m in memberships if m.company_id in by_id],
                user.last_active_company_id,
            )

            return Return.ok(
                ListMyCompaniesResponse(
                    companies=listed,
                    default_company_id=str(default_company_id)
                    if default_company_id
                    else None,
                )
            )
