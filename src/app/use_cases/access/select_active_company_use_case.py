"""
Select Active Company Use Case

Resolves which company membership applies to the current request.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import AuthenticatedUser
from src.domain.entities import CompanyRole

from .dtos import CallerContext


class SelectActiveCompanyUseCase:
    """
    Use case for resolving the active company and role of a caller.

    Business Rules:
    - Super admin resolves to an all-access context, no membership lookup
    - Explicit company id must match an active membership, otherwise NOT_A_MEMBER
    - A deactivated company grants no access (COMPANY_INACTIVE)
    - Without a company id, a single active membership in an active company is
      used; zero or several is NO_ACTIVE_COMPANY (the caller must choose)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user: AuthenticatedUser, company_id: Optional[UUID]
    ) -> Result[CallerContext]:
        """
        Execute select active company use case.

        Args:
            user: Resolved caller
            company_id: Company explicitly selected by the caller, if any

        Returns:
            Result with CallerContext, or Error
        """
        if user.is_super_admin:
            return Return.ok(
                CallerContext(
                    user_id=user.id,
                    email=user.email,
                    global_role=user.global_role,
                    company_id=company_id,
                    role=CompanyRole.company_admin,
                )
            )

        async with self.uow:
            if company_id is None:
                active_memberships = await self.uow.memberships.get_active_by_user_id(
                    user.id
                )
                if len(active_memberships) != 1:
                    return Return.err(
                        Error(
                            "NO_ACTIVE_COMPANY",
                            "Select a company first",
                            {"active_memberships": len(active_memberships)},
                        )
                    )
                membership = active_memberships[0]
            else:
                membership = await self.uow.memberships.get_active(user.id, company_id)
                if membership is None:
                    return Return.err(
                        Error(
                            "NOT_A_MEMBER",
                            "Access denied. You are not a member of this company.",
                        )
                    )

                company = await self.uow.companies.get_by_id(company_id)
                if company is None or not company.is_active:
                    return Return.err(
                        Error("COMPANY_INACTIVE", "This company has been deactivated")
                    )

            return Return.ok(
                CallerContext(
                    user_id=user.id,
                    email=user.email,
                    global_role=user.global_role,
                    company_id=membership.company_id,
                    role=membership.role,
                )
            )
