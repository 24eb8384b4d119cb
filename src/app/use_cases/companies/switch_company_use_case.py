"""
Switch Active Company Use Case

Remembers the company a user works in for the next session.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access import SelectActiveCompanyUseCase
from src.app.use_cases.auth.dtos import AuthenticatedUser
from src.domain.entities import AuditEvent

from .dtos import CompanyInfo, SwitchCompanyResponse

logger = logging.getLogger(__name__)


class SwitchCompanyUseCase:
    """
    Use case for switching the remembered active company.

    Business Rules:
    - Target is validated with the same rules as every company-scoped request
    - Company must exist and be active
    - Updates user.last_active_company_id, which only feeds the default suggestion
    - Creates audit event
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user: AuthenticatedUser, company_id: UUID
    ) -> Result[SwitchCompanyResponse]:
        """
        Execute switch company use case.

        Args:
            user: Resolved caller
            company_id: Company to switch to

        Returns:
            Result with the company and the caller's role there, or Error
        """
        selected = await SelectActiveCompanyUseCase(self.uow).execute(user, company_id)
        if selected.is_err():
            return selected
        context = selected.value

        async with self.uow:
            company = await self.uow.companies.get_by_id(company_id)
            if company is None or not company.is_active:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            db_user = await self.uow.users.get_by_id(user.id)
            if db_user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            previous_company_id = db_user.last_active_company_id
            db_user.last_active_company_id = company_id
            await self.uow.users.update(db_user)

            await self.uow.audit_events.create(
                AuditEvent(
                    company_id=company_id,
                    user_id=user.id,
                    action="company_switch",
                    event_metadata={
                        "previous_company_id": str(previous_company_id)
                        if previous_company_id and previous_company_id != company_id
                        else None,
                        "new_company_id": str(company_id),
                        "company_name": company.name,
                    },
                )
            )

            response = SwitchCompanyResponse(
                company=CompanyInfo(
                    id=str(company.id),
                    name=company.name,
                    domain=company.domain,
                    role=context.role,
                )
            )

            await self.uow.commit()

            logger.info(f"User {user.id} switched to company {company_id}")

            return Return.ok(response)
