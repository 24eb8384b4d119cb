"""
Create Company Use Case

Handles creation of a company with the creator as its first admin.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditEvent, Company, CompanyRole, Membership

from .dtos import CompanyInfo, CreateCompanyResponse

logger = logging.getLogger(__name__)


class CreateCompanyUseCase:
    """
    Use case for creating a company.

    Business Rules:
    - Name is required and unique (COMPANY_NAME_TAKEN)
    - Creator is recorded as admin_id and gets a company_admin membership
    - Creates audit event
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, name: str, domain: Optional[str] = None
    ) -> Result[CreateCompanyResponse]:
        name = (name or "").strip()
        if not name:
            return Return.err(Error("INVALID_COMPANY_NAME", "Company name is required"))

        async with self.uow:
            existing = await self.uow.companies.get_by_name(name)
            if existing is not None:
                return Return.err(
                    Error("COMPANY_NAME_TAKEN", "Company name already exists")
                )

            company = await self.uow.companies.create(
                Company(name=name, domain=domain or None, admin_id=user_id)
            )

            membership = await self.uow.memberships.create(
                Membership(
                    user_id=user_id,
                    company_id=company.id,
                    role=CompanyRole.company_admin,
                    joined_at=utcnow(),
                )
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    company_id=company.id,
                    user_id=user_id,
                    action="company_created",
                    event_metadata={"name": name, "domain": domain},
                )
            )

            response = CreateCompanyResponse(
                company=CompanyInfo(
                    id=str(company.id),
                    name=company.name,
                    domain=company.domain,
                    role=membership.role,
                    joined_at=membership.joined_at,
                )
            )

            await self.uow.commit()

            logger.info(f"Company {company.id} created by user {user_id}")

            return Return.ok(response)
