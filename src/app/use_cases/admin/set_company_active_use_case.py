"""
Use Case: Deactivate / Reactivate Company

Super-admin console operations. A deactivated company keeps its memberships,
but none of them grants access until the company is reactivated.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import AuthenticatedUser
from src.domain.entities import AuditEvent

from .dtos import SetCompanyActiveResponse

logger = logging.getLogger(__name__)


class _SetCompanyActiveUseCase:
    is_active: bool
    action: str

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, admin: AuthenticatedUser, company_id: UUID
    ) -> Result[SetCompanyActiveResponse]:
        """
        Args:
            admin: Super admin performing the operation
            company_id: Company to (de)activate

        Returns:
            Result[SetCompanyActiveResponse], or Error
        """
        async with self.uow:
            company = await self.uow.companies.get_by_id(company_id)
            if company is None:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            response = SetCompanyActiveResponse(
                company_id=str(company.id), name=company.name, is_active=self.is_active
            )

            if company.is_active != self.is_active:
                company.is_active = self.is_active
                await self.uow.companies.update(company)

                await self.uow.audit_events.create(
                    AuditEvent(
                        company_id=company_id,
                        user_id=admin.id,
                        action=self.action,
                        event_metadata={"company_name": company.name},
                    )
                )

                await self.uow.commit()

                logger.info(f"Super admin {admin.id}: {self.action} {company_id}")

            return Return.ok(response)


class DeactivateCompanyUseCase(_SetCompanyActiveUseCase):
    """Idempotent: deactivating an inactive company succeeds without a new audit event"""

    is_active = False
    action = "company_deactivated"


class ReactivateCompanyUseCase(_SetCompanyActiveUseCase):
    is_active = True
    action = "company_reactivated"
