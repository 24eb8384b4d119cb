"""
Request Join Use Case

Handles a user asking to join an existing company.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, CompanyRole, JoinRequest

from .dtos import JoinRequestResponse

logger = logging.getLogger(__name__)

JOINABLE_ROLES = (CompanyRole.manager, CompanyRole.employee, CompanyRole.client)


class RequestJoinUseCase:
    """
    Use case for requesting membership in a company.

    Business Rules:
    - Requested role must be manager, employee or client
    - Company must exist and be active
    - Users with an active membership cannot ask again (ALREADY_MEMBER)
    - At most one pending request per user and company
    - No membership is granted until an admin approves, for every role
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, company_id: UUID, requested_role: str
    ) -> Result[JoinRequestResponse]:
        """
        Execute request join use case.

        Args:
            user_id: Requesting user ID
            company_id: Company to join
            requested_role: Role the user asks for

        Returns:
            Result with the pending request, or Error
        """
        try:
            role = CompanyRole(requested_role)
        except ValueError:
            role = None
        if role not in JOINABLE_ROLES:
            return Return.err(
                Error(
                    "INVALID_ROLE",
                    "Invalid role. Must be one of: "
                    + ", ".join(r.value for r in JOINABLE_ROLES),
                )
            )

        async with self.uow:
            company = await self.uow.companies.get_by_id(company_id)
            if company is None or not company.is_active:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            membership = await self.uow.memberships.get_active(user_id, company_id)
            if membership is not None:
                return Return.err(
                    Error("ALREADY_MEMBER", "You are already a member of this company")
                )

            pending = await self.uow.join_requests.get_pending(user_id, company_id)
            if pending is not None:
                return Return.err(
                    Error(
                        "JOIN_REQUEST_PENDING",
                        "You already have a pending request for this company",
                    )
                )

            join_request = await self.uow.join_requests.create(
                JoinRequest(user_id=user_id, company_id=company_id, requested_role=role)
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    company_id=company_id,
                    user_id=user_id,
                    action="join_requested",
                    event_metadata={"requested_role": role.value},
                )
            )

            await self.uow.commit()

            logger.info(f"User {user_id} requested to join company {company_id} as {role.value}")

            return Return.ok(
                JoinRequestResponse(
                    request_id=str(join_request.id),
                    company_id=str(company_id),
                    company_name=company.name,
                    requested_role=role,
                    status=join_request.status,
                    requested_at=join_request.requested_at,
                )
            )
