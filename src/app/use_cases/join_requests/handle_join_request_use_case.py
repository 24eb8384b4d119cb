"""
Handle Join Request Use Case

Approves or rejects a pending request to join the caller's company.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access import (
    CallerContext,
    authorize_company_admin,
    require_active_company,
)
from src.domain.base import utcnow
from src.domain.entities import (
    AuditEvent,
    Capability,
    JoinRequestAction,
    JoinRequestStatus,
    Membership,
)

from .dtos import HandleJoinRequestResponse

logger = logging.getLogger(__name__)


class HandleJoinRequestUseCase:
    """
    Use case for deciding a pending join request.

    Business Rules:
    - Action must be approve or reject
    - Only company_admin (or the super admin) may decide
    - Only the latest request of the user for the company is considered
    - A request is decided once: pending -> approved | rejected is a
      conditional update, so a concurrent second decision sees
      REQUEST_ALREADY_HANDLED and grants nothing
    - Approve creates an active membership with the requested role
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: CallerContext, target_user_id: UUID, action: str
    ) -> Result[HandleJoinRequestResponse]:
        """
        Execute handle join request use case.

        Args:
            actor: Resolved caller context
            target_user_id: User whose request is decided
            action: "approve" or "reject"

        Returns:
            Result with the decision, or Error
        """
        try:
            decision = JoinRequestAction(action)
        except ValueError:
            return Return.err(
                Error("INVALID_ACTION", "Invalid action. Must be approve or reject")
            )

        company_check = require_active_company(actor)
        if company_check.is_err():
            return company_check

        authorized = authorize_company_admin(actor, Capability.manage_employees)
        if authorized.is_err():
            return authorized

        async with self.uow:
            join_request = await self.uow.join_requests.get_latest(
                target_user_id, actor.company_id
            )
            if join_request is None:
                return Return.err(
                    Error("JOIN_REQUEST_NOT_FOUND", "Join request not found")
                )

            if join_request.status != JoinRequestStatus.pending:
                return Return.err(
                    Error("REQUEST_ALREADY_HANDLED", "Request already processed")
                )

            requested_role = join_request.requested_role
            new_status = (
                JoinRequestStatus.approved
                if decision == JoinRequestAction.approve
                else JoinRequestStatus.rejected
            )

            # pending -> terminal happens at most once
            handled = await self.uow.join_requests.mark_handled(
                join_request.id, new_status, actor.user_id
            )
            if not handled:
                return Return.err(
                    Error("REQUEST_ALREADY_HANDLED", "Request already processed")
                )

            if new_status == JoinRequestStatus.approved:
                existing = await self.uow.memberships.get_active(
                    target_user_id, actor.company_id
                )
                if existing is not None:
                    return Return.err(
                        Error("ALREADY_MEMBER", "User is already a member of this company")
                    )

                await self.uow.memberships.create(
                    Membership(
                        user_id=target_user_id,
                        company_id=actor.company_id,
                        role=requested_role,
                        is_active=True,
                        joined_at=utcnow(),
                    )
                )

            await self.uow.audit_events.create(
                AuditEvent(
                    company_id=actor.company_id,
                    user_id=actor.user_id,
                    action=f"join_request_{new_status.value}",
                    event_metadata={
                        "target_user_id": str(target_user_id),
                        "requested_role": requested_role.value,
                    },
                )
            )

            await self.uow.commit()

            logger.info(
                f"User {actor.user_id} {new_status.value} join request of "
                f"{target_user_id} for company {actor.company_id}"
            )

            return Return.ok(
                HandleJoinRequestResponse(
                    status=new_status,
                    user_id=str(target_user_id),
                    role=requested_role
                    if new_status == JoinRequestStatus.approved
                    else None,
                )
            )
