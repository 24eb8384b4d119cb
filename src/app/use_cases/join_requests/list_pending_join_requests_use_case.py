"""
List Pending Join Requests Use Case
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access import (
    CallerContext,
    authorize_company_admin,
    require_active_company,
)
from src.domain.entities import Capability

from .dtos import ListPendingJoinRequestsResponse, PendingJoinRequestInfo


class ListPendingJoinRequestsUseCase:
    """Pending requests of the caller's company, visible to company_admin only"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: CallerContext) -> Result[ListPendingJoinRequestsResponse]:
        company_check = require_active_company(actor)
        if company_check.is_err():
            return company_check

        authorized = authorize_company_admin(actor, Capability.manage_employees)
        if authorized.is_err():
            return authorized

        async with self.uow:
            rows = await self.uow.join_requests.list_pending_by_company(actor.company_id)

            return Return.ok(
                ListPendingJoinRequestsResponse(
                    requests=[
                        PendingJoinRequestInfo(
                            request_id=str(join_request.id),
                            user_id=str(user.id),
                            name=user.name or "No Name",
                            email=user.email,
                            requested_role=join_request.requested_role,
                            requested_at=join_request.requested_at,
                        )
                        for join_request, user in rows
                    ]
                )
            )
