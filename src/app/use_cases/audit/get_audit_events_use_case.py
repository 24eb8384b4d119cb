"""
Get Audit Events Use Case

Retrieves access-control audit events for a company with pagination.
"""

from typing import List, Optional

from pydantic import BaseModel

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access import (
    CallerContext,
    authorize_roles,
    require_active_company,
)
from src.domain.entities import CompanyRole


class AuditEventInfo(BaseModel):
    action: str
    user_email: Optional[str]
    timestamp: str
    metadata: dict


class AuditEventsResponse(BaseModel):
    """Response for get audit events use case"""

    events: List[AuditEventInfo]
    next_cursor: Optional[str]


class GetAuditEventsUseCase:
    """
    Use case for retrieving audit events for a company.

    Business Rules:
    - Caller must be company_admin of the company (or the super admin)
    - Results are company-scoped
    - Results ordered by newest first
    - Supports cursor-based pagination
    - Each event includes action, user_email, timestamp, metadata
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor: CallerContext,
        limit: int = 50,
        cursor: Optional[str] = None,
    ) -> Result[AuditEventsResponse]:
        """
        Execute get audit events use case.

        Args:
            actor: Resolved caller context
            limit: Maximum number of events to return
            cursor: Pagination cursor (optional)

        Returns:
            Result with events list and next_cursor, or Error
        """
        company_check = require_active_company(actor)
        if company_check.is_err():
            return company_check

        authorized = authorize_roles(actor, [CompanyRole.company_admin])
        if authorized.is_err():
            return authorized

        async with self.uow:
            events, next_cursor = await self.uow.audit_events.get_by_company_paginated(
                actor.company_id, limit=limit, cursor=cursor
            )

            emails = {}
            events_list = []
            for event in events:
                user_email = None
                if event.user_id:
                    if event.user_id not in emails:
                        user = await self.uow.users.get_by_id(event.user_id)
                        emails[event.user_id] = user.email if user else None
                    user_email = emails[event.user_id]

                events_list.append(
                    AuditEventInfo(
                        action=event.action,
                        user_email=user_email,
                        timestamp=event.created_at.isoformat() + "Z",
                        metadata=event.event_metadata or {},
                    )
                )

            return Return.ok(
                AuditEventsResponse(events=events_list, next_cursor=next_cursor)
            )
