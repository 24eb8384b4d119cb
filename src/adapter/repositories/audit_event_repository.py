import base64
import binascii
import logging
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.domain.entities import AuditEvent

logger = logging.getLogger(__name__)


def encode_cursor(created_at: datetime) -> str:
    return base64.urlsafe_b64encode(created_at.isoformat().encode("utf-8")).decode("utf-8")


def decode_cursor(cursor: str) -> Optional[datetime]:
    """Cursor is the base64-encoded ISO created_at of the last event seen"""
    try:
        return datetime.fromisoformat(base64.urlsafe_b64decode(cursor).decode("utf-8"))
    except (ValueError, TypeError, binascii.Error):
        return None


class AuditEventRepository(IAuditEventRepository):
    """AuditEvent repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Create a new audit event (immutable)"""
        self.session.add(audit_event)
        await self.session.flush()
        await self.session.refresh(audit_event)
        return audit_event

    async def get_by_company_paginated(
        self, company_id: UUID, limit: int = 50, cursor: Optional[str] = None
    ) -> Tuple[List[AuditEvent], Optional[str]]:
        """Audit events of a company, newest first, with cursor-based pagination"""
        stmt = select(AuditEvent).where(AuditEvent.company_id == company_id)

        if cursor:
            cursor_timestamp = decode_cursor(cursor)
            if cursor_timestamp is None:
                logger.warning(f"Ignoring malformed audit cursor for company {company_id}")
            else:
                stmt = stmt.where(AuditEvent.created_at < cursor_timestamp)

        # one extra row tells whether another page exists
        stmt = stmt.order_by(AuditEvent.created_at.desc()).limit(limit + 1)
        result = await self.session.exec(stmt)
        events = list(result.all())

        next_cursor = None
        if len(events) > limit:
            events = events[:limit]
            next_cursor = encode_cursor(events[-1].created_at)

        return events, next_cursor
