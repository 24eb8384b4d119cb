from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.join_request_repository import IJoinRequestRepository
from src.domain.base import utcnow
from src.domain.entities import JoinRequest, JoinRequestStatus, User


class JoinRequestRepository(IJoinRequestRepository):
    """JoinRequest repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_latest(self, user_id: UUID, company_id: UUID) -> Optional[JoinRequest]:
        """Get the most recent join request of a user for a company"""
        stmt = (
            select(JoinRequest)
            .where(JoinRequest.user_id == user_id, JoinRequest.company_id == company_id)
            .order_by(JoinRequest.requested_at.desc())
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_pending(self, user_id: UUID, company_id: UUID) -> Optional[JoinRequest]:
        """Get the pending join request of a user for a company"""
        stmt = select(JoinRequest).where(
            JoinRequest.user_id == user_id,
            JoinRequest.company_id == company_id,
            JoinRequest.status == JoinRequestStatus.pending,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_pending_by_company(
        self, company_id: UUID
    ) -> List[Tuple[JoinRequest, User]]:
        """Get pending requests of active users for a company, oldest first"""
        stmt = (
            select(JoinRequest, User)
            .join(User, User.id == JoinRequest.user_id)
            .where(
                JoinRequest.company_id == company_id,
                JoinRequest.status == JoinRequestStatus.pending,
                User.is_active == True,  # noqa: E712
            )
            .order_by(JoinRequest.requested_at)
        )
        result = await self.session.exec(stmt)
        return [(join_request, user) for join_request, user in result.all()]

    async def create(self, join_request: JoinRequest) -> JoinRequest:
        """Create a new join request"""
        self.session.add(join_request)
        await self.session.flush()
        await self.session.refresh(join_request)
        return join_request

    async def mark_handled(
        self, request_id: UUID, status: JoinRequestStatus, handled_by: UUID
    ) -> bool:
        """Conditionally move a pending request to a terminal status"""
        stmt = (
            update(JoinRequest)
            .where(
                JoinRequest.id == request_id,
                JoinRequest.status == JoinRequestStatus.pending,
            )
            .values(status=status, handled_by=handled_by, handled_at=utcnow())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
