from typing import Dict, List, Optional, Tuple
from uuid import UUID

from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.membership_repository import IMembershipRepository
from src.domain.entities import Company, Membership, User


class MembershipRepository(IMembershipRepository):
    """Membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_active(
        self, user_id: UUID, company_id: UUID, for_update: bool = False
    ) -> Optional[Membership]:
        """Get the active membership of a user in a company"""
        stmt = select(Membership).where(
            Membership.user_id == user_id,
            Membership.company_id == company_id,
            Membership.is_active == True,  # noqa: E712
        )
        if for_update:
            # Serializes role updates and removals on the same membership row
            stmt = stmt.with_for_update()
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_user_id(self, user_id: UUID) -> List[Membership]:
        """Get all memberships for a user, oldest first"""
        stmt = (
            select(Membership)
            .where(Membership.user_id == user_id)
            .order_by(Membership.joined_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_active_by_user_id(self, user_id: UUID) -> List[Membership]:
        """Get active memberships for a user in active companies, oldest first"""
        stmt = (
            select(Membership)
            .join(Company, Company.id == Membership.company_id)
            .where(
                Membership.user_id == user_id,
                Membership.is_active == True,  # noqa: E712
                Company.is_active == True,  # noqa: E712
            )
            .order_by(Membership.joined_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_active_members(self, company_id: UUID) -> List[Tuple[Membership, User]]:
        """Get active memberships of active users in a company"""
        stmt = (
            select(Membership, User)
            .join(User, User.id == Membership.user_id)
            .where(
                Membership.company_id == company_id,
                Membership.is_active == True,  # noqa: E712
                User.is_active == True,  # noqa: E712
            )
            .order_by(Membership.joined_at)
        )
        result = await self.session.exec(stmt)
        return [(membership, user) for membership, user in result.all()]

    async def get_active_by_user_ids(self, user_ids: List[UUID]) -> List[Membership]:
        """Get active memberships of several users, oldest first"""
        if not user_ids:
            return []
        stmt = (
            select(Membership)
            .where(Membership.user_id.in_(user_ids), Membership.is_active == True)  # noqa: E712
            .order_by(Membership.joined_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_active_by_company_ids(self, company_ids: List[UUID]) -> Dict[UUID, int]:
        """Number of active members (active membership, active user) per company"""
        if not company_ids:
            return {}
        stmt = (
            select(Membership.company_id, func.count(Membership.id))
            .join(User, User.id == Membership.user_id)
            .where(
                Membership.company_id.in_(company_ids),
                Membership.is_active == True,  # noqa: E712
                User.is_active == True,  # noqa: E712
            )
            .group_by(Membership.company_id)
        )
        result = await self.session.exec(stmt)
        return {company_id: count for company_id, count in result.all()}

    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def update(self, membership: Membership) -> Membership:
        """Update existing membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership
