from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User
from src.domain.super_admin import enforce_super_admin_rule, normalize_email


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession, super_admin_email: Optional[str]):
        self.session = session
        # Only this email may be persisted with the super_admin global role
        self.super_admin_email = super_admin_email

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == normalize_email(email))
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_subject_id(self, subject_id: str) -> Optional[User]:
        """Get user by identity provider subject"""
        stmt = select(User).where(User.subject_id == subject_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, user: User) -> User:
        """Create a new user"""
        user.email = normalize_email(user.email)
        enforce_super_admin_rule(user, self.super_admin_email)
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        user.email = normalize_email(user.email)
        enforce_super_admin_rule(user, self.super_admin_email)
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def get_by_ids(self, user_ids: List[UUID]) -> List[User]:
        """Get several users at once"""
        if not user_ids:
            return []
        stmt = select(User).where(User.id.in_(user_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_all(self, include_inactive: bool = False) -> List[User]:
        """Get users, newest first"""
        stmt = select(User)
        if not include_inactive:
            stmt = stmt.where(User.is_active == True)  # noqa: E712
        stmt = stmt.order_by(User.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())
