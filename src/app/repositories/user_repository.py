from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_subject_id(self, subject_id: str) -> Optional[User]:
        """Get user by identity provider subject"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user (super-admin rule enforced)"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user (super-admin rule enforced)"""
        pass

    @abstractmethod
    async def get_by_ids(self, user_ids: List[UUID]) -> List[User]:
        """Get several users at once"""
        pass

    @abstractmethod
    async def list_all(self, include_inactive: bool = False) -> List[User]:
        """Get users, newest first"""
        pass
