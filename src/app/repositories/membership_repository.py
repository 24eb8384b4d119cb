from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Membership, User


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get_active(
        self, user_id: UUID, company_id: UUID, for_update: bool = False
    ) -> Optional[Membership]:
        """Get the active membership of a user in a company"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> List[Membership]:
        """Get all memberships for a user, oldest first"""
        pass

    @abstractmethod
    async def get_active_by_user_id(self, user_id: UUID) -> List[Membership]:
        """Get active memberships for a user in active companies, oldest first"""
        pass

    @abstractmethod
    async def list_active_members(self, company_id: UUID) -> List[Tuple[Membership, User]]:
        """Get active memberships of active users in a company"""
        pass

    @abstractmethod
    async def get_active_by_user_ids(self, user_ids: List[UUID]) -> List[Membership]:
        """Get active memberships of several users, oldest first"""
        pass

    @abstractmethod
    async def count_active_by_company_ids(self, company_ids: List[UUID]) -> Dict[UUID, int]:
        """Number of active members (active membership, active user) per company"""
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        pass

    @abstractmethod
    async def update(self, membership: Membership) -> Membership:
        """Update existing membership"""
        pass
