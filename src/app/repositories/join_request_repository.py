from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import JoinRequest, JoinRequestStatus, User


class IJoinRequestRepository(ABC):
    """JoinRequest repository interface - application layer"""

    @abstractmethod
    async def get_latest(self, user_id: UUID, company_id: UUID) -> Optional[JoinRequest]:
        """Get the most recent join request of a user for a company"""
        pass

    @abstractmethod
    async def get_pending(self, user_id: UUID, company_id: UUID) -> Optional[JoinRequest]:
        """Get the pending join request of a user for a company"""
        pass

    @abstractmethod
    async def list_pending_by_company(
        self, company_id: UUID
    ) -> List[Tuple[JoinRequest, User]]:
        """Get pending requests of active users for a company, oldest first"""
        pass

    @abstractmethod
    async def create(self, join_request: JoinRequest) -> JoinRequest:
        """Create a new join request"""
        pass

    @abstractmethod
    async def mark_handled(
        self, request_id: UUID, status: JoinRequestStatus, handled_by: UUID
    ) -> bool:
        """
        Move a request from pending to a terminal status.

        Returns:
            False if the request was no longer pending
        """
        pass
