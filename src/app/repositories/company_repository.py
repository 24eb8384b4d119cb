from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Company


class ICompanyRepository(ABC):
    """Company repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, company_id: UUID) -> Optional[Company]:
        """Get company by ID"""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Company]:
        """Get company by unique name"""
        pass

    @abstractmethod
    async def get_by_ids(self, company_ids: List[UUID]) -> List[Company]:
        """Get several companies at once"""
        pass

    @abstractmethod
    async def create(self, company: Company) -> Company:
        """Create a new company"""
        pass

    @abstractmethod
    async def update(self, company: Company) -> Company:
        """Update existing company"""
        pass

    @abstractmethod
    async def list_all(self, include_inactive: bool = False) -> List[Company]:
        """Get companies, newest first"""
        pass
