from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.company_repository import ICompanyRepository
from src.domain.entities import Company


class CompanyRepository(ICompanyRepository):
    """Company repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, company_id: UUID) -> Optional[Company]:
        """Get company by ID"""
        stmt = select(Company).where(Company.id == company_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_name(self, name: str) -> Optional[Company]:
        """Get company by unique name"""
        stmt = select(Company).where(Company.name == name)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, company_ids: List[UUID]) -> List[Company]:
        """Get several companies at once"""
        if not company_ids:
            return []
        stmt = select(Company).where(Company.id.in_(company_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, company: Company) -> Company:
        """Create a new company"""
        self.session.add(company)
        await self.session.flush()
        await self.session.refresh(company)
        return company

    async def update(self, company: Company) -> Company:
        """Update existing company"""
        self.session.add(company)
        await self.session.flush()
        await self.session.refresh(company)
        return company

    async def list_all(self, include_inactive: bool = False) -> List[Company]:
        """Get companies, newest first"""
        stmt = select(Company)
        if not include_inactive:
            stmt = stmt.where(Company.is_active == True)  # noqa: E712
        stmt = stmt.order_by(Company.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())
