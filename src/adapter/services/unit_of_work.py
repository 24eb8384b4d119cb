from typing import Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.audit_event_repository import AuditEventRepository
from src.adapter.repositories.company_repository import CompanyRepository
from src.adapter.repositories.join_request_repository import JoinRequestRepository
from src.adapter.repositories.membership_repository import MembershipRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession, super_admin_email: Optional[str]):
        self.session = session
        self.super_admin_email = super_admin_email

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session, self.super_admin_email)
        self.companies = CompanyRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        self.join_requests = JoinRequestRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
