"""
JoinRequest Entity

A user's request to become a member of a company.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import CompanyRole, JoinRequestStatus


class JoinRequest(SQLModel, table=True):
    """
    JoinRequest entity - pending ask to join a company with a role.

    Business Rules:
    - pending -> approved (creates an active membership) or pending -> rejected
    - approved and rejected are terminal; the row is kept for audit
    - A user has at most one pending request per company
    """

    __tablename__ = "join_requests"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    company_id: UUID = Field(foreign_key="companies.id", nullable=False, index=True)

    requested_role: CompanyRole = Field(nullable=False)
    status: JoinRequestStatus = Field(default=JoinRequestStatus.pending)

    handled_by: Optional[UUID] = Field(default=None)

    # Timestamps
    requested_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )
    handled_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_join_request_company_status", "company_id", "status"),
        Index("idx_join_request_user_company", "user_id", "company_id"),
    )
