"""
Membership Entity

Links User to Company with a role.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import CompanyRole


class Membership(SQLModel, table=True):
    """
    Membership entity - links User to Company with a role.

    Business Rules:
    - One user can be member of multiple companies, with a different role in each
    - At most one active membership per (user_id, company_id)
    - Removal flips is_active off; rows are never deleted
    - joined_at is set at creation and never rewritten
    - Only company admins change roles or remove members
    """

    __tablename__ = "memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    company_id: UUID = Field(foreign_key="companies.id", nullable=False, index=True)

    role: CompanyRole = Field(nullable=False)
    is_active: bool = Field(default=True)

    # Timestamps
    joined_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index(
            "uq_membership_active_user_company",
            "user_id",
            "company_id",
            unique=True,
            sqlite_where=text("is_active = 1"),
            postgresql_where=text("is_active"),
        ),
        Index("idx_membership_company_active", "company_id", "is_active"),
    )
