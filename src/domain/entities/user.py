"""
User Entity

Represents a person known to the external identity provider who can belong
to multiple companies.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import GlobalRole


class User(SQLModel, table=True):
    """
    User entity - represents a person who can belong to multiple companies.

    Business Rules:
    - subject_id (identity provider subject) and email are unique
    - Created on first successful identity verification
    - global_role is re-derived from the configured super-admin email on every login
    - Only one email in the system may hold super_admin
    - Never hard-deleted; is_active=False hides the user from listings
    - last_active_company_id is the remembered company for default selection
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    subject_id: str = Field(unique=True, index=True, max_length=128)
    email: str = Field(unique=True, index=True, max_length=255)
    name: Optional[str] = Field(default=None, max_length=255)

    global_role: GlobalRole = Field(default=GlobalRole.user)
    is_active: bool = Field(default=True)

    last_active_company_id: Optional[UUID] = Field(
        default=None, foreign_key="companies.id"
    )

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_global_role", "global_role"),)

    @property
    def is_super_admin(self) -> bool:
        return self.global_role == GlobalRole.super_admin
