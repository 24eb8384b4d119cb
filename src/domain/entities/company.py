"""
Company Entity

Represents an isolated CRM workspace.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Company(SQLModel, table=True):
    """
    Company entity - isolated CRM workspace.

    Business Rules:
    - Name is unique
    - admin_id records the creator only; authorization always goes through memberships
    - settings holds admin-editable notification, feature and preference values
    """

    __tablename__ = "companies"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=255)
    domain: Optional[str] = Field(default=None, max_length=255)

    admin_id: UUID = Field(nullable=False, index=True)
    is_active: bool = Field(default=True)

    settings: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_company_is_active", "is_active"),)
