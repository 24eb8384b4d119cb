"""
AuditEvent Entity

Immutable log of membership, role and identity events.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from src.domain.base import utcnow


class AuditEvent(SQLModel, table=True):
    """
    AuditEvent entity - immutable log of access-control events.

    Business Rules:
    - Immutable (never updated or deleted)
    - company_id nullable for global events (user_created, super_admin_demoted, etc.)
    - Metadata stores additional context (target user, old/new role, etc.)
    """

    __tablename__ = "audit_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    company_id: Optional[UUID] = Field(default=None, index=True)
    user_id: Optional[UUID] = Field(default=None, index=True)

    action: str = Field(max_length=100)  # e.g., "role_changed", "member_removed"
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_audit_created_at", "created_at"),
        Index("idx_audit_company_action", "company_id", "action"),
        Index("idx_audit_user_id", "user_id"),
    )
