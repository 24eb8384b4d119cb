"""
Authentication Use Case DTOs (Data Transfer Objects)

All Response classes for the auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.entities import CompanyRole, GlobalRole, User


# ============================================================================
# Response DTOs
# ============================================================================


class AuthenticatedUser(BaseModel):
    """Resolved internal user, detached from the database session"""

    model_config = ConfigDict(frozen=True)

    id: UUID
    subject_id: str
    email: str
    name: Optional[str] = None
    global_role: GlobalRole
    last_active_company_id: Optional[UUID] = None

    @property
    def is_super_admin(self) -> bool:
        return self.global_role == GlobalRole.super_admin

    @classmethod
    def from_user(cls, user: User) -> "AuthenticatedUser":
        return cls(
            id=user.id,
            subject_id=user.subject_id,
            email=user.email,
            name=user.name,
            global_role=user.global_role,
            last_active_company_id=user.last_active_company_id,
        )


class MembershipInfo(BaseModel):
    """One company membership in the user profile"""

    company_id: str
    company_name: Optional[str]
    role: CompanyRole
    joined_at: Optional[datetime]
    is_active: bool


class UserProfileResponse(BaseModel):
    """Response for login and GET /auth/me"""

    id: str
    email: str
    name: Optional[str]
    global_role: GlobalRole
    companies: List[MembershipInfo]
