"""
Admin Use Case DTOs (Data Transfer Objects)

Responses of the super-admin console.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.app.use_cases.members.dtos import MemberInfo
from src.domain.entities import CompanyRole, GlobalRole


class SetUserActiveResponse(BaseModel):
    """Response DTO for DeactivateUserUseCase and ReactivateUserUseCase"""

    user_id: str
    is_active: bool


class SetCompanyActiveResponse(BaseModel):
    """Response DTO for DeactivateCompanyUseCase and ReactivateCompanyUseCase"""

    company_id: str
    name: str
    is_active: bool


class UserCompanyInfo(BaseModel):
    company_id: str
    company_name: Optional[str]
    role: CompanyRole
    joined_at: Optional[datetime]


class PlatformUserInfo(BaseModel):
    """A user as seen by the super admin, with active memberships"""

    id: str
    email: str
    name: Optional[str]
    global_role: GlobalRole
    is_active: bool
    companies: List[UserCompanyInfo]
    created_at: Optional[datetime]


class ListUsersResponse(BaseModel):
    users: List[PlatformUserInfo]


class CompanyAdminInfo(BaseModel):
    """Creator of the company (provenance only)"""

    id: str
    name: Optional[str]
    email: Optional[str]


class PlatformCompanyInfo(BaseModel):
    id: str
    name: str
    domain: Optional[str]
    is_active: bool
    admin: CompanyAdminInfo
    member_count: int
    created_at: Optional[datetime]


class ListCompaniesResponse(BaseModel):
    companies: List[PlatformCompanyInfo]


class CompanyDetailsResponse(BaseModel):
    company: PlatformCompanyInfo
    members: List[MemberInfo]
