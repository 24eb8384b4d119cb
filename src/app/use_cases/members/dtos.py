"""
Member Use Case DTOs (Data Transfer Objects)

All Response classes for company member management.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from src.domain.entities import CompanyRole


class MemberInfo(BaseModel):
    """Active member of a company"""

    user_id: str
    name: str
    email: str
    role: CompanyRole
    joined_at: Optional[datetime]


class ListMembersResponse(BaseModel):
    """Response for list members use case"""

    members: List[MemberInfo]


class MemberProfileResponse(BaseModel):
    """Response for member profile use case"""

    member: MemberInfo
    permissions: Dict[str, bool]


class RolesAndPermissionsResponse(BaseModel):
    """Response for roles and permissions use case"""

    members: List[MemberInfo]
    role_permissions: Dict[str, Dict[str, Any]]


class UpdatedMembership(BaseModel):
    user_id: str
    role: CompanyRole


class UpdateRoleResponse(BaseModel):
    """Response for update role use case"""

    status: str
    membership: UpdatedMembership


class RemoveMemberResponse(BaseModel):
    """Response for remove member use case"""

    status: str
