"""
Member Management Use Cases

Listing, role changes and removal of company members.
"""

from .dtos import (
    ListMembersResponse,
    MemberInfo,
    MemberProfileResponse,
    RemoveMemberResponse,
    RolesAndPermissionsResponse,
    UpdateRoleResponse,
)
from .get_member_profile_use_case import GetMemberProfileUseCase
from .get_roles_and_permissions_use_case import GetRolesAndPermissionsUseCase
from .list_members_use_case import ListMembersUseCase
from .remove_member_use_case import RemoveMemberUseCase
from .update_role_use_case import UpdateRoleUseCase

__all__ = [
    "ListMembersUseCase",
    "GetMemberProfileUseCase",
    "GetRolesAndPermissionsUseCase",
    "UpdateRoleUseCase",
    "RemoveMemberUseCase",
    "ListMembersResponse",
    "MemberInfo",
    "MemberProfileResponse",
    "RolesAndPermissionsResponse",
    "UpdateRoleResponse",
    "RemoveMemberResponse",
]
