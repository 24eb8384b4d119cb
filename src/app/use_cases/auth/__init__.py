"""
Authentication Use Cases

Identity resolution and profile loading.
"""

from .dtos import AuthenticatedUser, MembershipInfo, UserProfileResponse
from .get_profile_use_case import GetProfileUseCase
from .resolve_identity_use_case import ResolveIdentityUseCase

__all__ = [
    "ResolveIdentityUseCase",
    "GetProfileUseCase",
    "AuthenticatedUser",
    "MembershipInfo",
    "UserProfileResponse",
]
