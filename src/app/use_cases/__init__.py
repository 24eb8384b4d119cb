"""
Use Cases

Organized into domain folders:
- auth/: Identity resolution and profile
- access/: Caller context, active-company selection and authorization checks
- companies/: Company creation, switching and settings
- members/: Member listing, role changes and removal
- join_requests/: Join request workflow
- audit/: Audit logs
- admin/: Super-admin console
"""

from .access import ResolveCallerContextUseCase, SelectActiveCompanyUseCase
from .admin import (
    DeactivateCompanyUseCase,
    DeactivateUserUseCase,
    GetCompanyDetailsUseCase,
    ListCompaniesUseCase,
    ListUsersUseCase,
    ReactivateCompanyUseCase,
    ReactivateUserUseCase,
)
from .audit import GetAuditEventsUseCase
from .auth import GetProfileUseCase, ResolveIdentityUseCase
from .companies import (
    CreateCompanyUseCase,
    GetCompanySettingsUseCase,
    ListMyCompaniesUseCase,
    SwitchCompanyUseCase,
    UpdateCompanySettingsUseCase,
)
from .join_requests import (
    HandleJoinRequestUseCase,
    ListPendingJoinRequestsUseCase,
    RequestJoinUseCase,
)
from .members import (
    GetMemberProfileUseCase,
    GetRolesAndPermissionsUseCase,
    ListMembersUseCase,
    RemoveMemberUseCase,
    UpdateRoleUseCase,
)

__all__ = [
    # Auth
    "ResolveIdentityUseCase",
    "GetProfileUseCase",
    # Access
    "ResolveCallerContextUseCase",
    "SelectActiveCompanyUseCase",
    # Companies
    "CreateCompanyUseCase",
    "ListMyCompaniesUseCase",
    "SwitchCompanyUseCase",
    "GetCompanySettingsUseCase",
    "UpdateCompanySettingsUseCase",
    # Members
    "ListMembersUseCase",
    "GetMemberProfileUseCase",
    "GetRolesAndPermissionsUseCase",
    "UpdateRoleUseCase",
    "RemoveMemberUseCase",
    # Join requests
    "RequestJoinUseCase",
    "ListPendingJoinRequestsUseCase",
    "HandleJoinRequestUseCase",
    # Audit
    "GetAuditEventsUseCase",
    # Admin
    "ListUsersUseCase",
    "ListCompaniesUseCase",
    "GetCompanyDetailsUseCase",
    "DeactivateUserUseCase",
    "ReactivateUserUseCase",
    "DeactivateCompanyUseCase",
    "ReactivateCompanyUseCase",
]
