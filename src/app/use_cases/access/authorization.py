"""
Caller authorization checks

Role and capability checks against a resolved CallerContext. The super admin
bypasses per-company checks; everyone else is judged by the role table.
"""

from typing import Iterable

from libs.result import Error, Result, Return
from src.domain.entities import Capability, CompanyRole
from src.domain.role_permissions import check_capability, require_role

from .dtos import CallerContext


def authorize_roles(context: CallerContext, allowed_roles: Iterable[CompanyRole]) -> Result[None]:
    if context.is_super_admin:
        return Return.ok(None)
    return require_role(context.role, allowed_roles)


def authorize_capability(context: CallerContext, capability: Capability) -> Result[None]:
    if context.is_super_admin:
        return Return.ok(None)
    if context.role is not None and check_capability(context.role, capability):
        return Return.ok(None)
    return Return.err(
        Error(
            "FORBIDDEN",
            "You don't have permission to perform this action",
            {"required_capability": Capability(capability).value},
        )
    )


def authorize_company_admin(context: CallerContext, capability: Capability) -> Result[None]:
    """Admin-only operations: company_admin role and the matching capability"""
    result = authorize_roles(context, [CompanyRole.company_admin])
    if result.is_err():
        return result
    return authorize_capability(context, capability)


def require_active_company(context: CallerContext) -> Result[None]:
    if context.company_id is None:
        return Return.err(Error("NO_ACTIVE_COMPANY", "Select a company first"))
    return Return.ok(None)
