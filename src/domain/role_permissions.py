"""
Role-Permission Table

Static mapping from company role to its capability set. Every role lists
every capability explicitly; editing this table is a deployment-time change.
Record-level scoping (e.g. employees only touching records assigned to them)
is enforced by the data layer, not here.
"""

from typing import Dict, Iterable

from pydantic import BaseModel, ConfigDict

from libs.result import Error, Result, Return
from src.domain.entities.enums import Capability, CompanyRole


class RoleDefinition(BaseModel):
    """Human-readable role description plus its capability set"""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    permissions: Dict[Capability, bool]


ROLE_PERMISSIONS: Dict[CompanyRole, RoleDefinition] = {
    CompanyRole.company_admin: RoleDefinition(
        name="Company Admin",
        description="Full access to all company features",
        permissions={
            Capability.manage_company: True,
            Capability.manage_employees: True,
            Capability.manage_leads: True,
            Capability.manage_orders: True,
            Capability.manage_projects: True,
            Capability.manage_tasks: True,
            Capability.manage_roles: True,
            Capability.view_reports: True,
            Capability.delete_data: True,
        },
    ),
    CompanyRole.manager: RoleDefinition(
        name="Manager",
        description="Can manage employees, leads, orders, and projects",
        permissions={
            Capability.manage_company: False,
            Capability.manage_employees: True,
            Capability.manage_leads: True,
            Capability.manage_orders: True,
            Capability.manage_projects: True,
            Capability.manage_tasks: True,
            Capability.manage_roles: False,
            Capability.view_reports: True,
            Capability.delete_data: False,
        },
    ),
    CompanyRole.employee: RoleDefinition(
        name="Employee",
        description="Can view and manage assigned leads, orders, and tasks",
        permissions={
            Capability.manage_company: False,
            Capability.manage_employees: False,
            Capability.manage_leads: True,  # assigned only
            Capability.manage_orders: True,  # assigned only
            Capability.manage_projects: False,
            Capability.manage_tasks: True,  # assigned only
            Capability.manage_roles: False,
            Capability.view_reports: False,
            Capability.delete_data: False,
        },
    ),
    CompanyRole.client: RoleDefinition(
        name="Client",
        description="Can view own orders and send messages",
        permissions={
            Capability.manage_company: False,
            Capability.manage_employees: False,
            Capability.manage_leads: False,
            Capability.manage_orders: False,
            Capability.manage_projects: False,
            Capability.manage_tasks: False,
            Capability.manage_roles: False,
            Capability.view_reports: False,
            Capability.delete_data: False,
        },
    ),
}


def check_capability(role: CompanyRole, capability: Capability) -> bool:
    """Return whether the role grants the capability"""
    return ROLE_PERMISSIONS[CompanyRole(role)].permissions[Capability(capability)]


def require_role(role: CompanyRole, allowed_roles: Iterable[CompanyRole]) -> Result[None]:
    """
    Check a resolved role against an explicit allowed-role set.

    Returns:
        Ok(None) if the role is allowed, FORBIDDEN error otherwise
    """
    allowed = {CompanyRole(r) for r in allowed_roles}
    if role is None or CompanyRole(role) not in allowed:
        return Return.err(
            Error(
                "FORBIDDEN",
                "You don't have permission to perform this action",
                {"required_roles": sorted(r.value for r in allowed)},
            )
        )
    return Return.ok(None)


def describe_roles() -> Dict[str, Dict]:
    """Role table keyed by role value, with capability names as keys"""
    return {
        role.value: {
            "name": definition.name,
            "description": definition.description,
            "permissions": {
                capability.value: allowed
                for capability, allowed in definition.permissions.items()
            },
        }
        for role, definition in ROLE_PERMISSIONS.items()
    }
