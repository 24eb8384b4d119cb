"""
Access Use Case DTOs (Data Transfer Objects)

Caller context produced once per request and handed to every
company-scoped use case as trusted input.
"""

from typing import Dict, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.entities import Capability, CompanyRole, GlobalRole
from src.domain.role_permissions import check_capability


class CallerContext(BaseModel):
    """
    Resolved (user, company, role) triple for one request.

    Immutable and built only from persisted state, so access decisions
    depend on nothing carried over from earlier requests.
    """

    model_config = ConfigDict(frozen=True)

    user_id: UUID
    email: str
    global_role: GlobalRole
    company_id: Optional[UUID] = None
    role: Optional[CompanyRole] = None

    @property
    def is_super_admin(self) -> bool:
        return self.global_role == GlobalRole.super_admin


class CallerContextResponse(BaseModel):
    """Response for GET /companies/context"""

    user_id: str
    company_id: Optional[str]
    role: Optional[CompanyRole]
    is_super_admin: bool
    permissions: Dict[str, bool]

    @classmethod
    def from_context(cls, context: CallerContext) -> "CallerContextResponse":
        if context.is_super_admin:
            permissions = {capability.value: True for capability in Capability}
        else:
            permissions = {
                capability.value: context.role is not None
                and check_capability(context.role, capability)
                for capability in Capability
            }
        return cls(
            user_id=str(context.user_id),
            company_id=str(context.company_id) if context.company_id else None,
            role=context.role,
            is_super_admin=context.is_super_admin,
            permissions=permissions,
        )
