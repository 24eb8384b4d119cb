"""
Access Use Cases

Caller context resolution shared by every company-scoped operation.
"""

from .authorization import (
    authorize_capability,
    authorize_company_admin,
    authorize_roles,
    require_active_company,
)
from .default_company import suggest_default_company
from .dtos import CallerContext, CallerContextResponse
from .resolve_caller_context_use_case import ResolveCallerContextUseCase
from .select_active_company_use_case import SelectActiveCompanyUseCase

__all__ = [
    "authorize_capability",
    "authorize_company_admin",
    "authorize_roles",
    "require_active_company",
    "CallerContext",
    "CallerContextResponse",
    "ResolveCallerContextUseCase",
    "SelectActiveCompanyUseCase",
    "suggest_default_company",
]
