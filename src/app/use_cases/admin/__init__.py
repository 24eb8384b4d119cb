"""Admin use cases for the super-admin console."""

from .dtos import (
    CompanyDetailsResponse,
    ListCompaniesResponse,
    ListUsersResponse,
    SetCompanyActiveResponse,
    SetUserActiveResponse,
)
from .get_company_details_use_case import GetCompanyDetailsUseCase
from .list_companies_use_case import ListCompaniesUseCase
from .list_users_use_case import ListUsersUseCase
from .set_company_active_use_case import DeactivateCompanyUseCase, ReactivateCompanyUseCase
from .set_user_active_use_case import DeactivateUserUseCase, ReactivateUserUseCase

__all__ = [
    "ListUsersUseCase",
    "ListCompaniesUseCase",
    "GetCompanyDetailsUseCase",
    "DeactivateUserUseCase",
    "ReactivateUserUseCase",
    "DeactivateCompanyUseCase",
    "ReactivateCompanyUseCase",
    "ListUsersResponse",
    "ListCompaniesResponse",
    "CompanyDetailsResponse",
    "SetUserActiveResponse",
    "SetCompanyActiveResponse",
]
