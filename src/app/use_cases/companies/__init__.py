"""
Company Use Cases

Company creation, the caller's company list, switching and settings.
"""

from .company_settings_use_case import (
    DEFAULT_SETTINGS,
    GetCompanySettingsUseCase,
    UpdateCompanySettingsUseCase,
)
from .create_company_use_case import CreateCompanyUseCase
from .dtos import (
    CompanyInfo,
    CompanySettingsResponse,
    CreateCompanyResponse,
    ListMyCompaniesResponse,
    SwitchCompanyResponse,
)
from .list_my_companies_use_case import ListMyCompaniesUseCase
from .switch_company_use_case import SwitchCompanyUseCase

__all__ = [
    "CreateCompanyUseCase",
    "ListMyCompaniesUseCase",
    "SwitchCompanyUseCase",
    "GetCompanySettingsUseCase",
    "UpdateCompanySettingsUseCase",
    "DEFAULT_SETTINGS",
    "CompanyInfo",
    "CompanySettingsResponse",
    "CreateCompanyResponse",
    "ListMyCompaniesResponse",
    "SwitchCompanyResponse",
]
