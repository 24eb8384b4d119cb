"""
Company Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from src.domain.entities import CompanyRole


class CompanyInfo(BaseModel):
    id: str
    name: str
    domain: Optional[str]
    role: CompanyRole
    joined_at: Optional[datetime] = None


class CreateCompanyResponse(BaseModel):
    """Response for create company use case"""

    company: CompanyInfo


class ListMyCompaniesResponse(BaseModel):
    """Response for list my companies use case"""

    companies: List[CompanyInfo]
    default_company_id: Optional[str]


class SwitchCompanyResponse(BaseModel):
    """Response for switch company use case"""

    company: CompanyInfo


class CompanySettingsResponse(BaseModel):
    """Response for company settings read and update"""

    company: Dict[str, Any]
    notifications: Dict[str, Any]
    features: Dict[str, Any]
    preferences: Dict[str, Any]
