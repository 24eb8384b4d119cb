"""
Join Request Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import CompanyRole, JoinRequestStatus


class JoinRequestResponse(BaseModel):
    """Response for request join use case"""

    request_id: str
    company_id: str
    company_name: str
    requested_role: CompanyRole
    status: JoinRequestStatus
    requested_at: Optional[datetime]


class PendingJoinRequestInfo(BaseModel):
    request_id: str
    user_id: str
    name: str
    email: str
    requested_role: CompanyRole
    requested_at: Optional[datetime]


class ListPendingJoinRequestsResponse(BaseModel):
    """Response for list pending join requests use case"""

    requests: List[PendingJoinRequestInfo]


class HandleJoinRequestResponse(BaseModel):
    """Response for handle join request use case"""

    status: JoinRequestStatus
    user_id: str
    role: Optional[CompanyRole] = None
