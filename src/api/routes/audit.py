"""
Audit API Routes

Handles audit event retrieval endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access import CallerContext
from src.app.use_cases.audit import AuditEventsResponse, GetAuditEventsUseCase
from src.depends import get_unit_of_work, require_roles
from src.domain.entities import CompanyRole

router = APIRouter(prefix="/audit", tags=["Audit"])


@router.get(
    "/events",
    status_code=status.HTTP_200_OK,
    response_model=AuditEventsResponse,
)
async def get_audit_events(
    context: CallerContext = Depends(require_roles(CompanyRole.company_admin)),
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of events to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor"),
):
    """
    Get Audit Events

    Returns access-control audit logs for the active company.
    Only accessible by company admins.

    Query Parameters:
        - limit: Maximum number of events to return (1-100, default 50)
        - cursor: Pagination cursor for fetching next page

    Raises:
        - 401 Unauthorized: Invalid or expired identity token
        - 403 Forbidden: FORBIDDEN, NOT_A_MEMBER
        - 500 Internal Server Error: Server error
    """
    use_case = GetAuditEventsUseCase(uow)
    result = await use_case.execute(context, limit=limit, cursor=cursor)

    if result.is_err():
        error = result.error
        if error.code == "FORBIDDEN":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        if error.code == "NO_ACTIVE_COMPANY":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
