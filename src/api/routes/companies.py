from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from libs.result import Error
from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access import CallerContext, CallerContextResponse
from src.app.use_cases.auth import AuthenticatedUser
from src.app.use_cases.companies import (
    CompanySettingsResponse,
    CreateCompanyResponse,
    CreateCompanyUseCase,
    GetCompanySettingsUseCase,
    ListMyCompaniesResponse,
    ListMyCompaniesUseCase,
    SwitchCompanyResponse,
    SwitchCompanyUseCase,
    UpdateCompanySettingsUseCase,
)
from src.app.use_cases.join_requests import (
    HandleJoinRequestResponse,
    HandleJoinRequestUseCase,
    JoinRequestResponse,
    ListPendingJoinRequestsResponse,
    ListPendingJoinRequestsUseCase,
    RequestJoinUseCase,
)
from src.app.use_cases.members import (
    GetMemberProfileUseCase,
    GetRolesAndPermissionsUseCase,
    ListMembersResponse,
    ListMembersUseCase,
    MemberProfileResponse,
    RemoveMemberResponse,
    RemoveMemberUseCase,
    RolesAndPermissionsResponse,
    UpdateRoleResponse,
    UpdateRoleUseCase,
)
from src.depends import (
    get_company_context,
    get_current_user,
    get_unit_of_work,
    require_capability,
)
from src.domain.entities import Capability

router = APIRouter(prefix="/companies", tags=["Companies"])


def _parse_uuid(value: str, code: str, label: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        raise ClientError(
            Error(code, f"Invalid {label} format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


# ============================================================================
# Caller's own companies
# ============================================================================


class CreateCompanyRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Company name")
    domain: Optional[str] = Field(None, max_length=255, description="Company domain")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreateCompanyResponse)
async def create_company(
    request: CreateCompanyRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Company

    The creator becomes the company's first company_admin.

    Raises:
        - 400 Bad Request: INVALID_COMPANY_NAME
        - 409 Conflict: COMPANY_NAME_TAKEN
    """
    use_case = CreateCompanyUseCase(uow)
    result = await use_case.execute(current_user.id, request.name, request.domain)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_COMPANY_NAME":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "COMPANY_NAME_TAKEN":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.get("/mine", status_code=status.HTTP_200_OK, response_model=ListMyCompaniesResponse)
async def list_my_companies(
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Companies the caller is an active member of, with a suggested default"""
    result = await ListMyCompaniesUseCase(uow).execute(current_user)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class SwitchCompanyRequest(BaseModel):
    company_id: str = Field(..., description="Target company ID to switch to")


@router.post("/switch", status_code=status.HTTP_200_OK, response_model=SwitchCompanyResponse)
async def switch_company(
    request: SwitchCompanyRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Switch Active Company

    Remembers the company for the next session. Requests still have to name
    the company they act in.

    Raises:
        - 400 Bad Request: INVALID_COMPANY_ID
        - 403 Forbidden: NOT_A_MEMBER, COMPANY_INACTIVE
        - 404 Not Found: COMPANY_NOT_FOUND
    """
    company_id = _parse_uuid(request.company_id, "INVALID_COMPANY_ID", "company ID")

    use_case = SwitchCompanyUseCase(uow)
    result = await use_case.execute(current_user, company_id)

    if result.is_err():
        error = result.error
        if error.code in ("NOT_A_MEMBER", "COMPANY_INACTIVE"):
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code in ("COMPANY_NOT_FOUND", "USER_NOT_FOUND"):
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class JoinCompanyRequest(BaseModel):
    company_id: str = Field(..., description="Company to join")
    role: str = Field(..., description="Requested role (manager/employee/client)")


@router.post("/join", status_code=status.HTTP_201_CREATED, response_model=JoinRequestResponse)
async def request_join(
    request: JoinCompanyRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Request to Join a Company

    Creates a pending request; no access is granted until an admin approves.

    Raises:
        - 400 Bad Request: INVALID_COMPANY_ID, INVALID_ROLE
        - 404 Not Found: COMPANY_NOT_FOUND
        - 409 Conflict: ALREADY_MEMBER, JOIN_REQUEST_PENDING
    """
    company_id = _parse_uuid(request.company_id, "INVALID_COMPANY_ID", "company ID")

    use_case = RequestJoinUseCase(uow)
    result = await use_case.execute(current_user.id, company_id, request.role)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_ROLE":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "COMPANY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code in ("ALREADY_MEMBER", "JOIN_REQUEST_PENDING"):
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


# ============================================================================
# Active company
# ============================================================================


@router.get("/context", status_code=status.HTTP_200_OK, response_model=CallerContextResponse)
async def get_context(context: CallerContext = Depends(get_company_context)):
    """Caller's role in the active company and what it allows"""
    return CallerContextResponse.from_context(context)


@router.get("/members", status_code=status.HTTP_200_OK, response_model=ListMembersResponse)
async def list_members(
    context: CallerContext = Depends(get_company_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Active members of the active company"""
    result = await ListMembersUseCase(uow).execute(context.company_id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get(
    "/members/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=MemberProfileResponse,
)
async def get_member_profile(
    user_id: UUID,
    context: CallerContext = Depends(require_capability(Capability.manage_employees)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Member Profile

    Raises:
        - 403 Forbidden: role lacks manageEmployees
        - 404 Not Found: MEMBERSHIP_NOT_FOUND
    """
    result = await GetMemberProfileUseCase(uow).execute(context, user_id)

    if result.is_err():
        error = result.error
        if error.code == "MEMBERSHIP_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get("/roles", status_code=status.HTTP_200_OK, response_model=RolesAndPermissionsResponse)
async def get_roles_and_permissions(
    context: CallerContext = Depends(get_company_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Roles and Permissions

    Role table plus the active members, company_admin only.

    Raises:
        - 403 Forbidden: FORBIDDEN
    """
    result = await GetRolesAndPermissionsUseCase(uow).execute(context)

    if result.is_err():
        error = result.error
        if error.code == "FORBIDDEN":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return result.value


class UpdateRoleRequest(BaseModel):
    role: str = Field(..., description="New role (company_admin/manager/employee/client)")


@router.put(
    "/roles/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=UpdateRoleResponse,
)
async def update_member_role(
    user_id: UUID,
    request: UpdateRoleRequest,
    context: CallerContext = Depends(get_company_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change Member Role

    Raises:
        - 400 Bad Request: INVALID_ROLE
        - 403 Forbidden: FORBIDDEN
        - 404 Not Found: MEMBERSHIP_NOT_FOUND
        - 409 Conflict: SELF_MODIFICATION_DENIED
    """
    use_case = UpdateRoleUseCase(uow)
    result = await use_case.execute(context, user_id, request.role)

    if result.is_err():
        error = result.error
        if error.code == "SELF_MODIFICATION_DENIED":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        elif error.code == "FORBIDDEN":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "INVALID_ROLE":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "MEMBERSHIP_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.delete(
    "/roles/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=RemoveMemberResponse,
)
async def remove_member(
    user_id: UUID,
    context: CallerContext = Depends(get_company_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove Member

    Soft delete: the membership is deactivated and kept for history.

    Raises:
        - 403 Forbidden: FORBIDDEN
        - 404 Not Found: MEMBERSHIP_NOT_FOUND
        - 409 Conflict: SELF_REMOVAL_DENIED
    """
    use_case = RemoveMemberUseCase(uow)
    result = await use_case.execute(context, user_id)

    if result.is_err():
        error = result.error
        if error.code == "SELF_REMOVAL_DENIED":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        elif error.code == "FORBIDDEN":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "MEMBERSHIP_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get(
    "/join-requests",
    status_code=status.HTTP_200_OK,
    response_model=ListPendingJoinRequestsResponse,
)
async def list_join_requests(
    context: CallerContext = Depends(get_company_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Pending join requests of the active company, company_admin only"""
    result = await ListPendingJoinRequestsUseCase(uow).execute(context)

    if result.is_err():
        error = result.error
        if error.code == "FORBIDDEN":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return result.value


class HandleJoinRequestRequest(BaseModel):
    user_id: str = Field(..., description="User whose request is decided")
    action: str = Field(..., description="approve or reject")


@router.post(
    "/join-requests/handle",
    status_code=status.HTTP_200_OK,
    response_model=HandleJoinRequestResponse,
)
async def handle_join_request(
    request: HandleJoinRequestRequest,
    context: CallerContext = Depends(get_company_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Approve or Reject a Join Request

    Raises:
        - 400 Bad Request: INVALID_USER_ID, INVALID_ACTION
        - 403 Forbidden: FORBIDDEN
        - 404 Not Found: JOIN_REQUEST_NOT_FOUND
        - 409 Conflict: REQUEST_ALREADY_HANDLED, ALREADY_MEMBER
    """
    target_user_id = _parse_uuid(request.user_id, "INVALID_USER_ID", "user ID")

    use_case = HandleJoinRequestUseCase(uow)
    result = await use_case.execute(context, target_user_id, request.action)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_ACTION":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "FORBIDDEN":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "JOIN_REQUEST_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code in ("REQUEST_ALREADY_HANDLED", "ALREADY_MEMBER"):
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.get("/settings", status_code=status.HTTP_200_OK, response_model=CompanySettingsResponse)
async def get_settings(
    context: CallerContext = Depends(get_company_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Company settings, company_admin only"""
    result = await GetCompanySettingsUseCase(uow).execute(context)

    if result.is_err():
        error = result.error
        if error.code == "FORBIDDEN":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "COMPANY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class UpdateSettingsRequest(BaseModel):
    notifications: Optional[Dict[str, Any]] = None
    features: Optional[Dict[str, Any]] = None
    preferences: Optional[Dict[str, Any]] = None


@router.put("/settings", status_code=status.HTTP_200_OK, response_model=CompanySettingsResponse)
async def update_settings(
    request: UpdateSettingsRequest,
    context: CallerContext = Depends(get_company_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Company Settings

    Sections omitted from the body keep their current values.

    Raises:
        - 403 Forbidden: FORBIDDEN
        - 404 Not Found: COMPANY_NOT_FOUND
    """
    use_case = UpdateCompanySettingsUseCase(uow)
    result = await use_case.execute(
        context,
        notifications=request.notifications,
        features=request.features,
        preferences=request.preferences,
    )

    if result.is_err():
        error = result.error
        if error.code == "FORBIDDEN":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "COMPANY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
