"""
Admin API Routes - Super Admin Console

Authentication is a regular identity token whose user holds the
super_admin global role with the configured email.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin import (
    CompanyDetailsResponse,
    DeactivateCompanyUseCase,
    DeactivateUserUseCase,
    GetCompanyDetailsUseCase,
    ListCompaniesResponse,
    ListCompaniesUseCase,
    ListUsersResponse,
    ListUsersUseCase,
    ReactivateCompanyUseCase,
    ReactivateUserUseCase,
    SetCompanyActiveResponse,
    SetUserActiveResponse,
)
from src.app.use_cases.auth import AuthenticatedUser
from src.depends import get_unit_of_work, require_super_admin

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/users", status_code=status.HTTP_200_OK, response_model=ListUsersResponse)
async def list_users(
    include_inactive: bool = Query(False, description="Also list deactivated users"),
    admin: AuthenticatedUser = Depends(require_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Users

    Every user with their active memberships, newest first.

    Raises:
        - 403 Forbidden: caller is not the super admin
    """
    result = await ListUsersUseCase(uow).execute(include_inactive=include_inactive)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post(
    "/users/{user_id}/deactivate",
    status_code=status.HTTP_200_OK,
    response_model=SetUserActiveResponse,
)
async def deactivate_user(
    user_id: UUID,
    admin: AuthenticatedUser = Depends(require_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Deactivate User

    A deactivated user is refused at sign-in; memberships are kept.

    Raises:
        - 403 Forbidden: caller is not the super admin
        - 404 Not Found: USER_NOT_FOUND
        - 409 Conflict: SELF_DEACTIVATION_DENIED
        - 500 Internal Server Error: Server error
    """
    use_case = DeactivateUserUseCase(uow)
    result = await use_case.execute(admin, user_id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "SELF_DEACTIVATION_DENIED":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.post(
    "/users/{user_id}/reactivate",
    status_code=status.HTTP_200_OK,
    response_model=SetUserActiveResponse,
)
async def reactivate_user(
    user_id: UUID,
    admin: AuthenticatedUser = Depends(require_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Reactivate User

    Raises:
        - 403 Forbidden: caller is not the super admin
        - 404 Not Found: USER_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = ReactivateUserUseCase(uow)
    result = await use_case.execute(admin, user_id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get("/companies", status_code=status.HTTP_200_OK, response_model=ListCompaniesResponse)
async def list_companies(
    include_inactive: bool = Query(False, description="Also list deactivated companies"),
    admin: AuthenticatedUser = Depends(require_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Companies

    Companies with their creator and active member count, newest first.

    Raises:
        - 403 Forbidden: caller is not the super admin
    """
    result = await ListCompaniesUseCase(uow).execute(include_inactive=include_inactive)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get(
    "/companies/{company_id}",
    status_code=status.HTTP_200_OK,
    response_model=CompanyDetailsResponse,
)
async def get_company_details(
    company_id: UUID,
    admin: AuthenticatedUser = Depends(require_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Company Details

    Raises:
        - 403 Forbidden: caller is not the super admin
        - 404 Not Found: COMPANY_NOT_FOUND
    """
    result = await GetCompanyDetailsUseCase(uow).execute(company_id)

    if result.is_err():
        error = result.error
        if error.code == "COMPANY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.post(
    "/companies/{company_id}/deactivate",
    status_code=status.HTTP_200_OK,
    response_model=SetCompanyActiveResponse,
)
async def deactivate_company(
    company_id: UUID,
    admin: AuthenticatedUser = Depends(require_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Deactivate Company

    Members keep their memberships but lose access to the company.

    Raises:
        - 403 Forbidden: caller is not the super admin
        - 404 Not Found: COMPANY_NOT_FOUND
    """
    result = await DeactivateCompanyUseCase(uow).execute(admin, company_id)

    if result.is_err():
        error = result.error
        if error.code == "COMPANY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.post(
    "/companies/{company_id}/reactivate",
    status_code=status.HTTP_200_OK,
    response_model=SetCompanyActiveResponse,
)
async def reactivate_company(
    company_id: UUID,
    admin: AuthenticatedUser = Depends(require_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Reactivate Company

    Raises:
        - 403 Forbidden: caller is not the super admin
        - 404 Not Found: COMPANY_NOT_FOUND
    """
    result = await ReactivateCompanyUseCase(uow).execute(admin, company_id)

    if result.is_err():
        error = result.error
        if error.code == "COMPANY_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
