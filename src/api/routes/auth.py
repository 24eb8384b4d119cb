from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthenticatedUser,
    GetProfileUseCase,
    UserProfileResponse,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


async def _load_profile(user: AuthenticatedUser, uow: UnitOfWork):
    result = await GetProfileUseCase(uow).execute(user.id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.post("/login", status_code=status.HTTP_200_OK, response_model=UserProfileResponse)
async def login(
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Sign In

    Exchanges a verified identity token for the internal user profile. The
    user is created on first sign-in and the super-admin role is re-derived
    from the configured email on every sign-in.

    Raises:
        - 401 Unauthorized: UNAUTHENTICATED
        - 403 Forbidden: USER_DISABLED
        - 409 Conflict: EMAIL_ALREADY_LINKED
        - 503 Service Unavailable: IDENTITY_UNAVAILABLE
    """
    return await _load_profile(current_user, uow)


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserProfileResponse)
async def get_me(
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Current user with every company membership, inactive ones included"""
    return await _load_profile(current_user, uow)
