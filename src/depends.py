import logging
from functools import lru_cache
from typing import Optional
from uuid import UUID

from fastapi import Depends, Header, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.jwt_identity_provider import JwtIdentityProvider
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError, access_error
from src.app.services.identity_provider import (
    IdentityProviderError,
    IIdentityProvider,
    InvalidTokenError,
    VerifiedIdentity,
)
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access import (
    CallerContext,
    ResolveCallerContextUseCase,
    authorize_capability,
    authorize_roles,
    require_active_company,
)
from src.app.use_cases.auth import AuthenticatedUser, ResolveIdentityUseCase
from src.domain.entities import Capability, CompanyRole, GlobalRole
from src.domain.super_admin import is_super_admin_email

logger = logging.getLogger(__name__)
security_logger = logging.getLogger("security")

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session, ApplicationConfig.SUPER_ADMIN_EMAIL)


@lru_cache(maxsize=1)
def get_identity_provider() -> IIdentityProvider:
    return JwtIdentityProvider(
        secret=ApplicationConfig.IDENTITY_TOKEN_SECRET,
        algorithms=ApplicationConfig.IDENTITY_TOKEN_ALGORITHMS,
        issuer=ApplicationConfig.IDENTITY_ISSUER,
        audience=ApplicationConfig.IDENTITY_AUDIENCE,
        jwks_url=ApplicationConfig.IDENTITY_JWKS_URL,
        jwks_cache_seconds=ApplicationConfig.IDENTITY_JWKS_CACHE_SECONDS,
        timeout_seconds=ApplicationConfig.IDENTITY_TIMEOUT_SECONDS,
    )


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    if credentials is None or not credentials.credentials:
        raise ClientError(
            Error("UNAUTHENTICATED", "Please sign in again to continue"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return credentials.credentials


async def get_verified_identity(
    token: str = Depends(get_bearer_token),
    identity_provider: IIdentityProvider = Depends(get_identity_provider),
) -> VerifiedIdentity:
    """
    Verify the bearer ID token with the identity provider.

    Raises:
        ClientError: 401 if the token is rejected, 503 if the provider is unavailable
    """
    try:
        return await identity_provider.verify(token)
    except InvalidTokenError as exc:
        logger.info(f"Rejected identity token: {exc}")
        raise ClientError(
            Error("UNAUTHENTICATED", "Please sign in again to continue"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    except IdentityProviderError as exc:
        logger.error(f"Identity provider failure: {exc}")
        raise ClientError(
            Error(
                "IDENTITY_UNAVAILABLE",
                "Sign-in is temporarily unavailable, please try again",
            ),
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )


async def get_current_user(
    identity: VerifiedIdentity = Depends(get_verified_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> AuthenticatedUser:
    """Resolve (or create) the internal user behind the verified identity"""
    result = await ResolveIdentityUseCase(
        uow, ApplicationConfig.SUPER_ADMIN_EMAIL
    ).execute(identity)
    if result.is_err():
        raise access_error(result.error)
    return result.value


def get_requested_company_id(
    x_company_id: Optional[str] = Header(None),
    company_id: Optional[str] = Query(None, alias="companyId"),
) -> Optional[UUID]:
    """Company selected by the client: X-Company-Id header, else companyId query"""
    raw = x_company_id or company_id
    if not raw:
        return None
    try:
        return UUID(raw)
    except ValueError:
        raise ClientError(
            Error("INVALID_COMPANY_ID", "Invalid company ID format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


async def get_caller_context(
    token: str = Depends(get_bearer_token),
    company_id: Optional[UUID] = Depends(get_requested_company_id),
    identity_provider: IIdentityProvider = Depends(get_identity_provider),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> CallerContext:
    """
    Resolve who is calling, in which company and with which role.

    Raises:
        ClientError: UNAUTHENTICATED, IDENTITY_UNAVAILABLE, USER_DISABLED,
            NO_ACTIVE_COMPANY or NOT_A_MEMBER
    """
    result = await ResolveCallerContextUseCase(
        uow, identity_provider, ApplicationConfig.SUPER_ADMIN_EMAIL
    ).execute(token, company_id)
    if result.is_err():
        raise access_error(result.error)
    return result.value


async def get_company_context(
    context: CallerContext = Depends(get_caller_context),
) -> CallerContext:
    """Caller context that is guaranteed to carry a company"""
    result = require_active_company(context)
    if result.is_err():
        raise access_error(result.error)
    return context


def require_roles(*roles: CompanyRole):
    """Dependency factory: caller's role in the active company must be one of roles"""

    async def dependency(
        context: CallerContext = Depends(get_company_context),
    ) -> CallerContext:
        result = authorize_roles(context, roles)
        if result.is_err():
            raise access_error(result.error)
        return context

    return dependency


def require_capability(capability: Capability):
    """Dependency factory: caller's role in the active company must grant capability"""

    async def dependency(
        context: CallerContext = Depends(get_company_context),
    ) -> CallerContext:
        result = authorize_capability(context, capability)
        if result.is_err():
            raise access_error(result.error)
        return context

    return dependency


async def require_super_admin(
    user: AuthenticatedUser = Depends(get_current_user),
) -> AuthenticatedUser:
    """
    Super-admin only routes.

    The stored global role and the configured email must both match.
    """
    email_matches = is_super_admin_email(user.email, ApplicationConfig.SUPER_ADMIN_EMAIL)
    if user.global_role == GlobalRole.super_admin and email_matches:
        return user

    if user.global_role == GlobalRole.super_admin:
        security_logger.error(
            f"SECURITY ALERT: user {user.id} ({user.email}) holds super_admin "
            f"without the configured email"
        )
    raise ClientError(
        Error("FORBIDDEN", "Super admin access required"),
        status_code=status.HTTP_403_FORBIDDEN,
    )
