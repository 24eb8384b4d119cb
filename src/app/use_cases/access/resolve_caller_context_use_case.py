"""
Resolve Caller Context Use Case

Token -> identity -> user -> (company, role), run on every
company-scoped request.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.identity_provider import (
    IdentityProviderError,
    IIdentityProvider,
    InvalidTokenError,
)
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.resolve_identity_use_case import ResolveIdentityUseCase

from .dtos import CallerContext
from .select_active_company_use_case import SelectActiveCompanyUseCase

logger = logging.getLogger(__name__)


class ResolveCallerContextUseCase:
    """
    Use case composing identity verification, identity resolution and
    active-company selection.

    Business Rules:
    - Rejected token: UNAUTHENTICATED (never retried here)
    - Provider failure: IDENTITY_UNAVAILABLE (caller may retry / re-authenticate)
    - Identity and selector errors are passed through unchanged
    """

    def __init__(
        self,
        uow: UnitOfWork,
        identity_provider: IIdentityProvider,
        super_admin_email: Optional[str],
    ):
        self.uow = uow
        self.identity_provider = identity_provider
        self.super_admin_email = super_admin_email

    async def execute(
        self, token: Optional[str], company_id: Optional[UUID]
    ) -> Result[CallerContext]:
        try:
            identity = await self.identity_provider.verify(token or "")
        except InvalidTokenError as exc:
            logger.info(f"Rejected identity token: {exc}")
            return Return.err(
                Error("UNAUTHENTICATED", "Please sign in again to continue")
            )
        except IdentityProviderError as exc:
            logger.error(f"Identity provider failure: {exc}")
            return Return.err(
                Error(
                    "IDENTITY_UNAVAILABLE",
                    "Sign-in is temporarily unavailable, please try again",
                )
            )

        user_result = await ResolveIdentityUseCase(
            self.uow, self.super_admin_email
        ).execute(identity)
        if user_result.is_err():
            return user_result

        return await SelectActiveCompanyUseCase(self.uow).execute(
            user_result.value, company_id
        )
