"""
JWT Identity Provider

Verifies issuer-signed ID tokens (e.g. Firebase Authentication) with python-jose.
Keys come either from a shared secret (HS256, local development and tests) or
from a JWKS document fetched over HTTPS and cached.
"""

import logging
import time
from typing import Any, Dict, List, Optional

import httpx
from jose import JWTError, jwt

from src.app.services.identity_provider import (
    IdentityProviderError,
    IIdentityProvider,
    InvalidTokenError,
    VerifiedIdentity,
)

logger = logging.getLogger(__name__)


class JwtIdentityProvider(IIdentityProvider):
    """Identity provider adapter backed by signed JWT ID tokens"""

    def __init__(
        self,
        secret: Optional[str] = None,
        algorithms: Optional[List[str]] = None,
        issuer: Optional[str] = None,
        audience: Optional[str] = None,
        jwks_url: Optional[str] = None,
        jwks_cache_seconds: int = 3600,
        timeout_seconds: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.secret = secret
        self.algorithms = algorithms or (["RS256"] if jwks_url else ["HS256"])
        self.issuer = issuer
        self.audience = audience
        self.jwks_url = jwks_url
        self.jwks_cache_seconds = jwks_cache_seconds
        self.timeout_seconds = timeout_seconds
        self.transport = transport

        self._jwks: Optional[Dict[str, Any]] = None
        self._jwks_fetched_at: float = 0.0

    async def verify(self, token: str) -> VerifiedIdentity:
        if not token:
            raise InvalidTokenError("No token provided")

        key = await self._get_verification_key()

        try:
            claims = jwt.decode(
                token,
                key,
                algorithms=self.algorithms,
                audience=self.audience,
                issuer=self.issuer,
                options={"verify_aud": bool(self.audience)},
            )
        except JWTError as exc:
            raise InvalidTokenError(str(exc)) from exc

        subject_id = claims.get("sub") or claims.get("uid")
        email = claims.get("email")
        if not subject_id or not email:
            raise InvalidTokenError("Token is missing subject or email claims")

        return VerifiedIdentity(
            subject_id=str(subject_id),
            email=str(email),
            display_name=claims.get("name"),
        )

    async def _get_verification_key(self) -> Any:
        if self.jwks_url:
            return await self._get_jwks()
        if not self.secret:
            raise IdentityProviderError("Identity provider is not configured")
        return self.secret

    async def _get_jwks(self) -> Dict[str, Any]:
        now = time.monotonic()
        if self._jwks is not None and now - self._jwks_fetched_at < self.jwks_cache_seconds:
            return self._jwks

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self.transport
            ) as client:
                response = await client.get(self.jwks_url)
                response.raise_for_status()
                jwks = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error(f"Failed to fetch signing keys from {self.jwks_url}: {exc}")
            raise IdentityProviderError("Identity provider unavailable") from exc

        if not isinstance(jwks, dict) or not jwks.get("keys"):
            raise IdentityProviderError("Identity provider returned no signing keys")

        self._jwks = jwks
        self._jwks_fetched_at = now
        return jwks
