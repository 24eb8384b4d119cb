"""
Identity provider port

Token verification is delegated to an external identity provider (Firebase
Authentication in production). The access core only sees the verified
subject, email and display name.
"""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class VerifiedIdentity(BaseModel):
    """Identity asserted by a successfully verified token"""

    subject_id: str
    email: str
    display_name: Optional[str] = None


class InvalidTokenError(Exception):
    """Token is missing, malformed, expired or signed by the wrong issuer"""


class IdentityProviderError(Exception):
    """The provider could not verify the token at all (outage, timeout, misconfiguration)"""


class IIdentityProvider(ABC):
    @abstractmethod
    async def verify(self, token: str) -> VerifiedIdentity:
        """
        Verify an issuer-signed token.

        Raises:
            InvalidTokenError: token rejected
            IdentityProviderError: verification could not be performed
        """
        pass
