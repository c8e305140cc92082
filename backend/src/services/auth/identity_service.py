"""Resolution of bearer credentials into caller identities.

The identity provider itself is external; this module only asks it who a token
belongs to. Without a configured provider every request is attributed to a
fixed anonymous identity so the application stays usable.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from backend.conf.config import Config

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity attached to a request.

    Attributes:
        user_id: Identifier used as the owner of conversations and documents
        email: Email address, when the provider reports one
    """

    user_id: str
    email: Optional[str] = None


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token of a ``Bearer`` authorization header, if any."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


class BaseIdentityVerifier(ABC):
    """Base class for identity verifiers."""

    @abstractmethod
    def resolve(self, authorization: Optional[str]) -> Optional[AuthenticatedUser]:
        """Resolve an Authorization header value into a user.

        Args:
            authorization: Raw header value, None if absent

        Returns:
            The authenticated user, or None if the request stays unauthenticated
        """


class SupabaseIdentityVerifier(BaseIdentityVerifier):
    """Verifies access tokens against the Supabase Auth API."""

    def __init__(
        self,
        supabase_url: str,
        api_key: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize the verifier.

        Args:
            supabase_url: Project URL, e.g. ``https://xyz.supabase.co``
            api_key: Project API key sent as the ``apikey`` header
            timeout: Request timeout in seconds. If None, uses Config default
            session: Pre-built HTTP session, mainly for tests
        """
        self.user_url = f"{supabase_url.rstrip('/')}/auth/v1/user"
        self.api_key = api_key
        self.timeout = timeout if timeout is not None else Config.AUTH_TIMEOUT
        self.session = session or requests.Session()

    def resolve(self, authorization: Optional[str]) -> Optional[AuthenticatedUser]:
        token = extract_bearer_token(authorization)
        if token is None:
            return None

        try:
            response = self.session.get(
                self.user_url,
                headers={"Authorization": f"Bearer {token}", "apikey": self.api_key},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            # Treated as unauthenticated; owner-scoped routes will reject
            logger.error(f"Identity provider request failed: {str(e)}")
            return None

        if response.status_code != 200:
            logger.info(f"Rejected bearer token (HTTP {response.status_code})")
            return None

        try:
            data: Dict[str, Any] = response.json()
        except ValueError:
            logger.error("Identity provider returned a non-JSON user payload")
            return None

        user_id = data.get("id")
        if not user_id:
            return None
        return AuthenticatedUser(user_id=str(user_id), email=data.get("email"))


class AnonymousIdentityVerifier(BaseIdentityVerifier):
    """Attributes every request to one fixed identity."""

    def __init__(self, user_id: Optional[str] = None) -> None:
        self.user = AuthenticatedUser(user_id=user_id or Config.ANONYMOUS_USER_ID)

    def resolve(self, authorization: Optional[str]) -> Optional[AuthenticatedUser]:
        return self.user
