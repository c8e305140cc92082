"""Auth gate middleware.

The caller identity is resolved on first use and cached on ``flask.g``, so
routes that never ask for it make no call to the identity provider.
Owner-scoped views are wrapped in ``require_auth``, which rejects requests
without an identity.
"""

import logging
from functools import wraps
from typing import Any, Callable, Optional, TypeVar, cast

from flask import Flask, current_app, g, request

from backend.src.api.middleware.exceptions import AuthenticationError
from backend.src.services.auth import AuthenticatedUser, BaseIdentityVerifier

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

EXTENSION_KEY = "identity_verifier"


def register_auth(app: Flask, identity_verifier: BaseIdentityVerifier) -> None:
    """Attach the identity verifier used to resolve request identities.

    Args:
        app: Flask application
        identity_verifier: Verifier turning Authorization headers into users
    """
    app.extensions[EXTENSION_KEY] = identity_verifier


def get_current_user() -> Optional[AuthenticatedUser]:
    """Return the identity of the current request, resolving it once."""
    if "auth" not in g:
        verifier: BaseIdentityVerifier = current_app.extensions[EXTENSION_KEY]
        g.auth = verifier.resolve(request.headers.get("Authorization"))
    return g.auth


def require_auth(view: F) -> F:
    """Reject the request with 401 unless a caller identity was resolved."""

    @wraps(view)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if get_current_user() is None:
            raise AuthenticationError()
        return view(*args, **kwargs)

    return cast(F, wrapper)


def current_user_id() -> str:
    """Return the caller's user id inside a ``require_auth`` view."""
    user = get_current_user()
    if user is None:
        raise AuthenticationError()
    return user.user_id
