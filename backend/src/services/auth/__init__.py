"""Identity services for the auth gate."""

from .identity_service import (
    AnonymousIdentityVerifier,
    AuthenticatedUser,
    BaseIdentityVerifier,
    SupabaseIdentityVerifier,
    extract_bearer_token,
)

__all__ = [
    "AuthenticatedUser",
    "BaseIdentityVerifier",
    "SupabaseIdentityVerifier",
    "AnonymousIdentityVerifier",
    "extract_bearer_token",
]
