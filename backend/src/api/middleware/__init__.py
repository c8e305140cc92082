"""Middleware package for API request processing.

This module registers middleware functions for the API.
"""

from flask import Flask

from backend.src.services.auth import BaseIdentityVerifier


def register_middleware(app: Flask, identity_verifier: BaseIdentityVerifier) -> None:
    """Register middleware with the Flask application.

    Args:
        app: Flask application
        identity_verifier: Verifier used by the auth gate
    """
    # Register error handler middleware
    from backend.src.api.middleware.error_handler import register_error_handlers

    register_error_handlers(app)

    # Register auth gate
    from backend.src.api.middleware.auth import register_auth

    register_auth(app, identity_verifier)
