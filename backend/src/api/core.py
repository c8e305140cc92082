"""Core API setup and configuration.

This module configures API middleware, error handling, and other global API components.
"""

import logging

from flask import Flask

from backend.src.api.endpoints import register_endpoints
from backend.src.api.middleware import register_middleware
from backend.src.services import (
    BaseIdentityVerifier,
    ChatService,
    ConversationStore,
    DocumentStore,
    ModelDispatcher,
    PromptService,
)

logger = logging.getLogger(__name__)


def setup_api(
    app: Flask,
    chat_service: ChatService,
    prompt_service: PromptService,
    conversation_store: ConversationStore,
    document_store: DocumentStore,
    dispatcher: ModelDispatcher,
    identity_verifier: BaseIdentityVerifier,
) -> None:
    """Set up API with middleware and endpoints.

    Args:
        app: Flask application
        chat_service: Service running chat turns
        prompt_service: Service for single-shot generation tasks
        conversation_store: Store holding the conversations
        document_store: Store holding the documents
        dispatcher: Model dispatcher
        identity_verifier: Verifier used by the auth gate
    """
    # Validation failures are rendered by the central error handler
    app.config["FLASK_PYDANTIC_VALIDATION_ERROR_RAISE"] = True

    # Register middleware
    register_middleware(app, identity_verifier)

    # Register endpoints
    register_endpoints(
        app,
        chat_service,
        prompt_service,
        conversation_store,
        document_store,
        dispatcher,
    )
