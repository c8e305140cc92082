"""Flask application for a multi-model chat system with document storage."""

import argparse
import logging
import os
import sys
from typing import Optional

from flask import Flask
from flask_cors import CORS

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from backend.conf.config import Config
from backend.src.api import setup_api
from backend.src.services import (
    BaseIdentityVerifier,
    ConversationStore,
    DocumentStore,
    ModelDispatcher,
    create_chat_service,
    create_dispatcher,
    create_identity_verifier,
    create_prompt_service,
    create_stores,
)

# Logging is configured in backend/__init__.py
logger = logging.getLogger(__name__)


def create_app(
    dispatcher: Optional[ModelDispatcher] = None,
    conversation_store: Optional[ConversationStore] = None,
    document_store: Optional[DocumentStore] = None,
    identity_verifier: Optional[BaseIdentityVerifier] = None,
) -> Flask:
    """Create and configure the Flask application.

    Any collaborator not passed in is built from configuration.

    Args:
        dispatcher: Model dispatcher
        conversation_store: Store for conversations
        document_store: Store for documents
        identity_verifier: Verifier used by the auth gate

    Returns:
        The configured Flask application
    """
    logger.info("Starting application setup...")

    # Create Flask app
    app = Flask(__name__)
    CORS(app)

    # Create services using factory methods
    if dispatcher is None:
        dispatcher = create_dispatcher()

    if conversation_store is None or document_store is None:
        default_conversations, default_documents = create_stores()
        conversation_store = conversation_store or default_conversations
        document_store = document_store or default_documents
    logger.info(
        f"Storage: {type(conversation_store).__name__}, {type(document_store).__name__}"
    )

    if identity_verifier is None:
        identity_verifier = create_identity_verifier()

    chat_service = create_chat_service(dispatcher, conversation_store)
    prompt_service = create_prompt_service(dispatcher)

    # Set up API routes
    logger.info("Setting up API routes")
    setup_api(
        app,
        chat_service,
        prompt_service,
        conversation_store,
        document_store,
        dispatcher,
        identity_verifier,
    )
    logger.info("API routes configured")

    logger.info("Application setup complete")
    return app


def main() -> None:
    """Run the development server."""
    parser = argparse.ArgumentParser(
        description="Run the chat backend (--host, --port, --debug)"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=Config.FLASK_HOST,
        help=f"Interface to bind (default: {Config.FLASK_HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=Config.FLASK_PORT,
        help=f"Port to listen on (default: {Config.FLASK_PORT})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Run Flask in debug mode",
    )

    args = parser.parse_args()

    app = create_app()
    logger.info(f"Serving on {args.host}:{args.port}")
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
