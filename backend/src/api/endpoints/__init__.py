"""API endpoints package.

This package contains endpoint definitions for the API.
"""

from flask import Flask

from backend.src.api.endpoints.chat import init_chat_routes
from backend.src.api.endpoints.conversations import init_conversation_routes
from backend.src.api.endpoints.documents import init_document_routes
from backend.src.api.endpoints.health import health_bp
from backend.src.api.endpoints.prompts import init_prompt_routes
from backend.src.services import (
    ChatService,
    ConversationStore,
    DocumentStore,
    ModelDispatcher,
    PromptService,
)

API_PREFIX = "/api"


def register_endpoints(
    app: Flask,
    chat_service: ChatService,
    prompt_service: PromptService,
    conversation_store: ConversationStore,
    document_store: DocumentStore,
    dispatcher: ModelDispatcher,
) -> None:
    """Register all API endpoints with the application.

    Args:
        app: Flask application
        chat_service: Service running chat turns
        prompt_service: Service for single-shot generation tasks
        conversation_store: Store holding the conversations
        document_store: Store holding the documents
        dispatcher: Model dispatcher, used for the model catalogue
    """
    app.register_blueprint(health_bp, url_prefix=API_PREFIX)
    app.register_blueprint(init_chat_routes(chat_service), url_prefix=API_PREFIX)
    app.register_blueprint(
        init_conversation_routes(conversation_store), url_prefix=API_PREFIX
    )
    app.register_blueprint(init_document_routes(document_store), url_prefix=API_PREFIX)
    app.register_blueprint(
        init_prompt_routes(prompt_service, dispatcher), url_prefix=API_PREFIX
    )
