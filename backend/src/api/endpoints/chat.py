"""Chat endpoints module.

This module provides the Flask route that sends a user message to the selected
model and records the turn in the caller's conversation.
"""

import logging
from typing import Optional, Tuple

from flask import Blueprint, Response, jsonify
from flask_pydantic import validate  # type: ignore
from pydantic import BaseModel, Field, field_validator

from backend.src.api.middleware.auth import current_user_id, require_auth
from backend.src.api.middleware.exceptions import (
    ModelUnavailableError,
    NotFoundError,
    ServiceError,
)
from backend.src.data_classes import AIModel
from backend.src.services.chat import ChatService, ConversationNotFoundError
from backend.src.services.llm import ModelConfigurationError, ModelResponseError

logger = logging.getLogger(__name__)


# Schema definitions
class ChatRequest(BaseModel):
    """Chat request model for validation."""

    message: str = Field(..., description="User's message")
    conversationId: Optional[str] = Field(
        None, description="Conversation to continue, omitted to start a new one"
    )
    model: Optional[AIModel] = Field(None, description="Model to answer with")

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        if not v:
            raise ValueError("Please provide a message")
        return v


class ChatResponseModel(BaseModel):
    """Chat response model."""

    success: bool = Field(True, description="Always true for successful replies")
    response: str = Field(..., description="Generated response text")
    conversationId: str = Field(..., description="Conversation the turn was added to")
    model: AIModel = Field(..., description="Model that produced the reply")
    persisted: bool = Field(
        True, description="Whether the conversation history was saved"
    )


def init_chat_routes(chat_service: ChatService) -> Blueprint:
    """Initialize chat routes with the provided services.

    Args:
        chat_service: Service running chat turns

    Returns:
        Blueprint: Flask blueprint with configured chat routes.
    """
    chat_bp = Blueprint("chat", __name__)

    @chat_bp.route("/chat", methods=["POST"])
    @require_auth
    @validate()
    def chat(body: ChatRequest) -> Tuple[Response, int]:
        """Generate a reply to the user's message.

        Args:
            body: Validated request body

        Returns:
            Response with the reply and the conversation id
        """
        logger.info(
            f"Processing chat request (conversation={body.conversationId}, model={body.model})"
        )

        try:
            result = chat_service.process_message(
                message=body.message,
                conversation_id=body.conversationId,
                model=body.model,
                user_id=current_user_id(),
            )
        except ConversationNotFoundError:
            raise NotFoundError(message="Conversation not found")
        except ModelConfigurationError as e:
            raise ModelUnavailableError(message=str(e))
        except ModelResponseError as e:
            raise ServiceError(message=str(e))
        except Exception as e:
            logger.error(f"Failed to process chat: {str(e)}")
            raise ServiceError(message="Failed to process message", details=str(e))

        response = ChatResponseModel(
            response=result.response,
            conversationId=result.conversation_id,
            model=result.model,
            persisted=result.persisted,
        )
        return jsonify(response.model_dump(mode="json")), 200

    return chat_bp
