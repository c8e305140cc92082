"""Conversation endpoints module.

Listing is scoped to the caller; lookups and deletes go by id.
"""

import logging
from typing import Any, Dict, Tuple

from flask import Blueprint, Response, jsonify

from backend.src.api.middleware.auth import current_user_id, require_auth
from backend.src.api.middleware.exceptions import NotFoundError, ServiceError
from backend.src.services.store import ConversationStore

logger = logging.getLogger(__name__)


def init_conversation_routes(conversation_store: ConversationStore) -> Blueprint:
    """Initialize conversation routes with the provided store.

    Args:
        conversation_store: Store holding the conversations

    Returns:
        Blueprint: Flask blueprint with configured conversation routes.
    """
    conversations_bp = Blueprint("conversations", __name__)

    @conversations_bp.route("/conversations", methods=["GET"])
    @require_auth
    def list_conversations() -> Tuple[Response, int]:
        """Return the caller's conversations, most recent first."""
        user_id = current_user_id()
        try:
            conversations = conversation_store.list_conversations(user_id=user_id)
        except Exception as e:
            logger.error(f"Failed to fetch conversations: {str(e)}")
            raise ServiceError(message="Failed to fetch conversations")

        logger.info(f"Found {len(conversations)} conversations for user {user_id}")
        payload: Dict[str, Any] = {
            "success": True,
            "conversations": [conversation.to_json() for conversation in conversations],
        }
        return jsonify(payload), 200

    @conversations_bp.route("/conversations/<conversation_id>", methods=["GET"])
    @require_auth
    def get_conversation(conversation_id: str) -> Tuple[Response, int]:
        """Return one conversation with its full history."""
        try:
            conversation = conversation_store.get_conversation(conversation_id)
        except Exception as e:
            logger.error(f"Failed to fetch conversation {conversation_id}: {str(e)}")
            raise ServiceError(message="Failed to fetch conversation")

        if conversation is None:
            raise NotFoundError(message="Conversation not found")

        return jsonify({"success": True, "conversation": conversation.to_json()}), 200

    @conversations_bp.route("/conversations/<conversation_id>", methods=["DELETE"])
    @require_auth
    def delete_conversation(conversation_id: str) -> Tuple[Response, int]:
        """Delete a conversation."""
        try:
            deleted = conversation_store.delete_conversation(conversation_id)
        except Exception as e:
            logger.error(f"Failed to delete conversation {conversation_id}: {str(e)}")
            raise ServiceError(message="Failed to delete conversation")

        if not deleted:
            raise NotFoundError(message="Conversation not found")

        return (
            jsonify({"success": True, "message": "Conversation deleted successfully"}),
            200,
        )

    return conversations_bp
