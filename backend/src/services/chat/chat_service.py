"""Service that runs a chat turn against a stored conversation.

A turn loads (or creates) the conversation, asks the dispatcher for a reply to
the full history plus the new message, appends the user and assistant entries
and saves the conversation once.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from backend.conf.config import Config
from backend.conf.prompts import CHAT_SYSTEM_PROMPT
from backend.src.data_classes import (
    AIModel,
    ChatMessage,
    Conversation,
    HistoryEntry,
    Role,
    new_conversation_id,
)
from backend.src.services.chat.exceptions import ConversationNotFoundError
from backend.src.services.llm.dispatcher import ModelDispatcher
from backend.src.services.store.base import ConversationStore

logger = logging.getLogger(__name__)


@dataclass
class ChatResult:
    """Outcome of a chat turn.

    Attributes:
        response: Assistant reply text
        conversation_id: Id of the conversation the turn was added to
        model: Logical model that produced the reply
        persisted: Whether the updated conversation was saved
    """

    response: str
    conversation_id: str
    model: AIModel
    persisted: bool = True


def build_chat_messages(
    history: List[HistoryEntry], message: str, system_prompt: str = CHAT_SYSTEM_PROMPT
) -> List[ChatMessage]:
    """Build the dispatcher input for a new user message.

    Args:
        history: Stored conversation turns, oldest first
        message: The new user message
        system_prompt: Leading system instructions

    Returns:
        System message, previous turns and the new user message
    """
    messages = [ChatMessage(role=Role.SYSTEM, content=system_prompt)]
    messages.extend(
        ChatMessage(role=Role(entry.role), content=entry.content) for entry in history
    )
    messages.append(ChatMessage(role=Role.USER, content=message))
    return messages


class ChatService:
    """Runs chat turns and keeps conversation history up to date."""

    def __init__(
        self, dispatcher: ModelDispatcher, conversation_store: ConversationStore
    ) -> None:
        self.dispatcher = dispatcher
        self.conversation_store = conversation_store

    def process_message(
        self,
        message: str,
        conversation_id: Optional[str] = None,
        model: Optional[AIModel] = None,
        user_id: Optional[str] = None,
    ) -> ChatResult:
        """Generate a reply to a message and record the turn.

        Args:
            message: The user's message
            conversation_id: Existing conversation to continue, None to start one
            model: Model to use; None keeps the conversation's selected model
            user_id: Owner assigned to newly created conversations

        Returns:
            ChatResult with the reply; ``persisted`` is False if saving failed

        Raises:
            ConversationNotFoundError: If ``conversation_id`` is unknown
            ModelConfigurationError: If the model's provider is not configured
            ModelResponseError: If the provider call fails
        """
        if conversation_id:
            conversation = self.conversation_store.get_conversation(conversation_id)
            if conversation is None:
                raise ConversationNotFoundError(conversation_id)
        else:
            conversation = Conversation(
                id=new_conversation_id(),
                initial_description=message,
                selected_model=AIModel(model or Config.DEFAULT_MODEL),
                user_id=user_id,
            )
            logger.info(f"Starting conversation {conversation.id}")

        if model:
            conversation.selected_model = AIModel(model)

        history = list(conversation.conversation_history)
        reply = self.dispatcher.dispatch(
            build_chat_messages(history, message), conversation.selected_model
        )

        conversation.conversation_history = history + [
            HistoryEntry(role="user", content=message, model=conversation.selected_model),
            HistoryEntry(role="assistant", content=reply.text, model=reply.model_used),
        ]

        persisted = True
        try:
            self.conversation_store.save_conversation(conversation)
        except Exception as e:
            # Log but don't fail the response if history storage fails
            logger.warning(f"Failed to store conversation {conversation.id}: {str(e)}")
            persisted = False

        return ChatResult(
            response=reply.text,
            conversation_id=conversation.id,
            model=reply.model_used,
            persisted=persisted,
        )
