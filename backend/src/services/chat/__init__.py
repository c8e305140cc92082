"""Chat and prompt services built on the model dispatcher."""

from .chat_service import ChatResult, ChatService, build_chat_messages
from .exceptions import ConversationNotFoundError, ItineraryGenerationError
from .prompt_service import PromptService

__all__ = [
    "ChatResult",
    "ChatService",
    "build_chat_messages",
    "PromptService",
    "ConversationNotFoundError",
    "ItineraryGenerationError",
]
