"""Conversation records: running chat history with a selected model."""

import secrets
import string
import time
from datetime import datetime
from enum import Enum
from typing import List, Literal, Optional

from pydantic import Field

from backend.src.data_classes.ai_model import AIModel
from backend.src.data_classes.base import CamelModel

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_SUFFIX_LENGTH = 9


class ConversationStep(str, Enum):
    """Informational conversation state."""

    CHATTING = "chatting"
    COMPLETED = "completed"


class HistoryEntry(CamelModel):
    """One turn of a conversation."""

    role: Literal["user", "assistant"]
    content: str
    model: Optional[AIModel] = None


class Conversation(CamelModel):
    """A conversation with its full message history.

    Attributes:
        id: Opaque identifier, ``conv_<epoch millis>_<random suffix>``
        current_step: Informational state, not used to gate behaviour
        initial_description: First message of the conversation
        selected_model: Model used for the next reply
        conversation_history: Ordered user/assistant turns
        user_id: Owner, None for unowned conversations
        created_at: Set by the store on first save
        updated_at: Refreshed by the store on every save
    """

    id: str
    current_step: ConversationStep = ConversationStep.CHATTING
    initial_description: str
    selected_model: AIModel = AIModel.GPT_4O
    conversation_history: List[HistoryEntry] = Field(default_factory=list)
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


def new_conversation_id() -> str:
    """Generate a conversation id from the current time and a random suffix."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_SUFFIX_LENGTH))
    return f"conv_{int(time.time() * 1000)}_{suffix}"


def conversation_id_timestamp(conversation_id: str) -> int:
    """Extract the millisecond timestamp embedded in a conversation id.

    Returns 0 for ids that do not follow the generated format.
    """
    parts = conversation_id.split("_")
    if len(parts) < 2:
        return 0
    try:
        return int(parts[1])
    except ValueError:
        return 0
