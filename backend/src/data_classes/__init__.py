"""Data classes shared by the services and the API.

Classes:
    - Conversation, HistoryEntry, ConversationStep: chat conversations
    - Document: user documents
    - ChatMessage, Role: provider-agnostic messages
    - AIModel, Provider, ModelRoute: model catalogue
    - TripItinerary, TripDay, TripActivity: generated itineraries
"""

from backend.src.data_classes.ai_model import (
    AIModel,
    ModelRoute,
    Provider,
    provider_for,
    resolve_model,
)
from backend.src.data_classes.base import CamelModel, next_timestamp, utc_now
from backend.src.data_classes.chat_message import ChatMessage, Role
from backend.src.data_classes.conversation import (
    Conversation,
    ConversationStep,
    HistoryEntry,
    new_conversation_id,
)
from backend.src.data_classes.document import Document
from backend.src.data_classes.itinerary import TripActivity, TripDay, TripItinerary

__all__ = [
    "AIModel",
    "Provider",
    "ModelRoute",
    "provider_for",
    "resolve_model",
    "CamelModel",
    "next_timestamp",
    "utc_now",
    "ChatMessage",
    "Role",
    "Conversation",
    "ConversationStep",
    "HistoryEntry",
    "new_conversation_id",
    "Document",
    "TripActivity",
    "TripDay",
    "TripItinerary",
]
