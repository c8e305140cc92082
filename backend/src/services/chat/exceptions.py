"""Exceptions raised by the chat services."""


class ConversationNotFoundError(LookupError):
    """The requested conversation id does not exist."""

    def __init__(self, conversation_id: str):
        self.conversation_id = conversation_id
        super().__init__(f"Conversation not found: {conversation_id}")


class ItineraryGenerationError(RuntimeError):
    """The model reply could not be turned into an itinerary."""
