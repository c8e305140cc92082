"""Single-shot prompt features: prompt enhancement and trip itineraries."""

import json
import logging
import re
from typing import Any, Optional

from pydantic import ValidationError

from backend.conf.config import Config
from backend.conf.prompts import (
    ITINERARY_SYSTEM_PROMPT,
    ITINERARY_USER_TEMPLATE,
    SUPER_PROMPT_SYSTEM_PROMPT,
    SUPER_PROMPT_USER_TEMPLATE,
)
from backend.src.data_classes import AIModel, ChatMessage, Role, TripItinerary
from backend.src.services.chat.exceptions import ItineraryGenerationError
from backend.src.services.llm.dispatcher import ModelDispatcher

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


def parse_json_reply(text: str) -> Any:
    """Parse a JSON reply, tolerating a surrounding markdown code fence."""
    stripped = text.strip()
    match = _CODE_FENCE.match(stripped)
    if match:
        stripped = match.group(1)
    return json.loads(stripped)


class PromptService:
    """Runs one-off generation tasks through the model dispatcher."""

    def __init__(self, dispatcher: ModelDispatcher) -> None:
        self.dispatcher = dispatcher

    def craft_super_prompt(self, prompt: str, model: Optional[AIModel] = None) -> str:
        """Rewrite a user prompt into a structured, verification-oriented prompt.

        Args:
            prompt: The prompt to enhance
            model: Model to use. If None, uses Config default

        Returns:
            The enhanced prompt text
        """
        messages = [
            ChatMessage(role=Role.SYSTEM, content=SUPER_PROMPT_SYSTEM_PROMPT),
            ChatMessage(
                role=Role.USER, content=SUPER_PROMPT_USER_TEMPLATE.format(prompt=prompt)
            ),
        ]
        reply = self.dispatcher.dispatch(messages, AIModel(model or Config.DEFAULT_MODEL))
        return reply.text

    def generate_itinerary(
        self, description: str, model: Optional[AIModel] = None
    ) -> TripItinerary:
        """Generate a day-by-day itinerary from a free-text trip description.

        Args:
            description: What the traveller wants
            model: Model to use. If None, uses Config default

        Returns:
            The validated itinerary

        Raises:
            ItineraryGenerationError: If the reply is not a valid itinerary
        """
        messages = [
            ChatMessage(role=Role.SYSTEM, content=ITINERARY_SYSTEM_PROMPT),
            ChatMessage(
                role=Role.USER,
                content=ITINERARY_USER_TEMPLATE.format(description=description),
            ),
        ]
        reply = self.dispatcher.dispatch(
            messages,
            AIModel(model or Config.DEFAULT_MODEL),
            max_tokens=Config.ITINERARY_MAX_TOKENS,
        )

        try:
            data = parse_json_reply(reply.text)
        except json.JSONDecodeError as e:
            logger.error(f"Itinerary reply is not valid JSON: {str(e)}")
            raise ItineraryGenerationError(
                "Failed to parse AI response. Please try again."
            ) from e

        try:
            return TripItinerary.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid itinerary structure received from AI: {str(e)}")
            raise ItineraryGenerationError(
                "Failed to generate itinerary. Please try again with a more detailed description."
            ) from e
