"""Routes chat requests to the provider serving the requested model."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from backend.conf.prompts import FALLBACK_RESPONSE
from backend.src.data_classes import AIModel, ChatMessage, Provider, Role, resolve_model
from backend.src.services.llm.exceptions import (
    ModelConfigurationError,
    ModelResponseError,
    ProviderAuthenticationError,
)
from backend.src.services.llm.llm_service import BaseLLMService

logger = logging.getLogger(__name__)


@dataclass
class DispatchResult:
    """Normalised model reply.

    Attributes:
        text: Reply text, never empty
        model_used: The logical model that was requested
    """

    text: str
    model_used: AIModel


def split_system_prompt(
    messages: Sequence[ChatMessage],
) -> Tuple[str, List[ChatMessage]]:
    """Separate a leading system message from the conversation turns."""
    if messages and Role(messages[0].role) == Role.SYSTEM:
        return messages[0].content, list(messages[1:])
    return "", list(messages)


class ModelDispatcher:
    """Dispatch messages to the LLM service of the model's provider family.

    Providers without a configured service are unavailable; requesting one of
    their models fails immediately instead of falling back to another model.
    """

    def __init__(self, services: Dict[Provider, BaseLLMService]) -> None:
        self.services = dict(services)
        logger.info(
            "Model dispatcher ready with providers: "
            f"{sorted(provider.value for provider in self.services) or 'none'}"
        )

    def is_available(self, model: AIModel) -> bool:
        return resolve_model(model).provider in self.services

    def dispatch(
        self,
        messages: Sequence[ChatMessage],
        model: AIModel,
        max_tokens: Optional[int] = None,
    ) -> DispatchResult:
        """Generate a reply for the messages with the given model.

        Args:
            messages: Ordered messages; a leading system message becomes the
                provider-level system prompt
            model: Logical model id
            max_tokens: Optional generation limit passed to the provider

        Returns:
            DispatchResult carrying the reply and the requested model id

        Raises:
            ValueError: If no messages are given
            ModelConfigurationError: If the model's provider is not configured
            ModelResponseError: If the provider call fails
        """
        if not messages:
            raise ValueError("At least one message is required")

        route = resolve_model(model)
        service = self.services.get(route.provider)
        if service is None:
            raise ModelConfigurationError(
                f"{route.provider.display_name} API key is not configured. "
                f"Model {route.model.value} is unavailable."
            )

        system_prompt, turns = split_system_prompt(messages)
        logger.info(
            f"Dispatching {len(turns)} messages to {route.provider.value} "
            f"({route.model.value} -> {route.backend_model})"
        )

        try:
            text = service.generate_response(
                turns,
                model_name=route.backend_model,
                system_prompt=system_prompt,
                max_tokens=max_tokens,
            )
        except ProviderAuthenticationError as e:
            logger.error(f"Authentication failed for {route.model.value}: {str(e)}")
            raise ModelResponseError(
                f"Authentication failed for {route.model.value}. "
                "Please check your API key configuration."
            ) from e
        except Exception as e:
            logger.error(f"Error generating response with {route.model.value}: {str(e)}")
            raise ModelResponseError(
                f"Failed to generate response with {route.model.value}. Please try again."
            ) from e

        if not text or not text.strip():
            logger.warning(f"Empty reply from {route.model.value}, using fallback text")
            text = FALLBACK_RESPONSE

        return DispatchResult(text=text, model_used=route.model)
