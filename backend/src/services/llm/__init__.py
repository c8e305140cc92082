"""LLM service package."""

from .dispatcher import DispatchResult, ModelDispatcher, split_system_prompt
from .exceptions import (
    ModelConfigurationError,
    ModelResponseError,
    ProviderAuthenticationError,
)
from .llm_service import AnthropicLLMService, BaseLLMService, OpenAILLMService

__all__ = [
    "BaseLLMService",
    "OpenAILLMService",
    "AnthropicLLMService",
    "ModelDispatcher",
    "DispatchResult",
    "split_system_prompt",
    "ModelConfigurationError",
    "ModelResponseError",
    "ProviderAuthenticationError",
]
