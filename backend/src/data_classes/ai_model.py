"""Supported chat models and their mapping onto provider backends.

Logical model ids are what clients send and what is stored in conversation
history. Each id belongs to exactly one provider family (decided by its prefix)
and aliases to a backend model name that is actually sent to the provider.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Provider(str, Enum):
    """Model provider families."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"

    @property
    def display_name(self) -> str:
        return _PROVIDER_DISPLAY_NAMES[self]


_PROVIDER_DISPLAY_NAMES: Dict[Provider, str] = {
    Provider.OPENAI: "OpenAI",
    Provider.ANTHROPIC: "Anthropic",
}

ANTHROPIC_MODEL_PREFIX = "claude-"


class AIModel(str, Enum):
    """Logical model identifiers accepted by the API."""

    GPT_4O = "gpt-4o"
    GPT_4_1 = "gpt-4.1"
    GPT_4_1_MINI = "gpt-4.1-mini"
    CLAUDE_3_5_SONNET = "claude-3-5-sonnet-20241022"
    CLAUDE_SONNET_3_7 = "claude-sonnet-3.7"
    CLAUDE_HAIKU_3_5 = "claude-haiku-3.5"
    CLAUDE_4_OPUS = "claude-4-opus"
    CLAUDE_4_SONNET = "claude-4-sonnet"


@dataclass(frozen=True)
class ModelRoute:
    """Where a logical model is served.

    Attributes:
        model: Logical model id requested by the client
        provider: Provider family serving the model
        backend_model: Model name sent to the provider API
        display_name: Human-readable model name
    """

    model: AIModel
    provider: Provider
    backend_model: str
    display_name: str


_BACKEND_MODELS: Dict[AIModel, str] = {
    AIModel.GPT_4O: "gpt-4o",
    AIModel.GPT_4_1: "gpt-4o",
    AIModel.GPT_4_1_MINI: "gpt-4o-mini",
    AIModel.CLAUDE_3_5_SONNET: "claude-3-5-sonnet-20241022",
    AIModel.CLAUDE_SONNET_3_7: "claude-3-5-sonnet-20241022",
    AIModel.CLAUDE_HAIKU_3_5: "claude-3-haiku-20240307",
    AIModel.CLAUDE_4_OPUS: "claude-3-opus-20240229",
    AIModel.CLAUDE_4_SONNET: "claude-3-5-sonnet-20241022",
}

_DISPLAY_NAMES: Dict[AIModel, str] = {
    AIModel.GPT_4O: "GPT-4o",
    AIModel.GPT_4_1: "GPT-4.1",
    AIModel.GPT_4_1_MINI: "GPT-4.1 Mini",
    AIModel.CLAUDE_3_5_SONNET: "Claude 3.5 Sonnet",
    AIModel.CLAUDE_SONNET_3_7: "Claude Sonnet 3.7",
    AIModel.CLAUDE_HAIKU_3_5: "Claude Haiku 3.5",
    AIModel.CLAUDE_4_OPUS: "Claude 4 Opus",
    AIModel.CLAUDE_4_SONNET: "Claude 4 Sonnet",
}


def provider_for(model: AIModel) -> Provider:
    """Return the provider family of a model, decided by its id prefix."""
    if model.value.startswith(ANTHROPIC_MODEL_PREFIX):
        return Provider.ANTHROPIC
    return Provider.OPENAI


def resolve_model(model: AIModel) -> ModelRoute:
    """Map a logical model id to its provider and backend model name.

    Args:
        model: Logical model id

    Returns:
        The route describing how the model is served
    """
    model = AIModel(model)
    return ModelRoute(
        model=model,
        provider=provider_for(model),
        backend_model=_BACKEND_MODELS[model],
        display_name=_DISPLAY_NAMES[model],
    )
