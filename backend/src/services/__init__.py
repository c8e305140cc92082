"""Services package for backend functionality.

This package contains all service components for business logic.
"""

from .auth import (
    AnonymousIdentityVerifier,
    AuthenticatedUser,
    BaseIdentityVerifier,
    SupabaseIdentityVerifier,
)
from .chat import ChatResult, ChatService, PromptService
from .factory import (
    create_chat_service,
    create_dispatcher,
    create_identity_verifier,
    create_llm_services,
    create_prompt_service,
    create_stores,
)
from .llm import (
    AnthropicLLMService,
    BaseLLMService,
    DispatchResult,
    ModelDispatcher,
    OpenAILLMService,
)
from .store import ConversationStore, DocumentStore

__all__ = [
    # LLM Services
    "BaseLLMService",
    "OpenAILLMService",
    "AnthropicLLMService",
    "ModelDispatcher",
    "DispatchResult",
    # Other Services
    "ChatService",
    "ChatResult",
    "PromptService",
    "ConversationStore",
    "DocumentStore",
    "BaseIdentityVerifier",
    "SupabaseIdentityVerifier",
    "AnonymousIdentityVerifier",
    "AuthenticatedUser",
    # Factory Functions
    "create_llm_services",
    "create_dispatcher",
    "create_stores",
    "create_identity_verifier",
    "create_chat_service",
    "create_prompt_service",
]
