"""Service factory module for centralized service instantiation.

This module provides factory methods for creating service instances,
keeping service initialization logic in one place. Credential presence is
checked here, once, when the services are built.
"""

import logging
from typing import Dict, Optional, Tuple

from backend.conf.config import Config
from backend.src.data_classes import Provider
from backend.src.services.auth import (
    AnonymousIdentityVerifier,
    BaseIdentityVerifier,
    SupabaseIdentityVerifier,
)
from backend.src.services.chat import ChatService, PromptService
from backend.src.services.llm import (
    AnthropicLLMService,
    BaseLLMService,
    ModelDispatcher,
    OpenAILLMService,
)
from backend.src.services.store import (
    ConversationStore,
    DocumentStore,
    InMemoryConversationStore,
    InMemoryDocumentStore,
    SqlConversationStore,
    SqlDocumentStore,
    create_sql_engine,
)

logger = logging.getLogger(__name__)


def create_llm_services() -> Dict[Provider, BaseLLMService]:
    """Create an LLM service for every provider with a configured API key.

    Returns:
        Mapping from provider family to its service
    """
    services: Dict[Provider, BaseLLMService] = {}

    if Config.OPENAI_API_KEY:
        services[Provider.OPENAI] = OpenAILLMService(
            api_key=Config.OPENAI_API_KEY, base_url=Config.OPENAI_BASE_URL
        )
    else:
        logger.warning("OPENAI_API_KEY not set, OpenAI models are disabled")

    if Config.ANTHROPIC_API_KEY:
        services[Provider.ANTHROPIC] = AnthropicLLMService(
            api_key=Config.ANTHROPIC_API_KEY, api_url=Config.ANTHROPIC_API_URL
        )
    else:
        logger.warning("ANTHROPIC_API_KEY not set, Anthropic models are disabled")

    return services


def create_dispatcher(
    services: Optional[Dict[Provider, BaseLLMService]] = None,
) -> ModelDispatcher:
    """Create the model dispatcher.

    Args:
        services: Provider services to use. If None, builds them from Config

    Returns:
        Configured ModelDispatcher instance
    """
    if services is None:
        services = create_llm_services()
    return ModelDispatcher(services)


def create_stores(
    database_url: Optional[str] = None,
) -> Tuple[ConversationStore, DocumentStore]:
    """Create the conversation and document stores.

    Uses the SQL backend when a database URL is configured and the in-memory
    backend otherwise.

    Args:
        database_url: SQLAlchemy URL. If None, uses Config.DATABASE_URL

    Returns:
        Tuple of (conversation store, document store) sharing one backend
    """
    database_url = database_url or Config.DATABASE_URL
    if database_url:
        logger.info("Using SQL storage backend")
        engine = create_sql_engine(database_url, echo=Config.SQL_ECHO)
        return SqlConversationStore(engine), SqlDocumentStore(engine)

    logger.warning("DATABASE_URL not set, using in-memory storage (data is lost on restart)")
    return InMemoryConversationStore(), InMemoryDocumentStore()


def create_identity_verifier() -> BaseIdentityVerifier:
    """Create the identity verifier for the auth gate.

    Returns:
        A Supabase verifier when configured, the anonymous verifier otherwise
    """
    if Config.SUPABASE_URL and Config.SUPABASE_ANON_KEY:
        logger.info("Using Supabase identity verification")
        return SupabaseIdentityVerifier(
            supabase_url=Config.SUPABASE_URL, api_key=Config.SUPABASE_ANON_KEY
        )

    logger.warning(
        "Identity provider not configured, all requests run as "
        f"'{Config.ANONYMOUS_USER_ID}'"
    )
    return AnonymousIdentityVerifier(Config.ANONYMOUS_USER_ID)


def create_chat_service(
    dispatcher: ModelDispatcher, conversation_store: ConversationStore
) -> ChatService:
    """Create and configure a ChatService instance."""
    return ChatService(dispatcher=dispatcher, conversation_store=conversation_store)


def create_prompt_service(dispatcher: ModelDispatcher) -> PromptService:
    """Create and configure a PromptService instance."""
    return PromptService(dispatcher=dispatcher)
