"""Service module for interacting with large language model providers.

This module provides a common interface over the supported providers:
- OpenAI: chat completions through the OpenAI SDK
- Anthropic: the Messages HTTP API through ``requests``

Each service makes exactly one outbound call per request and returns the raw
reply text, which may be empty; policy on empty replies lives in the dispatcher.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

import openai
import requests
from openai import OpenAI

from backend.conf.config import Config
from backend.conf.prompts import CHAT_SYSTEM_PROMPT
from backend.src.data_classes import ChatMessage
from backend.src.services.llm.exceptions import ProviderAuthenticationError

logger = logging.getLogger(__name__)


class BaseLLMService(ABC):
    """Base class for LLM services.

    This abstract class defines the interface that all LLM services must implement.
    """

    @abstractmethod
    def generate_response(
        self,
        messages: Sequence[ChatMessage],
        model_name: str,
        system_prompt: str = "",
        max_tokens: Optional[int] = None,
    ) -> str:
        """Generate a response from the model based on the conversation.

        Args:
            messages: User/assistant turns, oldest first
            model_name: Backend model name understood by the provider
            system_prompt: Provider-level system instructions
            max_tokens: Maximum number of tokens to generate. If None, uses Config default

        Returns:
            str: Generated response text, possibly empty

        Raises:
            ProviderAuthenticationError: If the provider rejects the credential
            Exception: Any transport or provider error, unchanged
        """


class OpenAILLMService(BaseLLMService):
    """Service for interacting with OpenAI's chat completions API."""

    def __init__(self, api_key: str, base_url: Optional[str] = None, client: Any = None):
        """Initialize the OpenAI LLM service.

        Args:
            api_key: OpenAI API key
            base_url: Optional API base URL override
            client: Pre-built client, mainly for tests
        """
        if not api_key and client is None:
            raise ValueError(
                "OpenAI API key not found. Please set the OPENAI_API_KEY environment variable."
            )
        # Retries are disabled so one dispatch is one outbound call
        self.client = client or OpenAI(api_key=api_key, base_url=base_url, max_retries=0)
        logger.info("Initialized OpenAI LLM service")

    def generate_response(
        self,
        messages: Sequence[ChatMessage],
        model_name: str,
        system_prompt: str = "",
        max_tokens: Optional[int] = None,
    ) -> str:
        """Generate a response using OpenAI's API.

        Args:
            messages: User/assistant turns, oldest first
            model_name: OpenAI model name
            system_prompt: Sent as a leading system message when non-empty
            max_tokens: Maximum number of tokens to generate. If None, uses Config default

        Returns:
            str: Generated response text, empty if the API returned none
        """
        api_messages: List[Dict[str, str]] = []
        if system_prompt:
            api_messages.append({"role": "system", "content": system_prompt})
        api_messages.extend(message.to_dict() for message in messages)

        try:
            response = self.client.chat.completions.create(
                model=model_name,
                messages=api_messages,
                temperature=Config.LLM_TEMPERATURE,
                max_tokens=max_tokens or Config.LLM_MAX_TOKENS,
            )
        except openai.AuthenticationError as e:
            raise ProviderAuthenticationError(str(e)) from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""


class AnthropicLLMService(BaseLLMService):
    """Service for interacting with Anthropic's Messages API."""

    def __init__(
        self,
        api_key: str,
        api_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the Anthropic LLM service.

        Args:
            api_key: Anthropic API key
            api_url: Messages endpoint URL. If None, uses Config default
            session: Pre-built HTTP session, mainly for tests
        """
        if not api_key:
            raise ValueError(
                "Anthropic API key not found. Please set the ANTHROPIC_API_KEY environment variable."
            )
        self.api_key = api_key
        self.api_url = api_url or Config.ANTHROPIC_API_URL
        # Plain session without a retry adapter
        self.session = session or requests.Session()
        logger.info(f"Initialized Anthropic LLM service at {self.api_url}")

    def generate_response(
        self,
        messages: Sequence[ChatMessage],
        model_name: str,
        system_prompt: str = "",
        max_tokens: Optional[int] = None,
    ) -> str:
        """Generate a response using Anthropic's API.

        Args:
            messages: User/assistant turns, oldest first
            model_name: Anthropic model name
            system_prompt: System instructions; the default assistant prompt if empty
            max_tokens: Maximum number of tokens to generate. If None, uses Config default

        Returns:
            str: Text of the first text block, empty if there is none
        """
        payload: Dict[str, Any] = {
            "model": model_name,
            "max_tokens": max_tokens or Config.LLM_MAX_TOKENS,
            "temperature": Config.LLM_TEMPERATURE,
            "system": system_prompt or CHAT_SYSTEM_PROMPT,
            "messages": [message.to_dict() for message in messages],
        }
        headers = {
            "Content-Type": "application/json",
            "x-api-key": self.api_key,
            "anthropic-version": Config.ANTHROPIC_API_VERSION,
        }

        response = self.session.post(
            self.api_url, json=payload, headers=headers, timeout=Config.ANTHROPIC_TIMEOUT
        )
        if response.status_code in (401, 403):
            raise ProviderAuthenticationError(
                f"Anthropic rejected the API key (HTTP {response.status_code})"
            )
        response.raise_for_status()

        data: Dict[str, Any] = response.json()
        for block in data.get("content") or []:
            if block.get("type") == "text":
                return block.get("text") or ""
        return ""
