"""Unit tests for the model dispatcher."""

import unittest
from unittest.mock import Mock

from backend.conf.prompts import FALLBACK_RESPONSE
from backend.src.data_classes import AIModel, ChatMessage, Provider, Role
from backend.src.services.llm import (
    BaseLLMService,
    ModelConfigurationError,
    ModelDispatcher,
    ModelResponseError,
    ProviderAuthenticationError,
)


class TestModelDispatcher(unittest.TestCase):
    """Test cases for routing, aliasing and error normalisation."""

    def setUp(self) -> None:
        """Set up a dispatcher with both providers mocked."""
        self.openai = Mock(spec=BaseLLMService)
        self.openai.generate_response.return_value = "from openai"
        self.anthropic = Mock(spec=BaseLLMService)
        self.anthropic.generate_response.return_value = "from anthropic"
        self.dispatcher = ModelDispatcher(
            {Provider.OPENAI: self.openai, Provider.ANTHROPIC: self.anthropic}
        )
        self.messages = [
            ChatMessage(role=Role.SYSTEM, content="Be brief."),
            ChatMessage(role=Role.USER, content="Hello"),
        ]

    def test_routes_openai_model_with_alias(self) -> None:
        """gpt-4.1-mini is sent to OpenAI as gpt-4o-mini."""
        # Execute
        result = self.dispatcher.dispatch(self.messages, AIModel.GPT_4_1_MINI)

        # Assert
        self.assertEqual(result.text, "from openai")
        self.assertEqual(result.model_used, AIModel.GPT_4_1_MINI)
        self.anthropic.generate_response.assert_not_called()
        kwargs = self.openai.generate_response.call_args.kwargs
        self.assertEqual(kwargs["model_name"], "gpt-4o-mini")

    def test_routes_anthropic_model_with_system_prompt(self) -> None:
        """The leading system message becomes the provider system prompt."""
        # Execute
        result = self.dispatcher.dispatch(self.messages, AIModel.CLAUDE_SONNET_3_7)

        # Assert
        self.assertEqual(result.text, "from anthropic")
        self.assertEqual(result.model_used, AIModel.CLAUDE_SONNET_3_7)
        args = self.anthropic.generate_response.call_args
        turns = args.args[0]
        self.assertEqual([m.content for m in turns], ["Hello"])
        self.assertEqual(args.kwargs["system_prompt"], "Be brief.")
        self.assertEqual(args.kwargs["model_name"], "claude-3-5-sonnet-20241022")

    def test_max_tokens_is_forwarded(self) -> None:
        """Callers can raise the generation limit."""
        self.dispatcher.dispatch(self.messages, AIModel.GPT_4O, max_tokens=2000)

        self.assertEqual(self.openai.generate_response.call_args.kwargs["max_tokens"], 2000)

    def test_missing_provider_is_a_configuration_error(self) -> None:
        """No fallback to another provider when a key is missing."""
        dispatcher = ModelDispatcher({Provider.OPENAI: self.openai})

        with self.assertRaises(ModelConfigurationError) as ctx:
            dispatcher.dispatch(self.messages, AIModel.CLAUDE_4_OPUS)

        self.assertIn("Anthropic API key is not configured", str(ctx.exception))
        self.assertIn("claude-4-opus", str(ctx.exception))
        self.openai.generate_response.assert_not_called()

    def test_is_available(self) -> None:
        """Availability follows the configured providers."""
        dispatcher = ModelDispatcher({Provider.ANTHROPIC: self.anthropic})

        self.assertTrue(dispatcher.is_available(AIModel.CLAUDE_HAIKU_3_5))
        self.assertFalse(dispatcher.is_available(AIModel.GPT_4O))

    def test_empty_messages_rejected(self) -> None:
        """At least one message is required."""
        with self.assertRaises(ValueError):
            self.dispatcher.dispatch([], AIModel.GPT_4O)

    def test_empty_reply_uses_fallback(self) -> None:
        """Blank provider output is replaced by the fallback text."""
        self.openai.generate_response.return_value = "   "

        result = self.dispatcher.dispatch(self.messages, AIModel.GPT_4O)

        self.assertEqual(result.text, FALLBACK_RESPONSE)

    def test_authentication_failure_is_normalised(self) -> None:
        """Rejected credentials surface as a readable response error."""
        self.anthropic.generate_response.side_effect = ProviderAuthenticationError("401")

        with self.assertRaises(ModelResponseError) as ctx:
            self.dispatcher.dispatch(self.messages, AIModel.CLAUDE_4_SONNET)

        self.assertEqual(
            str(ctx.exception),
            "Authentication failed for claude-4-sonnet. "
            "Please check your API key configuration.",
        )

    def test_provider_failure_is_normalised(self) -> None:
        """Any other provider error becomes a generic response error."""
        self.openai.generate_response.side_effect = ConnectionError("boom")

        with self.assertRaises(ModelResponseError) as ctx:
            self.dispatcher.dispatch(self.messages, AIModel.GPT_4_1)

        self.assertEqual(
            str(ctx.exception),
            "Failed to generate response with gpt-4.1. Please try again.",
        )
        self.assertEqual(self.openai.generate_response.call_count, 1)


if __name__ == "__main__":
    unittest.main()
