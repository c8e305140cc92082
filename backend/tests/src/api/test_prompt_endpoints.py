"""Integration tests for the prompt enhancement and itinerary routes."""

import json
import unittest
from unittest.mock import Mock

from backend.app import create_app
from backend.src.data_classes import Provider
from backend.src.services.auth import AnonymousIdentityVerifier
from backend.src.services.llm import BaseLLMService, ModelDispatcher
from backend.src.services.store import InMemoryConversationStore, InMemoryDocumentStore


class TestPromptEndpoints(unittest.TestCase):
    """Test cases for the single-shot generation routes."""

    def setUp(self) -> None:
        """Set up an app with a mocked Anthropic provider only."""
        self.anthropic = Mock(spec=BaseLLMService)
        self.app = create_app(
            dispatcher=ModelDispatcher({Provider.ANTHROPIC: self.anthropic}),
            conversation_store=InMemoryConversationStore(),
            document_store=InMemoryDocumentStore(),
            identity_verifier=AnonymousIdentityVerifier(),
        )
        self.app.config["TESTING"] = True
        self.client = self.app.test_client()

    def test_craft_super_prompt(self) -> None:
        self.anthropic.generate_response.return_value = "You are a poet specializing in..."

        response = self.client.post(
            "/api/craft-super-prompt",
            json={"prompt": "write a poem", "model": "claude-haiku-3.5"},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.get_json(),
            {"success": True, "enhancedPrompt": "You are a poet specializing in..."},
        )

    def test_craft_super_prompt_default_model_unavailable(self) -> None:
        """The default OpenAI model cannot be used without its key."""
        response = self.client.post("/api/craft-super-prompt", json={"prompt": "x"})

        self.assertEqual(response.status_code, 400)
        self.assertIn("OpenAI API key is not configured", response.get_json()["error"])

    def test_itinerary(self) -> None:
        self.anthropic.generate_response.return_value = json.dumps(
            {
                "destination": "Kyoto, Japan",
                "duration": "1 day",
                "totalBudget": "$200",
                "overview": "Temples",
                "days": [{"day": 1, "date": "Monday", "activities": [], "totalCost": "$200"}],
            }
        )

        response = self.client.post(
            "/api/itinerary",
            json={"description": "A day of temples in Kyoto", "model": "claude-4-sonnet"},
        )

        self.assertEqual(response.status_code, 200)
        itinerary = response.get_json()["itinerary"]
        self.assertEqual(itinerary["destination"], "Kyoto, Japan")
        self.assertEqual(itinerary["days"][0]["totalCost"], "$200")

    def test_itinerary_bad_reply(self) -> None:
        self.anthropic.generate_response.return_value = "Here you go!"

        response = self.client.post(
            "/api/itinerary", json={"description": "Kyoto", "model": "claude-4-sonnet"}
        )

        self.assertEqual(response.status_code, 500)
        self.assertEqual(
            response.get_json()["error"], "Failed to parse AI response. Please try again."
        )

    def test_itinerary_requires_description(self) -> None:
        response = self.client.post("/api/itinerary", json={"description": ""})

        self.assertEqual(response.status_code, 400)
        self.assertIn("Please describe your trip", response.get_json()["error"])


if __name__ == "__main__":
    unittest.main()
