"""Unit tests for the model catalogue."""

import unittest

from backend.src.data_classes import AIModel, Provider, provider_for, resolve_model


class TestModelCatalogue(unittest.TestCase):
    """Test cases for provider selection and backend aliasing."""

    def test_claude_prefix_selects_anthropic(self) -> None:
        """Every claude- model is served by Anthropic."""
        for model in AIModel:
            expected = (
                Provider.ANTHROPIC if model.value.startswith("claude-") else Provider.OPENAI
            )
            self.assertEqual(provider_for(model), expected, model.value)

    def test_provider_families_are_disjoint_and_complete(self) -> None:
        """The two families partition the catalogue."""
        openai_models = {m for m in AIModel if provider_for(m) == Provider.OPENAI}
        anthropic_models = {m for m in AIModel if provider_for(m) == Provider.ANTHROPIC}

        self.assertEqual(
            openai_models, {AIModel.GPT_4O, AIModel.GPT_4_1, AIModel.GPT_4_1_MINI}
        )
        self.assertEqual(len(anthropic_models), 5)
        self.assertFalse(openai_models & anthropic_models)

    def test_backend_aliases(self) -> None:
        """Logical names map onto the documented backend models."""
        expected = {
            AIModel.GPT_4O: "gpt-4o",
            AIModel.GPT_4_1: "gpt-4o",
            AIModel.GPT_4_1_MINI: "gpt-4o-mini",
            AIModel.CLAUDE_3_5_SONNET: "claude-3-5-sonnet-20241022",
            AIModel.CLAUDE_SONNET_3_7: "claude-3-5-sonnet-20241022",
            AIModel.CLAUDE_HAIKU_3_5: "claude-3-haiku-20240307",
            AIModel.CLAUDE_4_OPUS: "claude-3-opus-20240229",
            AIModel.CLAUDE_4_SONNET: "claude-3-5-sonnet-20241022",
        }
        for model, backend_model in expected.items():
            self.assertEqual(resolve_model(model).backend_model, backend_model)

    def test_resolve_accepts_plain_strings(self) -> None:
        """Raw id strings resolve like enum members."""
        route = resolve_model("gpt-4.1-mini")  # type: ignore[arg-type]

        self.assertEqual(route.model, AIModel.GPT_4_1_MINI)
        self.assertEqual(route.display_name, "GPT-4.1 Mini")
        self.assertEqual(route.provider.display_name, "OpenAI")

    def test_resolve_rejects_unknown_model(self) -> None:
        """Unknown ids are not silently routed anywhere."""
        with self.assertRaises(ValueError):
            resolve_model("gpt-5")  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
