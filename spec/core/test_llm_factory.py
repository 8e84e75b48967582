"""
Tests for the LLM client factory.

This module tests the factory function that creates LLM clients based on
the LLM_PROVIDER setting.
"""

from unittest.mock import patch

from django.test import TestCase, override_settings

from core.llm.deepseek_http import DeepSeekHTTPClient
from core.llm.exceptions import LLMConfigurationError
from core.llm.factory import get_llm_client
from core.llm.groq_llm import GroqLLMClient
from core.llm.openai_llm import OpenAILLMClient


class LLMFactoryTest(TestCase):
    """Tests for the LLM client factory."""

    @override_settings(
        LLM_PROVIDER="deepseek",
        DEEPSEEK_API_KEY="test-key",
        DEEPSEEK_MODEL="deepseek-chat",
        DEEPSEEK_BASE_URL="https://api.deepseek.com/v1",
        LLM_TIMEOUT_SECONDS=None,
    )
    @patch("core.llm.openai_llm.OpenAI")
    def test_factory_returns_sdk_client_pointed_at_deepseek(self, mock_openai):
        client = get_llm_client()

        self.assertIsInstance(client, OpenAILLMClient)
        self.assertEqual(client.provider, "deepseek")
        self.assertEqual(client.model, "deepseek-chat")
        mock_openai.assert_called_once_with(
            api_key="test-key", max_retries=0, base_url="https://api.deepseek.com/v1"
        )

    @override_settings(
        LLM_PROVIDER="deepseek_http",
        DEEPSEEK_API_KEY="test-key",
        DEEPSEEK_BASE_URL="https://api.deepseek.com/v1/",
    )
    def test_factory_returns_http_client(self):
        client = get_llm_client()

        self.assertIsInstance(client, DeepSeekHTTPClient)
        self.assertEqual(client.api_key, "test-key")
        self.assertEqual(client.api_url, "https://api.deepseek.com/v1/chat/completions")

    @override_settings(LLM_PROVIDER="openai", OPENAI_API_KEY="test-key", OPENAI_MODEL="gpt-4.1")
    @patch("core.llm.openai_llm.OpenAI")
    def test_factory_returns_openai_client(self, mock_openai):
        client = get_llm_client()

        self.assertIsInstance(client, OpenAILLMClient)
        self.assertEqual(client.provider, "openai")
        self.assertEqual(client.model, "gpt-4.1")

    @override_settings(LLM_PROVIDER="groq", GROQ_API_KEY="test-key")
    @patch("core.llm.groq_llm.Groq")
    def test_factory_returns_groq_client(self, mock_groq):
        client = get_llm_client()

        self.assertIsInstance(client, GroqLLMClient)

    @override_settings(LLM_PROVIDER="GROQ", GROQ_API_KEY="test-key")
    @patch("core.llm.groq_llm.Groq")
    def test_factory_is_case_insensitive(self, mock_groq):
        self.assertIsInstance(get_llm_client(), GroqLLMClient)

    @override_settings(LLM_PROVIDER="", DEEPSEEK_API_KEY="test-key")
    @patch("core.llm.openai_llm.OpenAI")
    def test_factory_defaults_to_deepseek(self, mock_openai):
        client = get_llm_client()

        self.assertEqual(client.provider, "deepseek")

    @override_settings(LLM_TIMEOUT_SECONDS=12.5, LLM_PROVIDER="deepseek", DEEPSEEK_API_KEY="k")
    @patch("core.llm.openai_llm.OpenAI")
    def test_factory_passes_configured_timeout(self, mock_openai):
        get_llm_client()

        self.assertEqual(mock_openai.call_args.kwargs["timeout"], 12.5)

    @override_settings(LLM_PROVIDER="deepseek", DEEPSEEK_API_KEY="")
    @patch("core.llm.openai_llm.OpenAI")
    def test_factory_raises_error_when_api_key_missing(self, mock_openai):
        with self.assertRaises(LLMConfigurationError) as context:
            get_llm_client()

        self.assertIn("DEEPSEEK_API_KEY", str(context.exception))
        self.assertIn("not set", str(context.exception))
        mock_openai.assert_not_called()

    @override_settings(LLM_PROVIDER="unknown")
    def test_factory_raises_error_for_unknown_provider(self):
        with self.assertRaises(LLMConfigurationError) as context:
            get_llm_client()

        self.assertIn("Unknown LLM_PROVIDER", str(context.exception))
        self.assertIn("unknown", str(context.exception))
