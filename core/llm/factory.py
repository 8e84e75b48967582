"""
Factory for creating LLM clients based on Django settings.

Credentials and model names are read from settings (populated from the
environment at start-up) and injected into the client here, so nothing
below this layer reads the environment.
"""

import logging

from django.conf import settings

from core.llm.base import LLMClient
from core.llm.exceptions import LLMConfigurationError

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("deepseek", "deepseek_http", "openai", "groq")


def _require_api_key(provider: str, setting_name: str) -> str:
    api_key = getattr(settings, setting_name, "")
    if not api_key:
        error_msg = (
            f"LLM_PROVIDER is set to '{provider}' but {setting_name} is not set. "
            f"Please set {setting_name} or change LLM_PROVIDER."
        )
        logger.error(error_msg)
        raise LLMConfigurationError(error_msg)
    return api_key


def get_llm_client() -> LLMClient:
    """
    Get the configured LLM client.

    Supported providers:
    - "deepseek": OpenAI SDK pointed at DEEPSEEK_BASE_URL (default)
    - "deepseek_http": plain `requests` call to DEEPSEEK_BASE_URL
    - "openai": OpenAI SDK (requires OPENAI_API_KEY)
    - "groq": Groq SDK (requires GROQ_API_KEY)

    Raises:
        LLMConfigurationError: If the provider's API key is not set
        LLMConfigurationError: If the provider is not recognized
    """
    provider = (getattr(settings, "LLM_PROVIDER", "") or "deepseek").strip().lower()
    timeout = getattr(settings, "LLM_TIMEOUT_SECONDS", None)

    if provider == "deepseek":
        from core.llm.openai_llm import OpenAILLMClient

        return OpenAILLMClient(
            api_key=_require_api_key(provider, "DEEPSEEK_API_KEY"),
            model=settings.DEEPSEEK_MODEL,
            base_url=settings.DEEPSEEK_BASE_URL,
            timeout=timeout,
            provider="deepseek",
        )

    if provider == "deepseek_http":
        from core.llm.deepseek_http import DeepSeekHTTPClient

        return DeepSeekHTTPClient(
            api_key=_require_api_key(provider, "DEEPSEEK_API_KEY"),
            model=settings.DEEPSEEK_MODEL,
            base_url=settings.DEEPSEEK_BASE_URL,
            timeout=timeout,
        )

    if provider == "openai":
        from core.llm.openai_llm import OpenAILLMClient

        return OpenAILLMClient(
            api_key=_require_api_key(provider, "OPENAI_API_KEY"),
            model=settings.OPENAI_MODEL,
            timeout=timeout,
        )

    if provider == "groq":
        from core.llm.groq_llm import GroqLLMClient

        return GroqLLMClient(
            api_key=_require_api_key(provider, "GROQ_API_KEY"),
            model=settings.GROQ_MODEL,
            timeout=timeout,
        )

    error_msg = (
        f"Unknown LLM_PROVIDER: '{provider}'. "
        f"Supported providers are: {', '.join(SUPPORTED_PROVIDERS)}"
    )
    logger.error(error_msg)
    raise LLMConfigurationError(error_msg)
