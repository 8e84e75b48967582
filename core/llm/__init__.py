from core.llm.base import LLMClient, LLMMessage, LLMResponse
from core.llm.exceptions import (
    LLMConfigurationError,
    LLMConnectionError,
    LLMError,
    LLMInvalidResponseError,
    LLMUpstreamStatusError,
)
from core.llm.factory import get_llm_client

__all__ = [
    "LLMClient",
    "LLMMessage",
    "LLMResponse",
    "LLMError",
    "LLMConfigurationError",
    "LLMConnectionError",
    "LLMInvalidResponseError",
    "LLMUpstreamStatusError",
    "get_llm_client",
]
