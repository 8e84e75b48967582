"""
Plain HTTPS client for the DeepSeek Chat Completions endpoint.

Talks to the API with `requests` instead of an SDK, for deployments that
cannot install the OpenAI client.
"""

import logging
from typing import Iterable, Optional

import requests

from core.llm.base import (
    LLMClient,
    LLMMessage,
    LLMResponse,
    completion_params,
    first_choice_text,
    serialize_messages,
)
from core.llm.exceptions import (
    LLMConnectionError,
    LLMInvalidResponseError,
    LLMUpstreamStatusError,
)

logger = logging.getLogger(__name__)


class DeepSeekHTTPClient(LLMClient):
    provider = "deepseek_http"

    def __init__(
        self,
        api_key: str,
        model: str = "deepseek-chat",
        base_url: str = "https://api.deepseek.com/v1",
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.api_url = f"{base_url.rstrip('/')}/chat/completions"
        self.timeout = timeout

    def chat(
        self,
        messages: Iterable[LLMMessage],
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        top_p: Optional[float] = None,
        frequency_penalty: Optional[float] = None,
        presence_penalty: Optional[float] = None,
    ) -> LLMResponse:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self.model,
            "messages": serialize_messages(messages),
            **completion_params(
                temperature, max_tokens, top_p, frequency_penalty, presence_penalty
            ),
        }

        try:
            response = requests.post(
                self.api_url, json=payload, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise LLMConnectionError(f"Could not reach DeepSeek: {e}") from e

        if not response.ok:
            # Error bodies are only useful for diagnostics
            logger.error(
                f"DeepSeek API error {response.status_code}: {response.text[:500]}"
            )
            raise LLMUpstreamStatusError(
                f"DeepSeek returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise LLMInvalidResponseError(f"Could not decode DeepSeek response: {e}") from e

        if not isinstance(data, dict):
            return LLMResponse(text=None, model=self.model, raw=data)

        usage = data.get("usage") if isinstance(data.get("usage"), dict) else {}

        return LLMResponse(
            text=first_choice_text(data.get("choices")),
            model=data.get("model") or self.model,
            prompt_tokens=usage.get("prompt_tokens"),
            completion_tokens=usage.get("completion_tokens"),
            total_tokens=usage.get("total_tokens"),
            raw=data,
        )
