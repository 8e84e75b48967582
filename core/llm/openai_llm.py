from typing import Iterable, Optional

import openai
from openai import OpenAI

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


class OpenAILLMClient(LLMClient):
    """
    Client for any OpenAI-compatible Chat Completions API.

    DeepSeek speaks the same protocol, so it is served by this class with a
    different `base_url`.
    """

    provider = "openai"

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4.1",
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        provider: Optional[str] = None,
    ):
        client_kwargs = {"api_key": api_key, "max_retries": 0}
        if base_url:
            client_kwargs["base_url"] = base_url
        if timeout is not None:
            client_kwargs["timeout"] = timeout

        self.client = OpenAI(**client_kwargs)
        self.model = model
        if provider:
            self.provider = provider

    def chat(
        self,
        messages: Iterable[LLMMessage],
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        top_p: Optional[float] = None,
        frequency_penalty: Optional[float] = None,
        presence_penalty: Optional[float] = None,
    ) -> LLMResponse:
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=serialize_messages(messages),
                **completion_params(
                    temperature, max_tokens, top_p, frequency_penalty, presence_penalty
                ),
            )
        except openai.APIStatusError as e:
            raise LLMUpstreamStatusError(
                f"{self.provider} returned HTTP {e.status_code}", status_code=e.status_code
            ) from e
        except openai.APIConnectionError as e:
            raise LLMConnectionError(f"Could not reach {self.provider}: {e}") from e
        except (openai.APIResponseValidationError, ValueError) as e:
            raise LLMInvalidResponseError(
                f"Could not decode {self.provider} response: {e}"
            ) from e

        usage = getattr(response, "usage", None)

        return LLMResponse(
            text=first_choice_text(getattr(response, "choices", None)),
            model=getattr(response, "model", None) or self.model,
            prompt_tokens=getattr(usage, "prompt_tokens", None),
            completion_tokens=getattr(usage, "completion_tokens", None),
            total_tokens=getattr(usage, "total_tokens", None),
            raw=response,
        )
