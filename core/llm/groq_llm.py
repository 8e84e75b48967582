from typing import Iterable, Optional

import groq
from groq import Groq

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


class GroqLLMClient(LLMClient):
    provider = "groq"

    def __init__(
        self,
        api_key: str,
        model: str = "llama-3.3-70b-versatile",
        timeout: Optional[float] = None,
    ):
        client_kwargs = {"api_key": api_key, "max_retries": 0}
        if timeout is not None:
            client_kwargs["timeout"] = timeout

        self.client = Groq(**client_kwargs)
        self.model = model

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
        except groq.APIStatusError as e:
            raise LLMUpstreamStatusError(
                f"groq returned HTTP {e.status_code}", status_code=e.status_code
            ) from e
        except groq.APIConnectionError as e:
            raise LLMConnectionError(f"Could not reach groq: {e}") from e
        except (groq.APIResponseValidationError, ValueError) as e:
            raise LLMInvalidResponseError(f"Could not decode groq response: {e}") from e

        # Groq usage object is OpenAI-compatible, but be defensive
        usage = getattr(response, "usage", None)

        return LLMResponse(
            text=first_choice_text(getattr(response, "choices", None)),
            model=self.model,
            prompt_tokens=getattr(usage, "prompt_tokens", None),
            completion_tokens=getattr(usage, "completion_tokens", None),
            total_tokens=getattr(usage, "total_tokens", None),
            raw=response.model_dump() if hasattr(response, "model_dump") else None,
        )
