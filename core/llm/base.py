from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, List, Literal, Optional


@dataclass(frozen=True)
class LLMMessage:
    role: Literal["system", "user", "assistant"]
    content: str


@dataclass(frozen=True)
class LLMResponse:
    # None when the provider answered without usable content
    text: Optional[str]
    model: str
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None
    raw: Optional[Any] = None


class LLMClient(ABC):
    """
    A single chat-completion provider.

    Implementations issue exactly one request per `chat` call and translate
    provider failures into `core.llm.exceptions.LLMError` subclasses.
    """

    provider: str = ""

    @abstractmethod
    def chat(
        self,
        messages: Iterable[LLMMessage],
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        top_p: Optional[float] = None,
        frequency_penalty: Optional[float] = None,
        presence_penalty: Optional[float] = None,
    ) -> LLMResponse:
        raise NotImplementedError


def serialize_messages(messages: Iterable[LLMMessage]) -> List[dict]:
    return [{"role": m.role, "content": m.content} for m in messages]


def first_choice_text(choices: Any) -> Optional[str]:
    """
    Return the content of the first choice of a completion, or None.

    Accepts both SDK response objects and plain decoded JSON, since the
    providers disagree on which one they hand back.
    """
    if not choices:
        return None
    try:
        choice = choices[0]
    except (IndexError, KeyError, TypeError):
        return None

    message = choice.get("message") if isinstance(choice, dict) else getattr(choice, "message", None)
    if message is None:
        return None

    content = message.get("content") if isinstance(message, dict) else getattr(message, "content", None)
    if not isinstance(content, str) or not content:
        return None
    return content


def completion_params(
    temperature: float,
    max_tokens: Optional[int],
    top_p: Optional[float],
    frequency_penalty: Optional[float],
    presence_penalty: Optional[float],
) -> dict:
    """Sampling parameters for an OpenAI-compatible request, unset ones omitted."""
    params = {"temperature": temperature}
    if max_tokens is not None:
        params["max_tokens"] = max_tokens
    if top_p is not None:
        params["top_p"] = top_p
    if frequency_penalty is not None:
        params["frequency_penalty"] = frequency_penalty
    if presence_penalty is not None:
        params["presence_penalty"] = presence_penalty
    return params
