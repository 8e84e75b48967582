"""
Completion proxy behind the `/api/chat` endpoint.

This module handles one chat turn end to end:
- Composes the system prompt for the requested topic
- Issues exactly one call to the configured LLM provider
- Maps every outcome to a reply the front-end can render

Failures never propagate to the caller. They are logged with their detail
and surfaced to the user as a single in-character apology, while the
internal error kind stays available on the returned `ChatReply`.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.constants import APOLOGY_RESPONSE, PLACEHOLDER_RESPONSE
from core.llm.base import LLMClient, LLMMessage
from core.llm.exceptions import (
    LLMConfigurationError,
    LLMConnectionError,
    LLMInvalidResponseError,
    LLMUpstreamStatusError,
)
from core.llm.factory import get_llm_client
from services.prompts import PromptComposer

logger = logging.getLogger(__name__)

# Same for every topic
GENERATION_PARAMS = {
    "temperature": 0.7,
    "max_tokens": 2000,
    "top_p": 0.95,
    "frequency_penalty": 0.1,
    "presence_penalty": 0.1,
}


class ChatErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    UPSTREAM_STATUS = "upstream_status"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    INVALID_PAYLOAD = "invalid_payload"
    INVALID_REQUEST = "invalid_request"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class ChatReply:
    text: str
    status_code: int = 200
    error_kind: Optional[ChatErrorKind] = None
    used_placeholder: bool = False

    @classmethod
    def failure(cls, error_kind: ChatErrorKind) -> "ChatReply":
        return cls(text=APOLOGY_RESPONSE, status_code=500, error_kind=error_kind)


class ChatService:
    """
    Proxies a single user message to the LLM provider.

    The client can be injected; otherwise it is built from settings on first
    use, so a missing credential fails the request that needed it rather
    than the whole process.
    """

    def __init__(self, client: Optional[LLMClient] = None):
        self._client = client

    @property
    def client(self) -> LLMClient:
        if self._client is None:
            self._client = get_llm_client()
        return self._client

    @staticmethod
    def build_messages(message: str, chat_id: Optional[str]) -> list:
        system_prompt = PromptComposer.compose_system_prompt(chat_id)
        return [
            LLMMessage(role="system", content=system_prompt),
            LLMMessage(role="user", content=message),
        ]

    def reply(self, message: str, chat_id: Optional[str]) -> ChatReply:
        """
        Get the completion for `message` under the persona for `chat_id`.

        Args:
            message: The user's text, forwarded as-is (may be empty)
            chat_id: Topic key selecting the persona addendum

        Returns:
            ChatReply with the completion text, the placeholder when the
            provider answered without content, or the apology on failure
        """
        try:
            client = self.client
            messages = self.build_messages(message, chat_id)

            logger.info(
                "Requesting chat completion",
                extra={
                    "provider": client.provider,
                    "chat_id": chat_id,
                    "message_length": len(message),
                },
            )
            response = client.chat(messages, **GENERATION_PARAMS)

        except LLMConfigurationError as e:
            logger.error(f"LLM provider is not configured: {e}")
            return ChatReply.failure(ChatErrorKind.CONFIGURATION)
        except LLMUpstreamStatusError as e:
            logger.error(f"LLM provider returned an error status: {e}")
            return ChatReply.failure(ChatErrorKind.UPSTREAM_STATUS)
        except LLMConnectionError as e:
            logger.error(f"LLM provider is unreachable: {e}")
            return ChatReply.failure(ChatErrorKind.UPSTREAM_UNAVAILABLE)
        except LLMInvalidResponseError as e:
            logger.error(f"LLM provider response could not be decoded: {e}")
            return ChatReply.failure(ChatErrorKind.INVALID_PAYLOAD)
        except Exception as e:
            logger.error(f"Unexpected error during chat completion: {str(e)}", exc_info=True)
            return ChatReply.failure(ChatErrorKind.UNEXPECTED)

        if not response.text:
            logger.warning(
                "LLM provider returned no completion content, using placeholder",
                extra={"chat_id": chat_id},
            )
            return ChatReply(text=PLACEHOLDER_RESPONSE, used_placeholder=True)

        return ChatReply(text=response.text)
