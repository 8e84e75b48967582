from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from services.prompts.base import BASE_PERSONA_PROMPT
from services.prompts.themes import get_theme_prompt

# Base and theme are separated by one blank line
THEME_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class PromptComposer:
    """
    Composes the system prompt as: Base persona + Optional topic theme.

    The theme is picked by exact match on the topic key the front-end sends
    as `chatId`. Unknown, empty or missing keys get the base persona alone.

    Themes are registered in `services.prompts.themes` so adding new ones is
    a small, explicit change.
    """

    @staticmethod
    def compose_system_prompt(chat_id: Optional[str]) -> str:
        theme_prompt = get_theme_prompt(chat_id) if isinstance(chat_id, str) else ""

        if not theme_prompt:
            return BASE_PERSONA_PROMPT

        return f"{BASE_PERSONA_PROMPT}{THEME_SEPARATOR}{theme_prompt}"
